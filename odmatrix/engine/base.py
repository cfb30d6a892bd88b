"""Collaborator interface of the network analysis engine.

The engine owns solving, snapping and the deduplicated result. The core only
reads from it through this protocol.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from odmatrix.model.location import Location, PlacementKey
from odmatrix.model.matrix import SparseCostMatrix


@runtime_checkable
class CostMatrixEngine(Protocol):
    """Read access to a solved origin-destination cost matrix product."""

    def has_valid_result(self) -> bool:
        """Return True when a solved full matrix is available."""
        ...

    def solve(self) -> None:
        """Produce a full matrix result, or raise ``UnresolvableSourceError``."""
        ...

    def cost_matrix(self) -> SparseCostMatrix:
        """Return the deduplicated result."""
        ...

    def locations(self, is_origin: bool) -> List[Location]:
        """Return origin or destination rows in table order."""
        ...

    def find_index(self, placement_key: PlacementKey, is_origin: bool) -> int:
        """Return the internal matrix index for a placed location."""
        ...
