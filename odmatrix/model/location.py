"""Named locations and the keys that tie them to internal matrix indices.

The solver deduplicates co-located origins (and destinations): every location
that snaps to the same network position with the same curb approach shares
one internal matrix row (or column). Locations the solver could not snap at
all have no internal index and are keyed by :data:`UNPLACED`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from odmatrix.types.base import CurbApproach


@dataclass(frozen=True)
class PlacementKey:
    """Opaque lookup value for a placed location.

    Combines the network position with the approach policy. Only the engine
    interprets it; the core passes it back to the index lookup unchanged.

    Attributes:
        edge_id: Identifier of the network edge the location snapped to.
        position: Fractional position along the edge in ``[0, 1]``.
        curb_approach: Side of the edge the location is approached from.
    """

    edge_id: int
    position: float
    curb_approach: CurbApproach = CurbApproach.EITHER_SIDE


@dataclass(frozen=True)
class Location:
    """An origin or destination row as listed by the engine.

    Attributes:
        name: Display name; may be empty, None, or shared with other rows.
        is_placed: Whether the engine snapped the location onto the network.
        placement_key: Lookup key; only meaningful when ``is_placed`` is True.
        resolved: False when the engine produced no location object for the
            row at all (neither placed nor unplaced).
    """

    name: Optional[str]
    is_placed: bool = False
    placement_key: Optional[PlacementKey] = None
    resolved: bool = True

    def __post_init__(self) -> None:
        if self.is_placed and self.placement_key is None:
            raise ValueError(
                f"Placed location '{self.name}' requires a placement_key"
            )


@dataclass(frozen=True, order=True)
class Placed:
    """Matrix key of a location that has an internal index."""

    index: int
    is_placed: bool = field(default=True, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Internal matrix index must be >= 0, got {self.index}")

    def sort_key(self) -> tuple[int, int]:
        return (1, self.index)


@dataclass(frozen=True)
class Unplaced:
    """Matrix key shared by every location the solver could not place.

    Sorts before every :class:`Placed` key so unplaced rows and columns come
    first in the dense output.
    """

    is_placed: bool = field(default=False, init=False, repr=False, compare=False)

    def sort_key(self) -> tuple[int, int]:
        return (0, 0)


#: The single unplaced key instance.
UNPLACED = Unplaced()

#: Key of a group in an index mapping.
MatrixKey = Union[Placed, Unplaced]
