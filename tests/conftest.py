"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
import yaml

from odmatrix.model.location import Location, PlacementKey
from odmatrix.model.matrix import SparseCostMatrix

SAMPLE_DATA = Path(__file__).parent / "sample_data"


class StubEngine:
    """In-memory engine with fixed locations and an explicit index table."""

    def __init__(
        self,
        sparse: SparseCostMatrix,
        origins: List[Location],
        destinations: List[Location],
        origin_index: Dict[PlacementKey, int],
        destination_index: Dict[PlacementKey, int],
        valid: bool = True,
    ) -> None:
        self.sparse = sparse
        self.origins = origins
        self.destinations = destinations
        self.origin_index = origin_index
        self.destination_index = destination_index
        self.valid = valid
        self.solve_calls = 0
        self.lookups: List[tuple[PlacementKey, bool]] = []

    def has_valid_result(self) -> bool:
        return self.valid

    def solve(self) -> None:
        self.solve_calls += 1
        self.valid = True

    def cost_matrix(self) -> SparseCostMatrix:
        return self.sparse

    def locations(self, is_origin: bool) -> List[Location]:
        return list(self.origins if is_origin else self.destinations)

    def find_index(self, placement_key: PlacementKey, is_origin: bool) -> int:
        self.lookups.append((placement_key, is_origin))
        table = self.origin_index if is_origin else self.destination_index
        return table[placement_key]


@pytest.fixture
def sample_layer_path() -> Path:
    return SAMPLE_DATA / "downtown.yaml"


@pytest.fixture
def sample_layer_data(sample_layer_path: Path) -> Dict[str, Any]:
    """Fresh copy of the downtown layer as a dictionary."""
    with sample_layer_path.open("r", encoding="utf-8") as f:
        return copy.deepcopy(yaml.safe_load(f))


@pytest.fixture
def write_layer(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that dumps a layer dictionary to ``tmp_path``."""

    def _write(data: Dict[str, Any], name: str = "layer.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def stub_engine_factory() -> Callable[..., StubEngine]:
    return StubEngine


def placed(name: str, edge: int, position: float = 0.0) -> Location:
    return Location(name, is_placed=True, placement_key=PlacementKey(edge, position))


@pytest.fixture
def placed_location() -> Callable[..., Location]:
    """Factory for placed locations keyed by edge and position."""
    return placed
