"""Data model: locations, index mappings and cost matrices."""

from odmatrix.model.location import (
    UNPLACED,
    Location,
    MatrixKey,
    Placed,
    PlacementKey,
    Unplaced,
)
from odmatrix.model.mapping import IndexMapping
from odmatrix.model.matrix import DenseCostMatrix, SparseCostMatrix

__all__ = [
    "Location",
    "PlacementKey",
    "Placed",
    "Unplaced",
    "UNPLACED",
    "MatrixKey",
    "IndexMapping",
    "SparseCostMatrix",
    "DenseCostMatrix",
]
