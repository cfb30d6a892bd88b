"""odmatrix: dense CSV cost matrices from solved OD cost matrix layers.

A network analysis solver stores origin-destination costs deduplicated:
locations that snap to the same network position share one internal matrix
row or column, and unplaced locations have none. odmatrix rebuilds the full
matrix with one row per named origin and one column per named destination.

Primary API:
    build_mapping() - Group location names by internal matrix index
    expand_cost_matrix() - Expand a sparse matrix into dense per-attribute matrices
    export_layer() - Layer file to CSV files in one call
    LayerFileEngine - Engine over a solved layer file

Example:
    from odmatrix import export_layer

    paths = export_layer("Downtown.yaml", output_dir="out")
"""

from __future__ import annotations

from odmatrix import cli, logging
from odmatrix._version import __version__
from odmatrix.config import ExportConfig, UnresolvedLocationPolicy
from odmatrix.engine import CostMatrixEngine, LayerFileEngine, open_layer
from odmatrix.errors import (
    ExpansionPreconditionError,
    InputValidationError,
    ODMatrixError,
    UnresolvableSourceError,
)
from odmatrix.exec import build_mapping, expand_cost_matrix
from odmatrix.model import (
    UNPLACED,
    DenseCostMatrix,
    IndexMapping,
    Location,
    Placed,
    PlacementKey,
    SparseCostMatrix,
    Unplaced,
)
from odmatrix.pipeline import CostMatrixResult, compute_cost_matrices, export_layer
from odmatrix.types.base import CurbApproach

__all__ = [
    # Version
    "__version__",
    # Model
    "Location",
    "PlacementKey",
    "Placed",
    "Unplaced",
    "UNPLACED",
    "IndexMapping",
    "SparseCostMatrix",
    "DenseCostMatrix",
    "CurbApproach",
    # Core
    "build_mapping",
    "expand_cost_matrix",
    # Pipeline
    "compute_cost_matrices",
    "export_layer",
    "CostMatrixResult",
    # Engine
    "CostMatrixEngine",
    "LayerFileEngine",
    "open_layer",
    # Configuration and errors
    "ExportConfig",
    "UnresolvedLocationPolicy",
    "ODMatrixError",
    "InputValidationError",
    "UnresolvableSourceError",
    "ExpansionPreconditionError",
    # Utilities
    "cli",
    "logging",
]
