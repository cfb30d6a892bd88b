"""End-to-end export: layer file -> index mappings -> dense matrices -> CSV."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from odmatrix.config import EXPORT_CONFIG, ExportConfig
from odmatrix.engine.base import CostMatrixEngine
from odmatrix.engine.session import open_layer
from odmatrix.errors import InputValidationError
from odmatrix.exec.expand import expand_cost_matrix
from odmatrix.exec.mapping import build_mapping
from odmatrix.io import write_flat_table_csv, write_matrix_csv
from odmatrix.logging import get_logger
from odmatrix.model.mapping import IndexMapping
from odmatrix.model.matrix import DenseCostMatrix, SparseCostMatrix
from odmatrix.utils.output_paths import FLAT_TABLE, MATRIX, build_artifact_path

logger = get_logger(__name__)


@dataclass
class CostMatrixResult:
    """Everything computed for one layer before any file is written."""

    sparse: SparseCostMatrix
    origin_mapping: IndexMapping
    destination_mapping: IndexMapping
    matrices: List[DenseCostMatrix]

    @property
    def origin_names(self) -> list:
        return self.origin_mapping.names()

    @property
    def destination_names(self) -> list:
        return self.destination_mapping.names()


def compute_cost_matrices(
    engine: CostMatrixEngine, config: Optional[ExportConfig] = None
) -> CostMatrixResult:
    """Solve if needed, map both location tables and expand the result."""
    config = config or EXPORT_CONFIG

    if not engine.has_valid_result():
        logger.info("Layer has no valid result; solving")
        engine.solve()

    sparse = engine.cost_matrix()
    origin_mapping = build_mapping(
        engine.locations(is_origin=True),
        is_origin=True,
        index_lookup=engine.find_index,
        unresolved_policy=config.unresolved_policy,
    )
    destination_mapping = build_mapping(
        engine.locations(is_origin=False),
        is_origin=False,
        index_lookup=engine.find_index,
        unresolved_policy=config.unresolved_policy,
    )
    matrices = expand_cost_matrix(sparse, origin_mapping, destination_mapping)
    logger.info(
        f"Expanded {len(matrices)} attribute(s) to "
        f"{origin_mapping.name_count} origin(s) x "
        f"{destination_mapping.name_count} destination(s)"
    )
    return CostMatrixResult(sparse, origin_mapping, destination_mapping, matrices)


def write_cost_matrices(
    result: CostMatrixResult,
    layer_path: Path,
    output_dir: Optional[Path] = None,
    config: Optional[ExportConfig] = None,
) -> List[Path]:
    """Write the flat table (impedance) and one matrix CSV per attribute."""
    config = config or EXPORT_CONFIG
    written: List[Path] = []
    for matrix in result.matrices:
        if matrix.is_impedance:
            path = build_artifact_path(
                layer_path, output_dir, FLAT_TABLE, matrix.description
            )
            written.append(
                write_flat_table_csv(
                    path,
                    result.matrices,
                    encoding=config.encoding,
                    float_format=config.float_format,
                )
            )
        path = build_artifact_path(layer_path, output_dir, MATRIX, matrix.description)
        written.append(
            write_matrix_csv(
                path,
                matrix,
                encoding=config.encoding,
                float_format=config.float_format,
            )
        )
    return written


def export_layer(
    layer_path: Path,
    output_dir: Optional[Path] = None,
    config: Optional[ExportConfig] = None,
) -> List[Path]:
    """Export every CSV artifact for a layer file.

    Nothing is written unless expansion completes for all attributes.

    Returns:
        Paths of the written files, flat table first.

    Raises:
        InputValidationError: If the layer file does not exist.
        UnresolvableSourceError: If the layer is not a usable OD product.
        ExpansionPreconditionError: If there is nothing to expand.
    """
    layer_path = Path(layer_path)
    if output_dir is not None:
        output_dir = Path(output_dir)
    if not layer_path.is_file():
        raise InputValidationError(f"Layer file does not exist: {layer_path}")

    start = perf_counter()
    with open_layer(layer_path) as engine:
        result = compute_cost_matrices(engine, config)
    written = write_cost_matrices(result, layer_path, output_dir, config)
    logger.info(
        f"Wrote {len(written)} file(s) for {layer_path.name} in "
        f"{perf_counter() - start:.2f} s"
    )
    return written
