"""CSV emission for dense cost matrices.

Two artifacts are produced: a matrix CSV per cost attribute and a single
flat table CSV listing every origin/destination pair with all attributes.
Names are normalized so embedded commas cannot break the CSV structure.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from odmatrix.errors import ExpansionPreconditionError
from odmatrix.logging import get_logger
from odmatrix.model.matrix import DenseCostMatrix
from odmatrix.utils.output_paths import ensure_parent_dir

logger = get_logger(__name__)

_COMMA_RUN = re.compile(r"\s*,\s*")


def normalize_csv_name(name: Optional[str]) -> str:
    """Replace each comma and its surrounding whitespace with one space.

    Examples:
        "Main St, Suite 2" -> "Main St Suite 2"; None -> "".
    """
    if not name:
        return ""
    return _COMMA_RUN.sub(" ", name)


def _check_labels(origin_names: Sequence, destination_names: Sequence) -> None:
    if len(origin_names) == 0:
        raise ExpansionPreconditionError("There are no origins")
    if len(destination_names) == 0:
        raise ExpansionPreconditionError("There are no destinations")


def matrix_frame(matrix: DenseCostMatrix) -> pd.DataFrame:
    """Return the matrix CSV layout: ``Name`` index, one column per destination."""
    _check_labels(matrix.origin_names, matrix.destination_names)
    if matrix.values.shape != matrix.shape:
        raise ExpansionPreconditionError(
            f"Cost matrix for '{matrix.attribute_name}' has shape "
            f"{matrix.values.shape}, expected {matrix.shape}"
        )
    return pd.DataFrame(
        matrix.values,
        index=pd.Index(
            [normalize_csv_name(n) for n in matrix.origin_names], name="Name"
        ),
        columns=[normalize_csv_name(n) for n in matrix.destination_names],
    )


def flat_table_frame(matrices: Sequence[DenseCostMatrix]) -> pd.DataFrame:
    """Return one row per origin/destination pair with a column per attribute.

    Rows are origin-major: all destinations of the first origin come first.
    """
    if not matrices:
        raise ExpansionPreconditionError("There are no cost attributes")
    first = matrices[0]
    _check_labels(first.origin_names, first.destination_names)
    origin_count, destination_count = first.shape

    origins = [normalize_csv_name(n) for n in first.origin_names]
    destinations = [normalize_csv_name(n) for n in first.destination_names]
    columns = {
        "Origin": np.repeat(np.asarray(origins, dtype=object), destination_count),
        "Destination": np.tile(np.asarray(destinations, dtype=object), origin_count),
    }
    frame = pd.DataFrame(columns)
    for matrix in matrices:
        if matrix.values.shape != (origin_count, destination_count):
            raise ExpansionPreconditionError(
                f"Cost matrix for '{matrix.attribute_name}' has shape "
                f"{matrix.values.shape}, expected {(origin_count, destination_count)}"
            )
        # Positional insert keeps duplicate attribute names as separate columns
        frame.insert(
            len(frame.columns),
            normalize_csv_name(matrix.attribute_name),
            matrix.values.reshape(-1),
            allow_duplicates=True,
        )
    return frame


def write_matrix_csv(
    path: Path,
    matrix: DenseCostMatrix,
    encoding: str = "utf-16",
    float_format: Optional[str] = None,
) -> Path:
    """Write one attribute as ``Name,<dest...>`` rows."""
    frame = matrix_frame(matrix)
    ensure_parent_dir(path)
    frame.to_csv(path, encoding=encoding, float_format=float_format)
    logger.debug(f"Wrote {matrix.shape[0]} x {matrix.shape[1]} matrix to {path}")
    return path


def write_flat_table_csv(
    path: Path,
    matrices: Sequence[DenseCostMatrix],
    encoding: str = "utf-16",
    float_format: Optional[str] = None,
) -> Path:
    """Write ``Origin,Destination,<attr...>`` rows for every pair."""
    frame = flat_table_frame(matrices)
    ensure_parent_dir(path)
    frame.to_csv(path, index=False, encoding=encoding, float_format=float_format)
    logger.debug(f"Wrote {len(frame)} flat table row(s) to {path}")
    return path

