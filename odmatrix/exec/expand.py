"""Expand a deduplicated sparse cost matrix into dense per-attribute matrices.

Each index mapping is flattened into one key per name. Row ``r`` of the dense
output takes its values from the origin key at flat position ``r`` and column
``c`` from the destination key at flat position ``c``, so every name sharing
an internal index receives an identical row (or column). Cells where either
key is unplaced hold the attribute default.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from odmatrix.errors import ExpansionPreconditionError
from odmatrix.logging import get_logger
from odmatrix.model.location import MatrixKey
from odmatrix.model.mapping import IndexMapping
from odmatrix.model.matrix import DenseCostMatrix, SparseCostMatrix

logger = get_logger(__name__)


def _translate_keys(
    keys: Sequence[MatrixKey], unique_count: int, role: str
) -> Tuple[np.ndarray, np.ndarray]:
    """Split flat keys into a placed mask and an index array.

    Unplaced positions get index 0 in the returned array; the mask excludes
    them from any lookup.
    """
    placed = np.fromiter((k.is_placed for k in keys), dtype=bool, count=len(keys))
    indices = np.fromiter(
        (k.index if k.is_placed else 0 for k in keys),  # type: ignore[union-attr]
        dtype=np.int64,
        count=len(keys),
    )
    out_of_range = placed & (indices >= unique_count)
    if out_of_range.any():
        bad = sorted({int(i) for i in indices[out_of_range]})
        raise ExpansionPreconditionError(
            f"Internal {role} index {bad} is outside the cost matrix, which has "
            f"{unique_count} unique {role}(s)"
        )
    return placed, indices


def expand_cost_matrix(
    sparse: SparseCostMatrix,
    origin_mapping: IndexMapping,
    destination_mapping: IndexMapping,
) -> List[DenseCostMatrix]:
    """Expand ``sparse`` into one dense matrix per cost attribute.

    Args:
        sparse: Solver result indexed by internal origin/destination index.
        origin_mapping: Origin groups; defines row order.
        destination_mapping: Destination groups; defines column order.

    Returns:
        Dense matrices aligned with ``sparse.attribute_names``.

    Raises:
        ExpansionPreconditionError: If there are no attributes, no origins or
            no destinations, or a placed key is outside the sparse matrix.
    """
    if sparse.attribute_count == 0:
        raise ExpansionPreconditionError(
            "There are no cost attributes; at least one attribute is required"
        )
    if origin_mapping.is_empty():
        raise ExpansionPreconditionError(
            "There are no origins; at least one origin is required"
        )
    if destination_mapping.is_empty():
        raise ExpansionPreconditionError(
            "There are no destinations; at least one destination is required"
        )

    origin_names = origin_mapping.names()
    destination_names = destination_mapping.names()
    row_placed, row_index = _translate_keys(
        origin_mapping.flatten(), sparse.unique_origin_count, "origin"
    )
    col_placed, col_index = _translate_keys(
        destination_mapping.flatten(), sparse.unique_destination_count, "destination"
    )

    # Either side unplaced forces the default
    both_placed = np.outer(row_placed, col_placed)
    rows, cols = np.nonzero(both_placed)

    logger.debug(
        f"Expanding {sparse.unique_origin_count} x {sparse.unique_destination_count} "
        f"unique locations to {len(origin_names)} x {len(destination_names)} "
        f"for {sparse.attribute_count} attribute(s)"
    )

    dense: List[DenseCostMatrix] = []
    for a, attribute_name in enumerate(sparse.attribute_names):
        values = np.full(
            (len(origin_names), len(destination_names)),
            sparse.default_value(a),
            dtype=float,
        )
        if rows.size:
            values[rows, cols] = sparse.values[row_index[rows], col_index[cols], a]
        dense.append(
            DenseCostMatrix(
                attribute_name=attribute_name,
                is_impedance=(a == 0),
                origin_names=list(origin_names),
                destination_names=list(destination_names),
                values=values,
            )
        )
    return dense
