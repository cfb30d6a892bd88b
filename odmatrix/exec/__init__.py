"""Core transformations: index mapping and matrix expansion."""

from odmatrix.exec.expand import expand_cost_matrix
from odmatrix.exec.mapping import IndexLookup, build_mapping

__all__ = ["build_mapping", "expand_cost_matrix", "IndexLookup"]
