"""Exception types raised by odmatrix.

Every error is fatal for a run. Messages state what was missing and what was
expected so a failed run can be diagnosed from the message alone.
"""

from __future__ import annotations


class ODMatrixError(ValueError):
    """Base class for all odmatrix failures."""


class InputValidationError(ODMatrixError):
    """Command-line input is malformed or the layer file is missing."""


class UnresolvableSourceError(ODMatrixError):
    """The layer is not a valid, solved origin-destination cost matrix product.

    Raised for a wrong layer type, a missing solver, location tables without
    the required fields, unknown placement keys and unsolvable layers.
    """


class ExpansionPreconditionError(ODMatrixError):
    """Expansion inputs are empty or inconsistent with the sparse matrix."""
