"""Tests for CurbApproach parsing."""

import pytest

from odmatrix.types.base import CurbApproach


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, CurbApproach.EITHER_SIDE),
        (2, CurbApproach.LEFT_SIDE),
        ("right_side", CurbApproach.RIGHT_SIDE),
        (" NO_U_TURN ", CurbApproach.NO_U_TURN),
        (CurbApproach.LEFT_SIDE, CurbApproach.LEFT_SIDE),
    ],
)
def test_parse(value, expected) -> None:
    assert CurbApproach.parse(value) is expected


@pytest.mark.parametrize("value", [7, "sideways", True, 1.5])
def test_parse_rejects_unknown(value) -> None:
    with pytest.raises(ValueError, match="Invalid curb approach"):
        CurbApproach.parse(value)


def test_types_package_exports() -> None:
    import odmatrix.types as types_pkg

    assert types_pkg.__all__ == ["CurbApproach"]
    assert not hasattr(types_pkg, "Cost")
