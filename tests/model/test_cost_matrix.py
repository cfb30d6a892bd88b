"""Tests for SparseCostMatrix and DenseCostMatrix containers."""

import numpy as np
import pytest

from odmatrix.model.matrix import DenseCostMatrix, SparseCostMatrix


def test_from_entries_fills_missing_cells_with_defaults() -> None:
    sparse = SparseCostMatrix.from_entries(
        attribute_names=["Minutes", "Miles"],
        default_values=[99.0, -1.0],
        origin_count=2,
        destination_count=2,
        entries=[{"origin": 1, "destination": 0, "costs": [4.0, 2.0]}],
    )
    assert sparse.unique_origin_count == 2
    assert sparse.unique_destination_count == 2
    assert sparse.value(1, 0, 0) == 4.0
    assert sparse.value(1, 0, 1) == 2.0
    assert sparse.value(0, 0, 0) == 99.0
    assert sparse.value(0, 1, 1) == -1.0
    assert sparse.impedance_attribute == "Minutes"
    assert sparse.accumulated_attributes == ["Miles"]


def test_from_entries_rejects_out_of_range_entry() -> None:
    with pytest.raises(ValueError, match="outside"):
        SparseCostMatrix.from_entries(
            ["Minutes"], [0.0], 1, 1, [{"origin": 1, "destination": 0, "costs": [1]}]
        )


def test_from_entries_rejects_wrong_cost_count() -> None:
    with pytest.raises(ValueError, match="expected 2"):
        SparseCostMatrix.from_entries(
            ["A", "B"], [0.0, 0.0], 1, 1, [{"origin": 0, "destination": 0, "costs": [1]}]
        )


def test_constructor_validates_shapes() -> None:
    with pytest.raises(ValueError, match="3-dimensional"):
        SparseCostMatrix(("A",), np.zeros((2, 2)), np.zeros(1))
    with pytest.raises(ValueError, match="attribute names"):
        SparseCostMatrix(("A",), np.zeros((2, 2, 2)), np.zeros(2))
    with pytest.raises(ValueError, match="default values"):
        SparseCostMatrix(("A", "B"), np.zeros((2, 2, 2)), np.zeros(1))


def test_sparse_matrix_is_read_only() -> None:
    sparse = SparseCostMatrix(("A",), np.zeros((1, 1, 1)), np.zeros(1))
    with pytest.raises(ValueError):
        sparse.values[0, 0, 0] = 1.0


def test_value_rejects_negative_indices() -> None:
    sparse = SparseCostMatrix(("A",), np.ones((2, 2, 1)), np.zeros(1))
    with pytest.raises(IndexError):
        sparse.value(-1, 0, 0)


def test_dense_matrix_frame_and_description() -> None:
    dense = DenseCostMatrix(
        attribute_name="Miles",
        is_impedance=False,
        origin_names=["A", "A"],
        destination_names=["X"],
        values=np.array([[1.0], [1.0]]),
    )
    assert dense.shape == (2, 1)
    assert dense.description == "AccumulationOf_Miles"
    frame = dense.to_frame()
    assert frame.index.name == "Name"
    assert list(frame.index) == ["A", "A"]
    assert list(frame.columns) == ["X"]


def test_impedance_description() -> None:
    dense = DenseCostMatrix("Minutes", True, ["A"], ["B"], np.zeros((1, 1)))
    assert dense.description == "OptimizedOn_Minutes"
