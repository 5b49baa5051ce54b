import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from applykit.core.enums import ResultKind
from applykit.core.errors import RecyclingWarning
from applykit.core.results import GridResult, ListResult, VectorResult


@pytest.fixture
def grid():
    return GridResult(
        values=np.array([[1, 2, 3], [1, 4, 9]]),
        row_labels=["x", "sq"],
        col_labels=["a", "b", "a"],
    )


def test_kinds(grid):
    assert ListResult(values=[1]).kind is ResultKind.LIST
    assert VectorResult(values=np.array([1])).kind is ResultKind.VECTOR
    assert grid.kind is ResultKind.GRID


def test_grid_access(grid):
    assert grid.shape == (2, 3)
    assert len(grid) == 3
    np.testing.assert_array_equal(grid.row("sq"), [1, 4, 9])
    np.testing.assert_array_equal(grid.column("a"), [1, 1])
    np.testing.assert_array_equal(grid.column(1), [2, 4])
    assert [column.tolist() for column in grid] == [[1, 1], [2, 4], [3, 9]]


def test_grid_to_frame(grid):
    frame = grid.to_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.index) == ["x", "sq"]
    assert frame.shape == (2, 3)


def test_vector_lookup_and_series():
    vector = VectorResult(values=np.array([1.0, 2.0]), labels=["a", "b"])
    assert vector.get("b") == 2.0
    series = vector.to_series()
    assert series["a"] == 1.0
    with pytest.raises(KeyError):
        vector.get("c")


def test_list_result():
    result = ListResult(values=[1, "a", [2]], labels=["p", "q", "r"])
    assert result.get("q") == "a"
    assert result[2] == [2]
    assert result.tolist() == [1, "a", [2]]
    assert result.to_series().dtype == object


def test_label_counts_are_validated():
    with pytest.raises(ValidationError):
        ListResult(values=[1, 2], labels=["a"])
    with pytest.raises(ValidationError):
        VectorResult(values=np.zeros((2, 2)))
    with pytest.raises(ValidationError):
        GridResult(values=np.zeros((2, 3)), row_labels=["a"])


def test_with_warnings():
    result = ListResult(values=[1])
    assert result.with_warnings(()) is result
    warned = result.with_warnings((RecyclingWarning(1, 2, 3),))
    assert warned.warnings == (RecyclingWarning(1, 2, 3),)
    assert result.warnings == ()
