"""Mapping along the rows or columns of a 2-D grid."""

import typing as tp

import numpy as np
import pandas as pd

from applykit.core.containers import OrderedContainer
from applykit.core.enums import Axis, ValueKind
from applykit.core.errors import InvalidShape
from applykit.core.results import GridResult, MappingResult
from applykit.functional.simplify import map_simplify

__all__ = ["map_axis"]

_Labels = tp.Optional[tp.List[str]]


def _index_labels(index: pd.Index) -> _Labels:
    if isinstance(index, pd.RangeIndex):
        return None
    return [str(label) for label in index]


def _rows_to_array(rows: tp.Sequence[tp.Any]) -> np.ndarray:
    """Stack row sequences into a 2-D array, rejecting ragged input."""
    if not rows:
        return np.empty((0, 0))

    lengths = set()
    for i, row in enumerate(rows):
        if isinstance(row, np.ndarray) and row.ndim != 1:
            raise InvalidShape(f"Row {i} is a {row.ndim}-D array, expected 1-D.")
        if not isinstance(row, (list, tuple, np.ndarray)):
            raise InvalidShape(f"Row {i} is not a sequence: {type(row).__name__}.")
        lengths.add(len(row))
    if len(lengths) != 1:
        raise InvalidShape(f"Grid is not rectangular: row lengths {sorted(lengths)}.")

    flat = [value for row in rows for value in row]
    kinds = [ValueKind.of(value) for value in flat]
    common = None if any(k is None for k in kinds) else ValueKind.unify(kinds)
    dtype = common.storage_dtype(flat) if common is not None else object

    (width,) = lengths
    values = np.empty((len(rows), width), dtype=dtype)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            values[i, j] = value
    return values


def _as_grid(grid: tp.Any) -> tp.Tuple[np.ndarray, _Labels, _Labels]:
    if isinstance(grid, GridResult):
        return grid.values, grid.row_labels, grid.col_labels
    if isinstance(grid, pd.DataFrame):
        return grid.to_numpy(), _index_labels(grid.index), _index_labels(grid.columns)
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidShape(f"Expected a 2-D grid, got {grid.ndim} dimensions.")
        return grid, None, None
    if isinstance(grid, (list, tuple)):
        return _rows_to_array(grid), None, None
    raise InvalidShape(f"Cannot interpret {type(grid).__name__} as a grid.")


def _parse_axis(axis: tp.Any) -> Axis:
    if isinstance(axis, Axis):
        return axis
    if isinstance(axis, str):
        for member in Axis:
            if member.value == axis.lower():
                return member
    raise InvalidShape(f"Invalid axis {axis!r}; expected 'rows' or 'columns'.")


def map_axis(
    grid: tp.Any,
    axis: tp.Union[Axis, str],
    fn: tp.Callable[..., tp.Any],
    *args: tp.Any,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
    **kwargs: tp.Any,
) -> MappingResult:
    """Apply ``fn`` to each row or each column of ``grid``.

    Each slice is passed to ``fn`` as a 1-D ``numpy.ndarray``. Slices are
    labelled with the grid's row labels (``Axis.ROWS``) or column labels
    (``Axis.COLUMNS``) and the results are simplified as in ``map_simplify``.

    Args:
        grid: A 2-D ``numpy.ndarray``, ``pandas.DataFrame``, ``GridResult``
            or a list of equal-length rows.
        axis: ``Axis.ROWS``/``"rows"`` for one call per row, or
            ``Axis.COLUMNS``/``"columns"`` for one call per column.
        fn: Function of one slice (plus any extra arguments).

    Raises:
        InvalidShape: If the grid is not rectangular or 2-D, or the axis is
            not recognised. Raised before ``fn`` is called.
        ElementError: If ``fn`` raises; ``index`` is the row or column index.

    Example:
        >>> map_axis([[1, 3], [2, 4]], Axis.ROWS, sum).tolist()
        [4, 6]
        >>> map_axis([[1, 3], [2, 4]], Axis.COLUMNS, sum).tolist()
        [3, 7]
    """
    axis = _parse_axis(axis)
    values, row_labels, col_labels = _as_grid(grid)

    if axis is Axis.ROWS:
        slices = [values[i, :] for i in range(values.shape[0])]
        labels = row_labels
    else:
        slices = [values[:, j] for j in range(values.shape[1])]
        labels = col_labels

    return map_simplify(
        OrderedContainer(values=slices, labels=labels),
        fn,
        *args,
        use_names=False,
        parallel=parallel,
        max_workers=max_workers,
        **kwargs,
    )
