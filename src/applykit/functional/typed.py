"""Mapping against a declared result template."""

import typing as tp

import numpy as np

from applykit.core.containers import OrderedContainer
from applykit.core.errors import TypeMismatch
from applykit.core.results import GridResult, VectorResult
from applykit.core.shapes import ShapeTemplate, inspect_value
from applykit.functional.element import check_callable
from applykit.functional.executor import evaluate
from applykit.logger.logger import logger

__all__ = ["map_typed"]


def map_typed(
    container: tp.Any,
    fn: tp.Callable[..., tp.Any],
    template: ShapeTemplate,
    *args: tp.Any,
    use_names: bool = True,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
    **kwargs: tp.Any,
) -> tp.Union[VectorResult, GridResult]:
    """Apply ``fn`` to every element, requiring each result to fit ``template``.

    Unlike ``map_simplify`` the output shape is fixed by the template and
    never falls back to a list: a scalar template gives a vector, a template
    of length k > 1 gives a k by n grid. Values are stored with the template's
    dtype, so integer results collected under a double template become floats.

    Args:
        container: Anything ``OrderedContainer.coerce`` accepts.
        fn: Unary function (plus any extra arguments).
        template: Expected kind and length of every result.
        use_names: Label the results with the elements themselves when the
            container is unlabelled and holds only strings.
        parallel: Evaluate calls on a thread pool.
        max_workers: Thread pool size when ``parallel`` is set.

    Raises:
        TypeError: If ``template`` is not a ``ShapeTemplate``.
        TypeMismatch: On the first result that does not fit the template.
        ElementError: If ``fn`` raises for any element.
    """
    if not isinstance(template, ShapeTemplate):
        raise TypeError(
            f"Expected a ShapeTemplate, got {type(template).__name__}."
        )
    check_callable(fn)
    container = OrderedContainer.coerce(container)
    if use_names:
        container = container.with_value_labels()

    columns: tp.Dict[int, tp.List[tp.Any]] = {}
    first_names: tp.List[tp.Optional[tp.Tuple[str, ...]]] = []

    def conform(i: int, value: tp.Any) -> None:
        shape, elements = inspect_value(value)
        if not template.matches(shape):
            raise TypeMismatch(
                i, expected=template, actual=shape, label=container.label_at(i)
            )
        if i == 0:
            first_names.append(shape.names)
        columns[i] = elements

    evaluate(
        fn,
        [(value, *args) for value in container.values],
        kwargs,
        labels=container.labels,
        parallel=parallel,
        max_workers=max_workers,
        check=conform,
    )

    row_labels = list(template.names) if template.names is not None else None
    if row_labels is None and first_names and first_names[0] is not None:
        row_labels = list(first_names[0])

    n = len(columns)
    ordered = [columns[j] for j in range(n)]
    dtype = template.kind.storage_dtype(
        value for column in ordered for value in column
    )
    logger.debug(f"Collected {n} results matching {template}")

    if template.length == 1:
        values = np.array([column[0] for column in ordered], dtype=dtype)
        return VectorResult(values=values, labels=container.labels)

    values = np.empty((template.length, n), dtype=dtype)
    for j, column in enumerate(ordered):
        values[:, j] = column
    return GridResult(values=values, row_labels=row_labels, col_labels=container.labels)
