"""Mapping with best-effort simplification of the collected results.

After the function has been applied to every element, the shapes of the
results decide what is returned:

    1. No results: an empty ``ListResult``.
    2. Only scalars of combinable kinds: a ``VectorResult`` of length n.
    3. Only vectors of a common length k > 1 and combinable kinds: a
       ``GridResult`` of k rows and n columns, column j holding result j.
    4. Anything else: the plain ``ListResult``.

Length-1 vectors count as scalars. Grid row labels come from the internal
names of the first result; column labels come from the input labels.
"""

import typing as tp

import numpy as np

from applykit.core.containers import OrderedContainer
from applykit.core.enums import ShapeKind, ValueKind
from applykit.core.results import GridResult, ListResult, MappingResult, VectorResult
from applykit.core.shapes import inspect_value
from applykit.functional.element import map_elements
from applykit.logger.logger import logger

__all__ = ["map_simplify", "simplify_results"]


def simplify_results(result: ListResult) -> MappingResult:
    """Collapse a list of uniformly shaped results into a vector or a grid.

    Args:
        result: Results of an element-wise mapping.

    Returns:
        A ``VectorResult``, a ``GridResult`` or ``result`` itself when the
        shapes are mixed or irregular. Warnings on ``result`` are kept.
    """
    if len(result) == 0:
        return result

    inspected = [inspect_value(value) for value in result.values]
    shapes = [shape for shape, _ in inspected]
    common = ValueKind.unify(
        shape.value_kind for shape in shapes if shape.value_kind is not None
    )
    if common is None or any(shape.value_kind is None for shape in shapes):
        return result

    if all(shape.kind is ShapeKind.SCALAR for shape in shapes):
        scalars = [elements[0] for _, elements in inspected]
        values = np.array(scalars, dtype=common.storage_dtype(scalars))
        logger.debug(f"Simplified {len(values)} scalar results to a {common.value} vector")
        return VectorResult(values=values, labels=result.labels, warnings=result.warnings)

    lengths = {shape.length for shape in shapes}
    if all(shape.kind is ShapeKind.VECTOR for shape in shapes) and len(lengths) == 1:
        (k,) = lengths
        if k is not None and k > 1:
            dtype = common.storage_dtype(
                value for _, elements in inspected for value in elements
            )
            values = np.empty((k, len(inspected)), dtype=dtype)
            for j, (_, elements) in enumerate(inspected):
                values[:, j] = elements
            row_labels = shapes[0].names
            logger.debug(f"Simplified {len(inspected)} vector results to a {k}x{len(inspected)} grid")
            return GridResult(
                values=values,
                row_labels=list(row_labels) if row_labels is not None else None,
                col_labels=result.labels,
                warnings=result.warnings,
            )

    return result


def map_simplify(
    container: tp.Any,
    fn: tp.Callable[..., tp.Any],
    *args: tp.Any,
    use_names: bool = True,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
    **kwargs: tp.Any,
) -> MappingResult:
    """Apply ``fn`` to every element and simplify the results when possible.

    Args:
        container: Anything ``OrderedContainer.coerce`` accepts.
        fn: Unary function (plus any extra arguments).
        use_names: Label the results with the elements themselves when the
            container is unlabelled and holds only strings.
        parallel: Evaluate calls on a thread pool.
        max_workers: Thread pool size when ``parallel`` is set.

    Returns:
        A ``VectorResult``, ``GridResult`` or ``ListResult``; see the module
        docstring for the rules.

    Raises:
        ElementError: If ``fn`` raises for any element.

    Example:
        >>> map_simplify([1, 2, 3], lambda x: x * x).tolist()
        [1, 4, 9]
        >>> map_simplify([1, 2, 3], lambda x: [x, x * x]).tolist()
        [[1, 2, 3], [1, 4, 9]]
    """
    if container is not None and use_names:
        container = OrderedContainer.coerce(container).with_value_labels()
    result = map_elements(
        container, fn, *args, parallel=parallel, max_workers=max_workers, **kwargs
    )
    return simplify_results(result)
