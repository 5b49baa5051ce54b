"""Mapping an N-ary function over several containers in parallel positions.

Containers of different lengths are aligned to the longest one by recycling:
position ``i`` of a container of length ``m`` reads element ``i mod m``. When
the longest length is not a whole multiple of a shorter one the call still
succeeds, but a ``RecyclingWarning`` is attached to the result.
"""

import typing as tp

from applykit.core.containers import OrderedContainer
from applykit.core.errors import RecyclingWarning
from applykit.core.results import ListResult, MappingResult
from applykit.functional.element import check_callable
from applykit.functional.executor import evaluate
from applykit.functional.simplify import simplify_results
from applykit.logger.logger import logger

__all__ = ["map_multi"]


def _recycle(items: tp.Sequence[tp.Any], length: int) -> tp.List[tp.Any]:
    return [items[i % len(items)] for i in range(length)]


def _result_labels(
    containers: tp.Sequence[OrderedContainer], length: int, use_names: bool
) -> tp.Optional[tp.List[str]]:
    for container in containers:
        if container.labels is not None:
            return _recycle(container.labels, length)
    if use_names:
        named = containers[0].with_value_labels()
        if named.labels is not None:
            return _recycle(named.labels, length)
    return None


def map_multi(
    containers: tp.Sequence[tp.Any],
    fn: tp.Callable[..., tp.Any],
    simplify: bool = False,
    more_args: tp.Optional[tp.Dict[str, tp.Any]] = None,
    use_names: bool = True,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
) -> MappingResult:
    """Call ``fn`` on the aligned elements of several containers.

    Args:
        containers: The containers to walk in step; each may be anything
            ``OrderedContainer.coerce`` accepts.
        fn: Function taking one positional argument per container.
        simplify: Collapse uniformly shaped results into a vector or grid,
            following the same rules as ``map_simplify``.
        more_args: Keyword arguments passed unchanged to every call.
        use_names: When no container is labelled and the first holds only
            strings, label the results with those strings.
        parallel: Evaluate calls on a thread pool.
        max_workers: Thread pool size when ``parallel`` is set.

    Returns:
        A ``ListResult`` (or a simplified result) of length equal to the
        longest container, or empty if any container is empty. Recycling
        warnings are available as ``result.warnings``.

    Raises:
        TypeError: If ``fn`` is not callable or a container is None.
        ElementError: If ``fn`` raises; ``index`` is the failing position.

    Example:
        >>> r = map_multi([[1, 2, 3], [5, 6, 7], [-1, -2, -3]],
        ...               lambda a, b, c: a * b + b * c + a * c, simplify=True)
        >>> r.tolist()
        [-1, -4, -9]
    """
    check_callable(fn)
    inputs = [OrderedContainer.coerce(container) for container in containers]
    if not inputs:
        return ListResult()

    lengths = [len(container) for container in inputs]
    longest = 0 if min(lengths) == 0 else max(lengths)

    warnings = []
    if longest:
        for i, length in enumerate(lengths):
            if longest % length != 0:
                warning = RecyclingWarning(i, length, longest)
                logger.warning(str(warning))
                warnings.append(warning)

    labels = _result_labels(inputs, longest, use_names) if longest else None
    columns = [_recycle(container.values, longest) for container in inputs]
    arg_tuples = list(zip(*columns)) if longest else []
    logger.debug(f"Mapping over {len(inputs)} containers aligned to length {longest}")

    values = evaluate(
        fn,
        arg_tuples,
        more_args,
        labels=labels,
        parallel=parallel,
        max_workers=max_workers,
    )
    result = ListResult(values=values, labels=labels, warnings=tuple(warnings))
    return simplify_results(result) if simplify else result
