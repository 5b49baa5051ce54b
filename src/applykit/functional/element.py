"""Element-wise mapping over a single ordered container."""

import typing as tp

from applykit.core.containers import OrderedContainer
from applykit.core.results import ListResult
from applykit.functional.executor import evaluate
from applykit.logger.logger import logger

__all__ = ["map_elements", "check_callable"]


def check_callable(fn: tp.Any) -> None:
    if not callable(fn):
        raise TypeError(f"Expected a callable, got {type(fn).__name__}.")


def map_elements(
    container: tp.Any,
    fn: tp.Callable[..., tp.Any],
    *args: tp.Any,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
    **kwargs: tp.Any,
) -> ListResult:
    """Apply ``fn`` to every element of ``container``.

    Extra positional and keyword arguments are passed to every call after the
    element, so ``map_elements(xs, round, 2)`` calls ``round(x, 2)``.

    Args:
        container: Anything ``OrderedContainer.coerce`` accepts.
        fn: Unary function (plus any extra arguments).
        parallel: Evaluate calls on a thread pool.
        max_workers: Thread pool size when ``parallel`` is set.

    Returns:
        A ``ListResult`` with one result per element, in input order, carrying
        the container's labels.

    Raises:
        TypeError: If ``container`` is None or ``fn`` is not callable.
        ElementError: If ``fn`` raises for any element.

    Example:
        >>> map_elements({"a": 1, "b": 2}, lambda x: x + 1).tolist()
        [2, 3]
    """
    check_callable(fn)
    container = OrderedContainer.coerce(container)
    logger.debug(f"Mapping {getattr(fn, '__name__', fn)!s} over {len(container)} elements")

    values = evaluate(
        fn,
        [(value, *args) for value in container.values],
        kwargs,
        labels=container.labels,
        parallel=parallel,
        max_workers=max_workers,
    )
    return ListResult(values=values, labels=container.labels)
