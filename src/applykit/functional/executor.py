"""Evaluation of a mapped function over prepared argument tuples.

Calls run sequentially in input order unless parallel evaluation is
requested, in which case they are dispatched to a thread pool and the results
reassembled in input order. Either way the first failure aborts the whole
call: pending work is cancelled and the failure is raised as an
``ElementError``, so callers never observe partially collected results.

An optional ``check`` callback sees every result as soon as it is produced.
Whatever it raises aborts the call the same way but is propagated unchanged.
"""

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
import typing as tp

from applykit.config import settings
from applykit.core.errors import ElementError
from applykit.logger.logger import logger

__all__ = ["evaluate"]


def _fail(index: int, exc: Exception, labels: tp.Optional[tp.Sequence[str]]) -> ElementError:
    label = None if labels is None else labels[index]
    logger.debug(f"Mapped function failed at index {index}: {exc!r}")
    return ElementError(index, exc, label=label)


def evaluate(
    fn: tp.Callable[..., tp.Any],
    arg_tuples: tp.Sequence[tp.Tuple[tp.Any, ...]],
    kwargs: tp.Optional[tp.Dict[str, tp.Any]] = None,
    labels: tp.Optional[tp.Sequence[str]] = None,
    parallel: tp.Optional[bool] = None,
    max_workers: tp.Optional[int] = None,
    check: tp.Optional[tp.Callable[[int, tp.Any], None]] = None,
) -> tp.List[tp.Any]:
    """Call ``fn(*args, **kwargs)`` for every tuple in ``arg_tuples``.

    Args:
        fn: The function to map.
        arg_tuples: Positional arguments for each call, in input order.
        kwargs: Keyword arguments passed unchanged to every call.
        labels: Labels of the inputs, used to annotate failures.
        parallel: Evaluate on a thread pool. Defaults to ``settings.PARALLEL``.
        max_workers: Thread pool size. Defaults to ``settings.MAX_WORKERS``.
        check: Called as ``check(index, result)`` right after each call
            returns; raising from it stops further calls.

    Returns:
        One result per tuple, in input order.

    Raises:
        ElementError: If ``fn`` raises; carries the failing index.
    """
    kwargs = kwargs or {}
    parallel = settings.PARALLEL if parallel is None else parallel
    max_workers = max_workers or settings.MAX_WORKERS

    if not parallel or len(arg_tuples) < 2:
        results = []
        for i, args in enumerate(arg_tuples):
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                raise _fail(i, exc, labels) from exc
            if check is not None:
                check(i, result)
            results.append(result)
        return results

    results_by_index: tp.Dict[int, tp.Any] = {}
    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        future_to_index: tp.Dict[Future, int] = {
            executor.submit(fn, *args, **kwargs): i
            for i, args in enumerate(arg_tuples)
        }
        try:
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                exc = future.exception()
                if exc is not None:
                    if isinstance(exc, Exception):
                        raise _fail(index, exc, labels) from exc
                    raise exc
                result = future.result()
                if check is not None:
                    check(index, result)
                results_by_index[index] = result
        except BaseException:
            for pending in future_to_index:
                pending.cancel()
            raise
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return [results_by_index[i] for i in range(len(arg_tuples))]
