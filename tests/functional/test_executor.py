import threading
import time

import pytest

from applykit.core.errors import ElementError
from applykit.functional.element import map_elements
from applykit.functional.executor import evaluate
from applykit.functional.multi import map_multi


def test_parallel_results_keep_input_order():
    def slow_square(x):
        time.sleep(0.01 * (5 - x))
        return x * x

    result = map_elements(range(5), slow_square, parallel=True, max_workers=5)
    assert result.tolist() == [0, 1, 4, 9, 16]


def test_parallel_uses_worker_threads():
    threads = set()

    def record(x):
        threads.add(threading.get_ident())
        time.sleep(0.01)
        return x

    map_elements(range(8), record, parallel=True, max_workers=4)
    assert threading.get_ident() not in threads


def test_parallel_failure_raises_element_error():
    def fn(x):
        if x == 3:
            raise RuntimeError("fail")
        return x

    with pytest.raises(ElementError) as excinfo:
        map_elements(range(6), fn, parallel=True, max_workers=2)
    assert excinfo.value.index == 3
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_parallel_failure_stops_dispatching():
    started = []

    def fn(x):
        started.append(x)
        if x == 0:
            raise RuntimeError("fail")
        time.sleep(0.05)
        return x

    with pytest.raises(ElementError):
        map_elements(range(50), fn, parallel=True, max_workers=1)
    assert len(started) < 50


def test_parallel_multi():
    result = map_multi(
        [[1, 2, 3], [4, 5, 6]], lambda a, b: a * b, parallel=True, max_workers=3
    )
    assert result.tolist() == [4, 10, 18]


def test_evaluate_sequential_with_kwargs():
    assert evaluate(lambda a, b, c=0: a + b + c, [(1, 2), (3, 4)], {"c": 10}) == [13, 17]


def test_evaluate_labels_failures():
    with pytest.raises(ElementError) as excinfo:
        evaluate(lambda x: 1 / x, [(1,), (0,)], labels=["one", "zero"])
    assert excinfo.value.label == "zero"
