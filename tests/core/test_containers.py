import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from applykit.core.containers import OrderedContainer


def test_label_count_must_match():
    with pytest.raises(ValidationError):
        OrderedContainer(values=[1, 2], labels=["a"])


def test_lookup_returns_first_match():
    container = OrderedContainer(values=[1, 2, 3], labels=["a", "b", "a"])
    assert container.get("a") == 1
    assert container.get("b") == 2
    with pytest.raises(KeyError):
        container.get("z")


def test_unlabelled_lookup_raises():
    with pytest.raises(KeyError):
        OrderedContainer(values=[1]).get("a")


def test_coerce_mapping_uses_keys_as_labels():
    container = OrderedContainer.coerce({"x": 1, 2: "y"})
    assert container.values == [1, "y"]
    assert container.labels == ["x", "2"]


def test_coerce_series():
    labelled = OrderedContainer.coerce(pd.Series([1, 2], index=["a", "b"]))
    assert labelled.labels == ["a", "b"]
    plain = OrderedContainer.coerce(pd.Series([1, 2]))
    assert plain.labels is None
    assert plain.values == [1, 2]


def test_coerce_sequences_and_scalars():
    assert OrderedContainer.coerce(range(3)).values == [0, 1, 2]
    assert OrderedContainer.coerce((x for x in "ab")).values == ["a", "b"]
    assert OrderedContainer.coerce("abc").values == ["abc"]
    assert OrderedContainer.coerce(5).values == [5]
    assert OrderedContainer.coerce(np.array([1, 2])).values == [1, 2]


def test_coerce_rejects_none_and_grids():
    with pytest.raises(TypeError):
        OrderedContainer.coerce(None)
    with pytest.raises(ValueError):
        OrderedContainer.coerce(np.zeros((2, 2)))


def test_coerce_returns_existing_container():
    container = OrderedContainer(values=[1])
    assert OrderedContainer.coerce(container) is container


def test_with_value_labels():
    named = OrderedContainer(values=["a", "b"]).with_value_labels()
    assert named.labels == ["a", "b"]
    mixed = OrderedContainer(values=["a", 1])
    assert mixed.with_value_labels().labels is None
    labelled = OrderedContainer(values=["a"], labels=["x"])
    assert labelled.with_value_labels().labels == ["x"]


def test_coerce_rejects_dataframes():
    frame = pd.DataFrame({"a": [1, 2], "b": [3, 4]})
    with pytest.raises(TypeError, match="map_axis"):
        OrderedContainer.coerce(frame)
