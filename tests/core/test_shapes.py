import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from applykit.core.enums import ShapeKind, ValueKind
from applykit.core.shapes import ShapeTemplate, describe_shape, inspect_value


@pytest.mark.parametrize(
    "value, kind",
    [
        (True, ValueKind.LOGICAL),
        (3, ValueKind.INTEGER),
        (np.int32(3), ValueKind.INTEGER),
        (2.5, ValueKind.DOUBLE),
        (1 + 2j, ValueKind.COMPLEX),
        ("a", ValueKind.CHARACTER),
        (np.array(4.0), ValueKind.DOUBLE),
    ],
)
def test_atomic_values_are_scalars(value, kind):
    shape = describe_shape(value)
    assert shape.kind is ShapeKind.SCALAR
    assert shape.length == 1
    assert shape.value_kind is kind


def test_length_one_vector_is_scalar():
    shape, elements = inspect_value([7])
    assert shape.kind is ShapeKind.SCALAR
    assert elements == [7]


def test_vector_promotes_numeric_kinds():
    shape = describe_shape([1, 2.5, True])
    assert shape.kind is ShapeKind.VECTOR
    assert shape.length == 3
    assert shape.value_kind is ValueKind.DOUBLE


def test_mapping_and_series_carry_names():
    assert describe_shape({"min": 1, "max": 4}).names == ("min", "max")
    series = pd.Series([1.0, 2.0], index=["lo", "hi"])
    assert describe_shape(series).names == ("lo", "hi")
    assert describe_shape(pd.Series([1.0, 2.0])).names is None


@pytest.mark.parametrize(
    "value",
    [None, [1, "a"], [[1, 2], [3, 4]], np.zeros((2, 2)), object(), [None, 1]],
)
def test_irregular_values(value):
    assert describe_shape(value).kind is ShapeKind.IRREGULAR


def test_empty_vector_has_no_kind():
    shape = describe_shape([])
    assert shape.kind is ShapeKind.VECTOR
    assert shape.length == 0
    assert shape.value_kind is None


def test_descriptor_str():
    assert str(describe_shape(1.0)) == "scalar<double>"
    assert str(describe_shape([1, 2])) == "vector<integer>[2]"
    assert str(describe_shape(None)) == "irregular"


def test_template_accepts_promotable_kinds():
    template = ShapeTemplate.vector(2)
    assert template.matches(describe_shape([1, 2]))
    assert template.matches(describe_shape([1.5, 2.0]))
    assert not template.matches(describe_shape(["a", "b"]))
    assert not template.matches(describe_shape([1, 2, 3]))
    assert not template.matches(describe_shape(1.0))


def test_integer_template_rejects_doubles():
    template = ShapeTemplate.scalar(ValueKind.INTEGER)
    assert template.matches(describe_shape(3))
    assert template.matches(describe_shape(True))
    assert not template.matches(describe_shape(3.5))


def test_template_from_value():
    template = ShapeTemplate.from_value({"min": 0.0, "max": 0.0})
    assert template.kind is ValueKind.DOUBLE
    assert template.length == 2
    assert template.names == ("min", "max")

    with pytest.raises(ValueError):
        ShapeTemplate.from_value([[1], [2]])


def test_template_validation():
    with pytest.raises(ValidationError):
        ShapeTemplate(kind=ValueKind.DOUBLE, length=0)
    with pytest.raises(ValidationError):
        ShapeTemplate(kind=ValueKind.DOUBLE, length=2, names=("a",))
