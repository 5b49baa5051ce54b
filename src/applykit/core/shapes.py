"""Shape inference for individual mapping results.

Every value produced by a mapped function is classified as a scalar, a
fixed-length vector or an irregular value. The classification drives the
simplification of collected results and the checks against declared
templates.

Shape rules:
    - **Scalar**: an atomic value (bool, int, float, complex, str or their
      NumPy counterparts), a 0-d array, or any vector of length 1.
    - **Vector(k)**: a list, tuple, 1-D array, ``pandas.Series`` or mapping
      whose elements are all atomic and of kinds that can be combined.
    - **Irregular**: everything else, including ``None``, nested sequences,
      arrays with more than one dimension and vectors mixing characters with
      numbers.

Mappings and labelled series carry internal names, which become row labels
when vectors are collected into a grid.
"""

from collections.abc import Mapping
from typing import Annotated, Any, List, Optional, Tuple

import annotated_types as at
import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ShapeKind, ValueKind

__all__ = [
    "ShapeDescriptor",
    "ShapeTemplate",
    "describe_shape",
    "inspect_value",
]


class ShapeDescriptor(BaseModel):
    """Shape of a single result value.

    Attributes:
        kind: Scalar, vector or irregular.
        length: Number of elements; None for values that are not sequences.
        value_kind: Common atomic kind of the elements, if any.
        names: Internal names of the elements, if the value carries them.
    """

    model_config = ConfigDict(frozen=True)

    kind: ShapeKind
    length: Optional[int] = None
    value_kind: Optional[ValueKind] = None
    names: Optional[Tuple[str, ...]] = None

    def __str__(self) -> str:
        if self.kind is ShapeKind.IRREGULAR:
            return "irregular"
        kind = self.value_kind.value if self.value_kind else "empty"
        if self.kind is ShapeKind.SCALAR:
            return f"scalar<{kind}>"
        return f"vector<{kind}>[{self.length}]"


class ShapeTemplate(BaseModel):
    """Declared shape every result must have.

    A template of length 1 describes a scalar. Results whose numeric kind
    promotes to the template kind are accepted, so an integer result fits a
    double template while a double result does not fit an integer one.
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind = Field(ValueKind.DOUBLE, description="Expected value kind.")
    length: Annotated[int, at.Ge(1)] = Field(1, description="Expected length.")
    names: Optional[Tuple[str, ...]] = Field(
        None, description="Row labels for the collected grid."
    )

    @model_validator(mode="after")
    def _check_names(self) -> "ShapeTemplate":
        if self.names is not None and len(self.names) != self.length:
            raise ValueError(
                f"Template has {len(self.names)} names for length {self.length}."
            )
        return self

    @classmethod
    def scalar(cls, kind: ValueKind = ValueKind.DOUBLE) -> "ShapeTemplate":
        return cls(kind=kind, length=1)

    @classmethod
    def vector(
        cls, length: int, kind: ValueKind = ValueKind.DOUBLE
    ) -> "ShapeTemplate":
        return cls(kind=kind, length=length)

    @classmethod
    def from_value(cls, example: Any) -> "ShapeTemplate":
        """Build a template from an example result.

        Args:
            example: A value shaped like the expected results, e.g.
                ``[0.0, 0.0]`` or ``{"min": 0, "max": 0}``.

        Raises:
            ValueError: If the example is irregular or empty.
        """
        shape = describe_shape(example)
        if shape.kind is ShapeKind.IRREGULAR or shape.value_kind is None:
            raise ValueError(f"Cannot build a template from a {shape} value.")
        return cls(kind=shape.value_kind, length=shape.length, names=shape.names)

    def matches(self, shape: ShapeDescriptor) -> bool:
        """Whether a result of the given shape conforms to this template."""
        if shape.kind is ShapeKind.IRREGULAR or shape.value_kind is None:
            return False
        if self.length == 1:
            return shape.kind is ShapeKind.SCALAR and self.kind.accepts(
                shape.value_kind
            )
        return (
            shape.kind is ShapeKind.VECTOR
            and shape.length == self.length
            and self.kind.accepts(shape.value_kind)
        )

    def __str__(self) -> str:
        if self.length == 1:
            return f"scalar<{self.kind.value}>"
        return f"vector<{self.kind.value}>[{self.length}]"


def _sequence_parts(value: Any) -> Optional[Tuple[List[Any], Optional[Tuple[str, ...]]]]:
    """Split a sequence-like value into its elements and internal names."""
    if isinstance(value, pd.Series):
        names = None
        if not isinstance(value.index, pd.RangeIndex):
            names = tuple(str(name) for name in value.index)
        return list(value.to_numpy()), names
    if isinstance(value, Mapping):
        return list(value.values()), tuple(str(key) for key in value.keys())
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            return None
        return list(value), None
    if isinstance(value, (list, tuple)):
        return list(value), None
    return None


def inspect_value(value: Any) -> Tuple[ShapeDescriptor, Optional[List[Any]]]:
    """Describe ``value`` and return its atomic elements.

    Returns:
        The shape descriptor and, for scalars and vectors, the list of atomic
        elements in order. Irregular values yield None for the elements.
    """
    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()

    kind = ValueKind.of(value)
    if kind is not None:
        return ShapeDescriptor(kind=ShapeKind.SCALAR, length=1, value_kind=kind), [
            value
        ]

    parts = _sequence_parts(value)
    if parts is None:
        return ShapeDescriptor(kind=ShapeKind.IRREGULAR), None

    elements, names = parts
    kinds = [ValueKind.of(element) for element in elements]
    if any(k is None for k in kinds):
        return ShapeDescriptor(kind=ShapeKind.IRREGULAR, length=len(elements)), None

    common = ValueKind.unify(kinds)
    if elements and common is None:
        return ShapeDescriptor(kind=ShapeKind.IRREGULAR, length=len(elements)), None

    shape_kind = ShapeKind.SCALAR if len(elements) == 1 else ShapeKind.VECTOR
    descriptor = ShapeDescriptor(
        kind=shape_kind, length=len(elements), value_kind=common, names=names
    )
    return descriptor, elements


def describe_shape(value: Any) -> ShapeDescriptor:
    """Classify a single result value as scalar, vector or irregular."""
    return inspect_value(value)[0]
