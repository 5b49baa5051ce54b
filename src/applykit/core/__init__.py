"""Core data structures for the mapping primitives."""

from applykit.core.containers import OrderedContainer
from applykit.core.enums import Axis, ResultKind, ShapeKind, ValueKind
from applykit.core.errors import (
    ApplyError,
    ElementError,
    InvalidShape,
    RecyclingWarning,
    TypeMismatch,
)
from applykit.core.results import GridResult, ListResult, MappingResult, VectorResult
from applykit.core.shapes import (
    ShapeDescriptor,
    ShapeTemplate,
    describe_shape,
    inspect_value,
)

__all__ = [
    "OrderedContainer",
    "Axis",
    "ResultKind",
    "ShapeKind",
    "ValueKind",
    "ApplyError",
    "ElementError",
    "InvalidShape",
    "RecyclingWarning",
    "TypeMismatch",
    "GridResult",
    "ListResult",
    "MappingResult",
    "VectorResult",
    "ShapeDescriptor",
    "ShapeTemplate",
    "describe_shape",
    "inspect_value",
]
