"""applykit: apply-family mapping primitives with shape simplification."""

from applykit.core import (
    ApplyError,
    Axis,
    ElementError,
    GridResult,
    InvalidShape,
    ListResult,
    MappingResult,
    OrderedContainer,
    RecyclingWarning,
    ResultKind,
    ShapeDescriptor,
    ShapeKind,
    ShapeTemplate,
    TypeMismatch,
    ValueKind,
    VectorResult,
    describe_shape,
)
from applykit.functional import (
    map_axis,
    map_elements,
    map_multi,
    map_simplify,
    map_typed,
    simplify_results,
)

__version__ = "0.1.0"

__all__ = [
    "ApplyError",
    "Axis",
    "ElementError",
    "GridResult",
    "InvalidShape",
    "ListResult",
    "MappingResult",
    "OrderedContainer",
    "RecyclingWarning",
    "ResultKind",
    "ShapeDescriptor",
    "ShapeKind",
    "ShapeTemplate",
    "TypeMismatch",
    "ValueKind",
    "VectorResult",
    "describe_shape",
    "map_axis",
    "map_elements",
    "map_multi",
    "map_simplify",
    "map_typed",
    "simplify_results",
]
