"""Enumerations for value kinds, shape kinds, result kinds and grid axes."""

from enum import Enum
import typing as tp

import numpy as np

__all__ = ["ValueKind", "ShapeKind", "ResultKind", "Axis"]


class ValueKind(Enum):
    """Atomic value types a mapping result can be made of.

    The numeric kinds are ordered: a lower kind promotes to a higher one when
    values are combined (``INTEGER`` with ``DOUBLE`` gives ``DOUBLE``).
    ``CHARACTER`` stands on its own and only combines with itself.
    """

    LOGICAL = "logical"
    INTEGER = "integer"
    DOUBLE = "double"
    COMPLEX = "complex"
    CHARACTER = "character"

    @property
    def is_numeric(self) -> bool:
        return self is not ValueKind.CHARACTER

    @property
    def rank(self) -> int:
        return _NUMERIC_ORDER.index(self) if self.is_numeric else -1

    def to_numpy_dtype(self) -> np.dtype:
        """NumPy dtype used to store values of this kind."""
        return np.dtype(_NUMPY_DTYPES[self])

    def storage_dtype(self, values: tp.Iterable[tp.Any]) -> np.dtype:
        """Dtype able to hold ``values`` of this kind.

        Integers outside the int64 range are kept as Python ints in an
        object array.
        """
        if self is ValueKind.INTEGER:
            bounds = np.iinfo(np.int64)
            if any(not bounds.min <= int(value) <= bounds.max for value in values):
                return np.dtype(object)
        return self.to_numpy_dtype()

    def accepts(self, other: "ValueKind") -> bool:
        """Whether a value of kind ``other`` fits where ``self`` is expected."""
        if self is ValueKind.CHARACTER or other is ValueKind.CHARACTER:
            return self is other
        return other.rank <= self.rank

    @classmethod
    def unify(cls, kinds: tp.Iterable["ValueKind"]) -> tp.Optional["ValueKind"]:
        """Common kind of ``kinds``, or None if they cannot be combined."""
        result: tp.Optional[ValueKind] = None
        for kind in kinds:
            if result is None:
                result = kind
            elif result.accepts(kind):
                continue
            elif kind.accepts(result):
                result = kind
            else:
                return None
        return result

    @classmethod
    def of(cls, value: tp.Any) -> tp.Optional["ValueKind"]:
        """Kind of an atomic value, or None if ``value`` is not atomic."""
        # bool is a subclass of int, check it first
        if isinstance(value, (bool, np.bool_)):
            return cls.LOGICAL
        if isinstance(value, (int, np.integer)):
            return cls.INTEGER
        if isinstance(value, (float, np.floating)):
            return cls.DOUBLE
        if isinstance(value, (complex, np.complexfloating)):
            return cls.COMPLEX
        if isinstance(value, (str, np.str_)):
            return cls.CHARACTER
        return None


_NUMERIC_ORDER = [
    ValueKind.LOGICAL,
    ValueKind.INTEGER,
    ValueKind.DOUBLE,
    ValueKind.COMPLEX,
]

_NUMPY_DTYPES = {
    ValueKind.LOGICAL: np.bool_,
    ValueKind.INTEGER: np.int64,
    ValueKind.DOUBLE: np.float64,
    ValueKind.COMPLEX: np.complex128,
    ValueKind.CHARACTER: object,
}


class ShapeKind(Enum):
    """Shape of a single mapping result."""

    SCALAR = "scalar"
    VECTOR = "vector"
    IRREGULAR = "irregular"


class ResultKind(Enum):
    """Shape of a collected mapping result."""

    LIST = "list"
    VECTOR = "vector"
    GRID = "grid"


class Axis(Enum):
    """Grid axis a function is applied along."""

    ROWS = "rows"
    COLUMNS = "columns"
