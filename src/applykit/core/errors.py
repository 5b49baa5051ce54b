"""Errors and warnings raised by the mapping primitives."""

import typing as tp

__all__ = [
    "ApplyError",
    "ElementError",
    "TypeMismatch",
    "InvalidShape",
    "RecyclingWarning",
]


class ApplyError(Exception):
    """Base class for fatal mapping errors."""


class ElementError(ApplyError):
    """The mapped function raised while processing one element.

    Attributes:
        index: 0-based position of the failing element (or tuple, row, column).
        label: Label of the failing element, if the input was labelled.
        cause: The exception raised by the mapped function.
    """

    def __init__(self, index: int, cause: BaseException, label: tp.Optional[str] = None):
        self.index = index
        self.label = label
        self.cause = cause
        where = f"index {index}" if label is None else f"index {index} ('{label}')"
        super().__init__(
            f"Function failed at {where}: {type(cause).__name__}: {cause}"
        )


class TypeMismatch(ApplyError, TypeError):
    """A result did not conform to the declared template.

    Attributes:
        index: 0-based position of the offending result.
        label: Label of the offending element, if any.
        expected: The template that was declared.
        actual: Shape descriptor of the offending result.
    """

    def __init__(
        self,
        index: int,
        expected: tp.Any,
        actual: tp.Any,
        label: tp.Optional[str] = None,
    ):
        self.index = index
        self.label = label
        self.expected = expected
        self.actual = actual
        where = f"index {index}" if label is None else f"index {index} ('{label}')"
        super().__init__(
            f"Result at {where} does not match template: "
            f"expected {expected}, got {actual}"
        )


class InvalidShape(ApplyError, ValueError):
    """The input grid is not rectangular or the axis is not recognised."""


class RecyclingWarning(UserWarning):
    """A container was recycled a non-whole number of times.

    Collected on the mapping result instead of being raised.

    Attributes:
        container_index: Position of the recycled container among the inputs.
        length: Length of the recycled container.
        longest: Length of the longest container.
    """

    def __init__(self, container_index: int, length: int, longest: int):
        self.container_index = container_index
        self.length = length
        self.longest = longest
        super().__init__(
            f"Longest argument length ({longest}) is not a multiple of the "
            f"length of argument {container_index} ({length})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecyclingWarning):
            return NotImplemented
        return (self.container_index, self.length, self.longest) == (
            other.container_index,
            other.length,
            other.longest,
        )

    def __hash__(self) -> int:
        return hash((self.container_index, self.length, self.longest))
