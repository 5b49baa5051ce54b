"""Result types returned by the mapping primitives.

A mapping call returns one of three shapes:
    - **ListResult**: heterogeneous, order-preserving results.
    - **VectorResult**: one atomic value per input element, stored in a 1-D
      NumPy array.
    - **GridResult**: one fixed-length vector per input element, stored as
      the columns of a 2-D NumPy array (``k`` rows by ``n`` columns).

Every result carries the recycling warnings collected during the call and
converts to pandas for further analysis.
"""

from typing import Any, Iterator, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ResultKind
from .errors import RecyclingWarning

__all__ = [
    "ListResult",
    "VectorResult",
    "GridResult",
    "MappingResult",
]


def _first_match(labels: Optional[List[str]], label: str) -> int:
    if labels is not None:
        for i, name in enumerate(labels):
            if name == label:
                return i
    raise KeyError(label)


def _check_label_count(labels: Optional[List[str]], expected: int, what: str) -> None:
    if labels is not None and len(labels) != expected:
        raise ValueError(f"Got {len(labels)} {what} for {expected} entries.")


class _BaseResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    warnings: Tuple[RecyclingWarning, ...] = Field(
        default=(), description="Recycling warnings collected during the call."
    )

    @property
    def kind(self) -> ResultKind:
        raise NotImplementedError

    def with_warnings(self, warnings: Tuple[RecyclingWarning, ...]) -> Any:
        if not warnings:
            return self
        return self.model_copy(update={"warnings": tuple(warnings)})


class ListResult(_BaseResult):
    """Order-preserving list of arbitrarily shaped results."""

    values: List[Any] = Field(default_factory=list)
    labels: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_labels(self) -> "ListResult":
        _check_label_count(self.labels, len(self.values), "labels")
        return self

    @property
    def kind(self) -> ResultKind:
        return ResultKind.LIST

    def get(self, label: str) -> Any:
        return self.values[_first_match(self.labels, label)]

    def tolist(self) -> List[Any]:
        return list(self.values)

    def to_series(self) -> pd.Series:
        return pd.Series(self.values, index=self.labels, dtype=object)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]


class VectorResult(_BaseResult):
    """Homogeneous 1-D result, one value per input element."""

    values: np.ndarray
    labels: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "VectorResult":
        if self.values.ndim != 1:
            raise ValueError(f"Vector values must be 1-D, got {self.values.ndim}-D.")
        _check_label_count(self.labels, len(self.values), "labels")
        return self

    @property
    def kind(self) -> ResultKind:
        return ResultKind.VECTOR

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype

    def get(self, label: str) -> Any:
        return self.values[_first_match(self.labels, label)]

    def tolist(self) -> List[Any]:
        return self.values.tolist()

    def to_series(self) -> pd.Series:
        return pd.Series(self.values, index=self.labels)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]


class GridResult(_BaseResult):
    """Homogeneous 2-D result with one column per input element.

    Attributes:
        values: Array of shape ``(k, n)``; column ``j`` is the result of the
            ``j``-th input element.
        row_labels: Names of the ``k`` positions within each result.
        col_labels: Labels of the ``n`` input elements.
    """

    values: np.ndarray
    row_labels: Optional[List[str]] = None
    col_labels: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "GridResult":
        if self.values.ndim != 2:
            raise ValueError(f"Grid values must be 2-D, got {self.values.ndim}-D.")
        _check_label_count(self.row_labels, self.values.shape[0], "row labels")
        _check_label_count(self.col_labels, self.values.shape[1], "column labels")
        return self

    @property
    def kind(self) -> ResultKind:
        return ResultKind.GRID

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape  # type: ignore[return-value]

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype

    def row(self, key: Union[int, str]) -> np.ndarray:
        """Row by position or by (first matching) row label."""
        index = key if isinstance(key, int) else _first_match(self.row_labels, key)
        return self.values[index, :]

    def column(self, key: Union[int, str]) -> np.ndarray:
        """Column by position or by (first matching) column label."""
        index = key if isinstance(key, int) else _first_match(self.col_labels, key)
        return self.values[:, index]

    def tolist(self) -> List[List[Any]]:
        return self.values.tolist()

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.values, index=self.row_labels, columns=self.col_labels
        )

    def __len__(self) -> int:
        # one column per input element
        return self.values.shape[1]

    def __iter__(self) -> Iterator[np.ndarray]:  # type: ignore[override]
        return iter(self.values.T)


MappingResult = Union[ListResult, VectorResult, GridResult]
