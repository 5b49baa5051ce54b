"""Ordered, optionally labelled containers mapped over by the primitives."""

from collections.abc import Iterable, Mapping
from typing import Any, Iterator, List, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = ["OrderedContainer"]


class OrderedContainer(BaseModel):
    """An ordered sequence of values with optional labels.

    Validation ensures that:
        - When labels are present there is exactly one label per value

    Labels need not be unique; lookups by label return the first match.

    Attributes:
        values: The elements, in order.
        labels: One label per element, or None.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    values: List[Any] = Field(default_factory=list, description="Elements in order.")
    labels: Optional[List[str]] = Field(None, description="One label per element.")

    @model_validator(mode="after")
    def _check_labels(self) -> "OrderedContainer":
        if self.labels is not None and len(self.labels) != len(self.values):
            raise ValueError(
                f"Got {len(self.labels)} labels for {len(self.values)} values."
            )
        return self

    @classmethod
    def coerce(cls, obj: Any) -> "OrderedContainer":
        """Build a container from a caller-supplied collection.

        Args:
            obj: A list, tuple, range or other iterable; a mapping (keys become
                labels); a 1-D ``numpy.ndarray``; a ``pandas.Series`` (a
                non-default index becomes the labels); or an existing
                container. Strings, bytes and non-iterables become a
                one-element container.

        Raises:
            TypeError: If ``obj`` is None or a ``pandas.DataFrame``.
            ValueError: If ``obj`` is an array with more than one dimension.
        """
        if obj is None:
            raise TypeError("Cannot map over None.")
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, pd.DataFrame):
            raise TypeError(
                "Cannot map over a DataFrame as a container; use map_axis to "
                "apply a function to its rows or columns."
            )
        if isinstance(obj, pd.Series):
            labels = None
            if not isinstance(obj.index, pd.RangeIndex):
                labels = [str(label) for label in obj.index]
            return cls(values=list(obj.to_numpy()), labels=labels)
        if isinstance(obj, Mapping):
            return cls(
                values=list(obj.values()), labels=[str(key) for key in obj.keys()]
            )
        if isinstance(obj, np.ndarray):
            if obj.ndim == 0:
                return cls(values=[obj.item()])
            if obj.ndim != 1:
                raise ValueError(
                    f"Expected a 1-D array, got {obj.ndim} dimensions; use map_axis for grids."
                )
            return cls(values=list(obj))
        if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
            return cls(values=[obj])
        return cls(values=list(obj))

    def get(self, label: str) -> Any:
        """Value of the first element carrying ``label``.

        Raises:
            KeyError: If the container is unlabelled or no element matches.
        """
        if self.labels is not None:
            for name, value in zip(self.labels, self.values):
                if name == label:
                    return value
        raise KeyError(label)

    def label_at(self, index: int) -> Optional[str]:
        return None if self.labels is None else self.labels[index]

    def with_value_labels(self) -> "OrderedContainer":
        """Use the elements as labels when all of them are strings.

        Returns the container unchanged if it already has labels or holds any
        non-string element.
        """
        if self.labels is not None or not self.values:
            return self
        if not all(isinstance(value, str) for value in self.values):
            return self
        return OrderedContainer(values=self.values, labels=list(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]
