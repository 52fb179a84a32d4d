"""Heatmappable data sources: grid extents plus row-major cell traversal.

Every source exposes ``width``, ``height`` and ``__iter__``. Iterating
returns a fresh cursor each time, so a heatmap can walk the data once to
find its value range and again to draw it, without copying the data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Any, Iterable, Iterator, NamedTuple

import numpy as np
import pandas as pd

from .validation import (
    validate_array_matrix,
    validate_dataframe_matrix,
    validate_reiterable,
    validate_rows,
    validate_width,
)

logger = logging.getLogger(__name__)


class HeatmapCell(NamedTuple):
    """A single value tagged with its grid position."""

    row: int
    column: int
    value: Any


class Heatmappable(ABC):
    """A data source that can be laid out as a grid of cells.

    Rows may be shorter than ``width`` but never longer. Iteration yields
    :class:`HeatmapCell` triples in row-major order and can be restarted.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[HeatmapCell]:
        ...

    def values(self) -> Iterator[Any]:
        """Iterate over the raw values only, in row-major order."""
        return (cell.value for cell in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


# --- 1-D sources ---


class _FlatCursor:
    """Walks a flat sequence, wrapping to the next row every ``width`` items."""

    __slots__ = ("_values", "_width", "_row", "_column")

    def __init__(self, base: Iterable[Any], width: int) -> None:
        self._values = iter(base)
        self._width = width
        self._row = 0
        self._column = 0

    def __iter__(self) -> _FlatCursor:
        return self

    def __next__(self) -> HeatmapCell:
        value = next(self._values)
        cell = HeatmapCell(self._row, self._column, value)
        self._column += 1
        if self._column == self._width:
            self._column = 0
            self._row += 1
        return cell


class Heatmappable1D(Heatmappable):
    """A flat sequence reshaped into rows of a declared width.

    The last row holds the remainder and is not padded. An empty sequence
    gives a zero-height heatmap with nothing to draw.
    """

    __slots__ = ("_base", "_width", "_height")

    def __init__(self, base: Iterable[Any], width: int) -> None:
        self._width = validate_width(width)
        validate_reiterable(base)
        if isinstance(base, Sized):
            count = len(base)
        else:
            count = sum(1 for _ in base)
        self._base = base
        # Ceiling division.
        self._height = -(-count // self._width)

    @property
    def base(self) -> Iterable[Any]:
        return self._base

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[HeatmapCell]:
        return _FlatCursor(self._base, self._width)


# --- 2-D sources ---


class _NestedCursor:
    """Flattens nested row iteration into row-major cells, skipping empty rows."""

    __slots__ = ("_rows", "_columns", "_row")

    def __init__(self, base: Iterable[Iterable[Any]]) -> None:
        self._rows = iter(base)
        self._columns: Iterator[tuple[int, Any]] = iter(())
        self._row = -1

    def __iter__(self) -> _NestedCursor:
        return self

    def __next__(self) -> HeatmapCell:
        while True:
            pair = next(self._columns, None)
            if pair is not None:
                column, value = pair
                return HeatmapCell(self._row, column, value)
            # Raises StopIteration once every row is consumed.
            self._columns = enumerate(next(self._rows))
            self._row += 1


class Heatmappable2D(Heatmappable):
    """A sequence of row sequences, possibly of unequal lengths.

    ``width`` is the length of the longest row; shorter rows simply end
    early. The outer sequence must contain at least one row.
    """

    __slots__ = ("_base", "_width", "_height")

    def __init__(self, base: Iterable[Iterable[Any]]) -> None:
        validate_rows(base)
        width = 0
        height = 0
        for row in base:
            validate_rows(row)
            length = len(row) if isinstance(row, Sized) else sum(1 for _ in row)
            width = max(width, length)
            height += 1
        if height == 0:
            raise ValueError(
                "Cannot build a heatmap from an empty sequence of rows. "
                "Provide at least one row."
            )
        self._base = base
        self._width = width
        self._height = height
        logger.debug("Scanned 2-D source: %d rows, widest row %d", height, width)

    @property
    def base(self) -> Iterable[Iterable[Any]]:
        return self._base

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[HeatmapCell]:
        return _NestedCursor(self._base)


class HeatmappableArray(Heatmappable):
    """A dense 2-D numeric array. Extents come straight from its shape."""

    __slots__ = ("_array",)

    def __init__(self, array: Any) -> None:
        array = validate_array_matrix(array)
        # Read-only view; no copy of the caller's data.
        view = array.view()
        view.flags.writeable = False
        self._array: np.ndarray = view

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> HeatmappableArray:
        """Wrap the values of a numeric DataFrame (rows stay rows)."""
        df = validate_dataframe_matrix(df)
        return cls(df.to_numpy())

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def width(self) -> int:
        return self._array.shape[1]

    @property
    def height(self) -> int:
        return self._array.shape[0]

    def __iter__(self) -> Iterator[HeatmapCell]:
        return (
            HeatmapCell(row, column, value.item())
            for (row, column), value in np.ndenumerate(self._array)
        )
