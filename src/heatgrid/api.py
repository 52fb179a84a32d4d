"""Convenience constructors that pick a data source for raw input."""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
import pandas as pd

from .core.heatmappable import (
    Heatmappable,
    Heatmappable1D,
    Heatmappable2D,
    HeatmappableArray,
)
from .core.mapping import ValueMapping
from .plots.heatmap import Heatmap


def as_heatmappable(data: Any, width: int | None = None) -> Heatmappable:
    """Wrap raw data in the matching Heatmappable source.

    - ``width`` given: flat data sliced into rows of that width.
    - ``pd.DataFrame``: validated numeric frame, rows stay rows.
    - 2-D ``np.ndarray``: dense array.
    - anything else: a sequence of row sequences.
    """
    if isinstance(data, Heatmappable):
        if width is not None:
            raise ValueError("width cannot be combined with an existing Heatmappable.")
        return data
    if width is not None:
        return Heatmappable1D(data, width)
    if isinstance(data, pd.DataFrame):
        return HeatmappableArray.from_dataframe(data)
    if isinstance(data, np.ndarray):
        return HeatmappableArray(data)
    return Heatmappable2D(data)


def heatmap(
    data: Iterable[Any] | np.ndarray | pd.DataFrame | Heatmappable,
    width: int | None = None,
    mapping: ValueMapping | None = None,
    **options: Any,
) -> Heatmap:
    """Build a Heatmap plot from raw data.

    Parameters
    ----------
    data : sequence, sequence of sequences, ndarray, DataFrame or Heatmappable
        Values to plot.
    width : int, optional
        Row width for flat data. Must be greater than 0.
    mapping : ValueMapping, optional
        How values are ordered and graded. Defaults to linear.
    **options
        Passed to :class:`Heatmap` (``color_map``, ``show_grid``, ``style``).
    """
    return Heatmap(as_heatmappable(data, width), mapping=mapping, **options)
