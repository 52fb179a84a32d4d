"""Input validation with clear error messages for plot authors."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

import numpy as np
import pandas as pd


def validate_width(width: Any) -> int:
    """Validate the declared row width of a flat heatmap source.

    Returns the width as a plain int.
    """
    if isinstance(width, bool) or not isinstance(width, Integral):
        raise TypeError(
            f"Heatmap width must be an integer, got {type(width).__name__}."
        )
    if width <= 0:
        raise ValueError(
            f"Cannot build a heatmap with zero or negative width (got {width})."
        )
    return int(width)


def validate_rows(rows: Any) -> None:
    """Validate that a 2-D source looks like a sequence of row sequences."""
    if isinstance(rows, (str, bytes)):
        raise TypeError(
            "Expected a sequence of rows, got a string. "
            "Pass a list of lists (one inner list per row)."
        )
    if not hasattr(rows, "__iter__"):
        raise TypeError(
            f"Expected a sequence of rows, got {type(rows).__name__}."
        )
    validate_reiterable(rows)


def validate_reiterable(data: Any) -> None:
    """Reject one-shot iterators: heatmap data is traversed more than once."""
    if iter(data) is data:
        raise TypeError(
            f"Heatmap data must support repeated iteration, got a one-shot "
            f"{type(data).__name__}. Convert it with list(...) first."
        )


def validate_size(width: Any, height: Any) -> tuple[float, float]:
    """Validate a drawing surface size. Returns it as a float pair."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(
                f"Surface {name} must be a number, got {type(value).__name__}."
            )
        if not math.isfinite(value) or value < 0:
            raise ValueError(
                f"Surface {name} must be finite and non-negative, got {value}."
            )
    return float(width), float(height)


def validate_array_matrix(data: Any) -> np.ndarray:
    """Validate that data is a non-empty 2-D numeric array."""
    array = np.asarray(data)
    if array.ndim != 2:
        raise ValueError(
            f"Expected a 2-D array, got {array.ndim} dimension(s). "
            "Use a row width with flat data instead."
        )
    if array.shape[0] == 0:
        raise ValueError("Array has no rows. Provide at least one row.")
    if (
        not np.issubdtype(array.dtype, np.number)
        or np.issubdtype(array.dtype, np.complexfloating)
    ):
        raise TypeError(
            f"Array must be numeric and real-valued, got dtype {array.dtype}."
        )
    return array


def validate_dataframe_matrix(data: Any) -> pd.DataFrame:
    """Validate that data is a numeric DataFrame suitable for heatmap display.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            "Wrap your data with pd.DataFrame(data, index=row_ids, columns=col_ids)."
        )
    if data.empty:
        raise ValueError("DataFrame is empty. Provide at least one row and one column.")
    numeric_df = data.select_dtypes(include=[np.number])
    if numeric_df.shape[1] != data.shape[1]:
        non_numeric = [c for c in data.columns if c not in numeric_df.columns]
        raise TypeError(
            f"All columns must be numeric. Non-numeric columns: {non_numeric[:5]}"
            + (f" (and {len(non_numeric) - 5} more)" if len(non_numeric) > 5 else "")
        )
    return data


def validate_colormap_name(name: str) -> str:
    """Validate that a colormap name is registered with matplotlib."""
    import matplotlib

    if name not in matplotlib.colormaps:
        raise ValueError(
            f"Unknown colormap '{name}'. Use 'five_color_heatmap', 'intensity' "
            f"or a matplotlib colormap name like 'viridis', 'plasma', 'RdBu_r'."
        )
    return name
