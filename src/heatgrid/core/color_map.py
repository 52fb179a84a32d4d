"""ColorMap: normalised offset → RGBA colour via a matplotlib-backed lookup table."""

from __future__ import annotations

import math
from dataclasses import dataclass

import matplotlib
import numpy as np
from matplotlib.colors import LinearSegmentedColormap

from .validation import validate_colormap_name


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba_bytes(cls, rgba) -> Color:
        r, g, b, a = (int(channel) / 255 for channel in rgba)
        return cls(r, g, b, a)

    def to_hex(self) -> str:
        """``#rrggbb`` string, ignoring alpha."""
        return "#{:02x}{:02x}{:02x}".format(
            *(round(channel * 255) for channel in (self.r, self.g, self.b))
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


# Built-in gradients, registered with matplotlib so they can be used by name.
FIVE_COLOR_HEATMAP = "five_color_heatmap"
INTENSITY = "intensity"

_BUILTIN_GRADIENTS = {
    FIVE_COLOR_HEATMAP: ["#0000ff", "#00ffff", "#00ff00", "#ffff00", "#ff0000"],
    INTENSITY: ["#000000", "#ffffff"],
}


def _register_builtin_gradients() -> None:
    for name, colors in _BUILTIN_GRADIENTS.items():
        if name not in matplotlib.colormaps:
            matplotlib.colormaps.register(
                LinearSegmentedColormap.from_list(name, colors), name=name
            )


_register_builtin_gradients()

DEFAULT_CMAP = FIVE_COLOR_HEATMAP
DEFAULT_NAN_COLOR = Color(0.78, 0.78, 0.78)


class ColorMap:
    """Resolves offsets in [0, 1] to colours along a gradient.

    The gradient is sampled once into a 256-entry RGBA lookup table; offsets
    outside [0, 1] are clamped and NaN offsets resolve to ``nan_color``.
    """

    __slots__ = ("_lut", "_cmap_name", "_nan_color")

    LUT_SIZE = 256

    def __init__(
        self,
        cmap_name: str = DEFAULT_CMAP,
        nan_color: Color = DEFAULT_NAN_COLOR,
    ) -> None:
        validate_colormap_name(cmap_name)
        self._cmap_name = cmap_name
        self._nan_color = nan_color
        self._lut = self._build_lut()

    def _build_lut(self) -> np.ndarray:
        """Build a (256, 4) uint8 RGBA lookup table from the matplotlib cmap."""
        cmap = matplotlib.colormaps[self._cmap_name]
        positions = np.linspace(0.0, 1.0, self.LUT_SIZE)
        rgba_float = cmap(positions)  # (256, 4) float in [0, 1]
        return np.round(rgba_float * 255).astype(np.uint8)

    @property
    def lut(self) -> np.ndarray:
        """(256, 4) uint8 RGBA lookup table."""
        return self._lut

    @property
    def cmap_name(self) -> str:
        return self._cmap_name

    @property
    def nan_color(self) -> Color:
        return self._nan_color

    def offset_to_index(self, offset: float) -> int:
        """Map an offset to a LUT index [0, 255]."""
        clamped = max(0.0, min(1.0, offset))
        return int(clamped * (self.LUT_SIZE - 1))

    def color_for_offset(self, offset: float) -> Color:
        if math.isnan(offset):
            return self._nan_color
        return Color.from_rgba_bytes(self._lut[self.offset_to_index(offset)])

    def __repr__(self) -> str:
        return f"ColorMap({self._cmap_name!r})"
