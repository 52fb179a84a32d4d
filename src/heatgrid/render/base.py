"""Renderer: the drawing primitives every output backend implements."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from ..core.color_map import Color
from ..layout.geometry import Point, Rect


class HatchPattern(enum.Enum):
    NONE = "none"
    FORWARD_SLASH = "forward_slash"
    BACKWARD_SLASH = "backward_slash"
    HOLLOW_CIRCLE = "hollow_circle"
    FILLED_CIRCLE = "filled_circle"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    GRID = "grid"
    CROSS = "cross"


class Renderer(ABC):
    """Backend drawing surface (vector, raster or native).

    Plots only issue calls through this interface, so backends are
    interchangeable.
    """

    @abstractmethod
    def draw_solid_rect(
        self,
        rect: Rect,
        fill_color: Color,
        hatch_pattern: HatchPattern = HatchPattern.NONE,
    ) -> None:
        """Draw an axis-aligned filled rectangle."""
        ...

    @abstractmethod
    def draw_text(
        self,
        text: str,
        location: Point,
        text_size: float,
        color: Color,
        stroke_width: float = 1.0,
        angle: float = 0.0,
    ) -> None:
        ...
