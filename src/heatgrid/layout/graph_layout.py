"""Graph layout state shared by plots, and the host side of the layout/draw protocol."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.validation import validate_size
from .geometry import Size

if TYPE_CHECKING:
    from ..render.base import Renderer

logger = logging.getLogger(__name__)


class MarkerLabelAlignment(enum.Enum):
    """Where marker labels sit relative to their markers."""

    AT_MARKERS = "at_markers"
    BETWEEN_MARKERS = "between_markers"


@dataclass
class PlotLabel:
    """Axis titles drawn by the hosting chrome."""

    x_label: str = "X-Axis"
    y_label: str = "Y-Axis"
    label_size: float = 15.0


@dataclass
class PlotMarkers:
    """Axis marker positions and their label texts."""

    x_markers: list[float] = field(default_factory=list)
    y_markers: list[float] = field(default_factory=list)
    x_markers_text: list[str] = field(default_factory=list)
    y_markers_text: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "xMarkers": list(self.x_markers),
            "yMarkers": list(self.y_markers),
            "xMarkersText": list(self.x_markers_text),
            "yMarkersText": list(self.y_markers_text),
        }


@dataclass
class GraphLayout:
    """Styling state a plot hands to the hosting chrome renderer."""

    enable_primary_axis_grid: bool = True
    draws_grid_over_foreground: bool = False
    marker_label_alignment: MarkerLabelAlignment = MarkerLabelAlignment.AT_MARKERS
    plot_label: PlotLabel | None = None


class HasGraphLayout:
    """Mixin for plots that expose ``layout_data`` and ``draw_data``.

    ``draw_graph`` runs one full layout/draw cycle against a renderer. If the
    drawing data reports a ``desired_plot_size`` the draw phase gets that
    size, capped to the surface it was laid out for.
    """

    layout: GraphLayout

    def draw_graph(self, size: Size, renderer: Renderer) -> tuple[Any, PlotMarkers | None]:
        validate_size(size.width, size.height)
        drawing_data, markers = self.layout_data(size, renderer)
        plot_size = size
        desired = getattr(drawing_data, "desired_plot_size", None)
        if desired is not None and desired.fits_within(size):
            plot_size = desired
        logger.debug(
            "Drawing %s at %gx%g (surface %gx%g)",
            type(self).__name__, plot_size.width, plot_size.height,
            size.width, size.height,
        )
        self.draw_data(drawing_data, plot_size, renderer)
        return drawing_data, markers
