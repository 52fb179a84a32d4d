"""Plot: the two-phase layout/draw contract every plot type presents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..layout.graph_layout import GraphLayout, HasGraphLayout, PlotMarkers
from ..layout.geometry import Size

if TYPE_CHECKING:
    from ..render.base import Renderer


class Plot(HasGraphLayout, ABC):
    """Base class for plots driven by a hosting layout.

    The host calls ``layout_data`` once per render target, then passes its
    result unchanged to ``draw_data``. Drawing data is never kept between
    render cycles.
    """

    def __init__(self, layout: GraphLayout | None = None) -> None:
        self.layout = layout if layout is not None else GraphLayout()

    @abstractmethod
    def layout_data(self, size: Size, renderer: Renderer) -> tuple[Any, PlotMarkers | None]:
        """Compute drawing data and axis markers for a surface of ``size``."""
        ...

    @abstractmethod
    def draw_data(self, drawing_data: Any, size: Size, renderer: Renderer) -> None:
        """Issue draw calls for previously computed drawing data."""
        ...
