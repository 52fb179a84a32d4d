"""Heatmap: a grid of cells coloured by where each value falls in the data's range."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from ..core.color_map import ColorMap
from ..core.heatmappable import Heatmappable
from ..core.mapping import ValueMapping, linear
from ..core.validation import validate_size
from ..layout.axis_layout import AxisLayout
from ..layout.geometry import Point, Rect, Size
from ..layout.graph_layout import GraphLayout, MarkerLabelAlignment, PlotMarkers
from ..render.base import HatchPattern
from .base import Plot

if TYPE_CHECKING:
    from ..render.base import Renderer

logger = logging.getLogger(__name__)


@dataclass
class HeatmapDrawingData:
    """Result of the layout phase, consumed by the draw phase.

    ``value_range`` is None when the data produced no values; nothing is
    drawn in that case.
    """

    values: Heatmappable | None = None
    value_range: tuple[Any, Any] | None = None
    item_size: Size = field(default_factory=Size.zero)
    rows: int = 0
    columns: int = 0
    row_layout: AxisLayout = field(default_factory=lambda: AxisLayout(0, 0.0))
    column_layout: AxisLayout = field(default_factory=lambda: AxisLayout(0, 0.0))
    # Rounding cell sizes down can leave a gap to the plot border, so the
    # host is told the smaller size the grid actually needs.
    desired_plot_size: Size = field(default_factory=Size.zero)

    def cell_rect(self, row: int, column: int) -> Rect:
        origin = Point(column * self.item_size.width, row * self.item_size.height)
        return Rect.from_origin(origin, self.item_size)

    def cell_at(self, x: float, y: float) -> tuple[int, int] | None:
        """Return ``(row, column)`` of the grid cell under a point, if any."""
        column = self.column_layout.index_at(x)
        row = self.row_layout.index_at(y)
        if row is None or column is None:
            return None
        return row, column


def _cell_dimension(extent: float, count: int) -> float:
    if count == 0:
        return 0.0
    size = extent / count
    # Whole-unit cells avoid aliasing at cell boundaries; sub-unit cells
    # would collapse to zero if rounded.
    if size > 1:
        size = float(math.floor(size))
    return size


def compute_layout(
    values: Heatmappable,
    size: Size,
    mapping: ValueMapping,
) -> tuple[HeatmapDrawingData, PlotMarkers]:
    """Scan ``values`` for their range and fit the grid into ``size``."""
    surface_width, surface_height = validate_size(size.width, size.height)

    value_range = mapping.find_range(values.values())

    rows = values.height
    columns = values.width
    item_size = Size(
        _cell_dimension(surface_width, columns),
        _cell_dimension(surface_height, rows),
    )
    row_layout = AxisLayout(rows, item_size.height)
    column_layout = AxisLayout(columns, item_size.width)

    results = HeatmapDrawingData(
        values=values,
        value_range=value_range,
        item_size=item_size,
        rows=rows,
        columns=columns,
        row_layout=row_layout,
        column_layout=column_layout,
        desired_plot_size=Size(column_layout.total_size, row_layout.total_size),
    )

    # TODO: allow custom marker text instead of cell indices.
    markers = PlotMarkers(
        x_markers=column_layout.to_list(),
        y_markers=row_layout.to_list(),
        x_markers_text=[str(i) for i in range(columns)],
        y_markers_text=[str(i) for i in range(rows)],
    )

    logger.debug(
        "Heatmap layout: %dx%d cells of %gx%g, range=%r",
        columns, rows, item_size.width, item_size.height, value_range,
    )
    return results, markers


class Heatmap(Plot):
    """A plot of 2-dimensional data where each value is coloured along a gradient.

    Usage::

        hm = Heatmap(Heatmappable1D(samples, width=24))
        hm.show_grid = True
        hm.draw_graph(Size(480, 320), renderer)

    Use ``mapping`` to control how values are graded, e.g.
    ``KeyMapping(lambda s: s.intensity)`` to grade objects by a property.
    """

    def __init__(
        self,
        values: Heatmappable,
        mapping: ValueMapping | None = None,
        color_map: ColorMap | None = None,
        show_grid: bool = False,
        style: Callable[[Heatmap], None] | None = None,
    ) -> None:
        if not isinstance(values, Heatmappable):
            raise TypeError(
                f"Expected a Heatmappable data source, got {type(values).__name__}. "
                "Use heatgrid.heatmap(data) to wrap raw sequences or arrays."
            )
        super().__init__(GraphLayout(
            enable_primary_axis_grid=show_grid,
            draws_grid_over_foreground=True,
            marker_label_alignment=MarkerLabelAlignment.BETWEEN_MARKERS,
        ))
        self._values = values
        self._mapping = mapping if mapping is not None else linear
        self._color_map = color_map if color_map is not None else ColorMap()
        if style is not None:
            style(self)

    @property
    def values(self) -> Heatmappable:
        return self._values

    @property
    def mapping(self) -> ValueMapping:
        return self._mapping

    @property
    def color_map(self) -> ColorMap:
        return self._color_map

    @color_map.setter
    def color_map(self, color_map: ColorMap) -> None:
        self._color_map = color_map

    @property
    def show_grid(self) -> bool:
        return self.layout.enable_primary_axis_grid

    @show_grid.setter
    def show_grid(self, value: bool) -> None:
        self.layout.enable_primary_axis_grid = value

    # --- Layout and drawing ---

    def layout_data(
        self, size: Size, renderer: Renderer
    ) -> tuple[HeatmapDrawingData, PlotMarkers]:
        return compute_layout(self._values, size, self._mapping)

    def draw_data(
        self, drawing_data: HeatmapDrawingData, size: Size, renderer: Renderer
    ) -> None:
        if drawing_data.values is None or drawing_data.value_range is None:
            return
        min_value, max_value = drawing_data.value_range

        count = 0
        for row, column, value in drawing_data.values:
            offset = self._mapping.interpolate(value, min_value, max_value)
            color = self._color_map.color_for_offset(offset)
            renderer.draw_solid_rect(
                drawing_data.cell_rect(row, column), color, HatchPattern.NONE
            )
            count += 1
        logger.debug("Heatmap drew %d cells", count)

    def __repr__(self) -> str:
        return f"Heatmap({self._values!r}, mapping={self._mapping!r})"
