"""heatgrid: heatmaps over flat or nested data, drawn through pluggable renderers."""

import logging

from ._version import __version__
from .api import as_heatmappable, heatmap
from .core.color_map import Color, ColorMap
from .core.heatmappable import (
    HeatmapCell,
    Heatmappable,
    Heatmappable1D,
    Heatmappable2D,
    HeatmappableArray,
)
from .core.mapping import CustomMapping, KeyMapping, LinearMapping, ValueMapping, linear
from .layout.geometry import Point, Rect, Size
from .layout.graph_layout import GraphLayout, PlotLabel, PlotMarkers
from .plots.heatmap import Heatmap, HeatmapDrawingData
from .render.base import HatchPattern, Renderer
from .render.recording import RecordingRenderer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "heatmap",
    "as_heatmappable",
    "Heatmap",
    "HeatmapDrawingData",
    "HeatmapCell",
    "Heatmappable",
    "Heatmappable1D",
    "Heatmappable2D",
    "HeatmappableArray",
    "ValueMapping",
    "LinearMapping",
    "KeyMapping",
    "CustomMapping",
    "linear",
    "Color",
    "ColorMap",
    "Point",
    "Rect",
    "Size",
    "GraphLayout",
    "PlotLabel",
    "PlotMarkers",
    "HatchPattern",
    "Renderer",
    "RecordingRenderer",
]
