"""Plot types."""

from .base import Plot
from .heatmap import Heatmap, HeatmapDrawingData, compute_layout

__all__ = [
    "Plot",
    "Heatmap",
    "HeatmapDrawingData",
    "compute_layout",
]
