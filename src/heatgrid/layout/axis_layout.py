"""Per-axis cell positions for a uniform heatmap grid."""

from __future__ import annotations

import numpy as np


class AxisLayout:
    """Start positions of uniform cells along one axis.

    The start positions double as the axis marker positions.
    """

    __slots__ = ("_n_cells", "_cell_size", "_positions")

    def __init__(self, n_cells: int, cell_size: float) -> None:
        self._n_cells = n_cells
        self._cell_size = cell_size
        self._positions = np.arange(n_cells, dtype=np.float64) * cell_size
        self._positions.flags.writeable = False

    @property
    def n_cells(self) -> int:
        return self._n_cells

    @property
    def positions(self) -> np.ndarray:
        """Start position of each cell (read-only)."""
        return self._positions

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def total_size(self) -> float:
        """Span covered by all cells."""
        return self._n_cells * self._cell_size

    def index_at(self, pixel: float) -> int | None:
        """Map a coordinate to a cell index via binary search.

        Returns None outside the grid.
        """
        if self._n_cells == 0 or self._cell_size <= 0:
            return None
        idx = int(np.searchsorted(self._positions, pixel, side="right")) - 1
        if idx < 0 or pixel >= self.total_size:
            return None
        return idx

    def to_list(self) -> list[float]:
        return self._positions.tolist()
