"""Shared test fixtures for heatgrid."""

import numpy as np
import pandas as pd
import pytest

from heatgrid.core.heatmappable import Heatmappable1D, Heatmappable2D
from heatgrid.render.recording import RecordingRenderer


@pytest.fixture
def flat_values():
    """Five values sliced into rows of two: [[1, 2], [3, 4], [5]]."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def flat_source(flat_values):
    return Heatmappable1D(flat_values, width=2)


@pytest.fixture
def ragged_rows():
    """Rows of lengths 2, 1 and 3."""
    return [[1, 2], [3], [4, 5, 6]]


@pytest.fixture
def ragged_source(ragged_rows):
    return Heatmappable2D(ragged_rows)


@pytest.fixture
def small_matrix_df():
    """4x3 matrix DataFrame."""
    data = np.array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 9.0],
        [10.0, 11.0, 12.0],
    ])
    return pd.DataFrame(
        data,
        index=["gene_A", "gene_B", "gene_C", "gene_D"],
        columns=["sample_1", "sample_2", "sample_3"],
    )


@pytest.fixture
def large_matrix():
    """100x50 random matrix."""
    rng = np.random.default_rng(42)
    return rng.standard_normal((100, 50))


@pytest.fixture
def renderer():
    return RecordingRenderer()
