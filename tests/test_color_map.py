"""Tests for ColorMap and Color."""

import math

import numpy as np
import pytest

from heatgrid.core.color_map import (
    DEFAULT_NAN_COLOR,
    FIVE_COLOR_HEATMAP,
    INTENSITY,
    Color,
    ColorMap,
)


class TestColorMapInit:
    def test_default(self):
        cm = ColorMap()
        assert cm.cmap_name == FIVE_COLOR_HEATMAP

    def test_matplotlib_cmap(self):
        cm = ColorMap("plasma")
        assert cm.cmap_name == "plasma"

    def test_invalid_cmap_raises(self):
        with pytest.raises(ValueError, match="Unknown colormap"):
            ColorMap("not_a_real_cmap")

    def test_repr(self):
        assert repr(ColorMap("viridis")) == "ColorMap('viridis')"


class TestColorMapLUT:
    def test_lut_shape(self):
        assert ColorMap().lut.shape == (256, 4)

    def test_lut_dtype(self):
        assert ColorMap().lut.dtype == np.uint8

    def test_different_cmaps_differ(self):
        assert not np.array_equal(ColorMap("viridis").lut, ColorMap("plasma").lut)

    def test_five_color_endpoints(self):
        lut = ColorMap(FIVE_COLOR_HEATMAP).lut
        np.testing.assert_array_equal(lut[0], [0, 0, 255, 255])
        np.testing.assert_array_equal(lut[-1], [255, 0, 0, 255])

    def test_intensity_endpoints(self):
        lut = ColorMap(INTENSITY).lut
        np.testing.assert_array_equal(lut[0], [0, 0, 0, 255])
        np.testing.assert_array_equal(lut[-1], [255, 255, 255, 255])


class TestOffsetToIndex:
    def test_zero(self):
        assert ColorMap().offset_to_index(0.0) == 0

    def test_one(self):
        assert ColorMap().offset_to_index(1.0) == 255

    def test_midpoint(self):
        assert ColorMap().offset_to_index(0.5) == 127

    def test_clamps(self):
        cm = ColorMap()
        assert cm.offset_to_index(-0.5) == 0
        assert cm.offset_to_index(3.0) == 255


class TestColorForOffset:
    def test_bounds(self):
        cm = ColorMap(INTENSITY)
        assert cm.color_for_offset(0.0) == Color(0.0, 0.0, 0.0, 1.0)
        assert cm.color_for_offset(1.0) == Color(1.0, 1.0, 1.0, 1.0)

    def test_nan_offset(self):
        cm = ColorMap()
        assert cm.color_for_offset(math.nan) == DEFAULT_NAN_COLOR

    def test_custom_nan_color(self):
        cm = ColorMap(nan_color=Color(0, 0, 0, 0))
        assert cm.color_for_offset(float("nan")) == Color(0, 0, 0, 0)

    def test_monotonic_intensity(self):
        cm = ColorMap(INTENSITY)
        reds = [cm.color_for_offset(o / 10).r for o in range(11)]
        assert reds == sorted(reds)


class TestColor:
    def test_to_hex(self):
        assert Color(1.0, 0.0, 0.0).to_hex() == "#ff0000"
        assert Color(0.0, 0.5, 1.0).to_hex() == "#0080ff"

    def test_from_rgba_bytes(self):
        assert Color.from_rgba_bytes((255, 0, 0, 255)) == Color(1.0, 0.0, 0.0, 1.0)

    def test_to_tuple(self):
        assert Color(0.1, 0.2, 0.3).to_tuple() == (0.1, 0.2, 0.3, 1.0)
