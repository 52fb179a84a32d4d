"""Tests for input validation helpers."""

import numpy as np
import pytest

from heatgrid.core.validation import (
    validate_colormap_name,
    validate_reiterable,
    validate_size,
    validate_width,
)


class TestValidateWidth:
    def test_accepts_numpy_int(self):
        assert validate_width(np.int64(4)) == 4

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            validate_width(True)

    def test_rejects_zero(self):
        with pytest.raises(ValueError, match="zero or negative"):
            validate_width(0)


class TestValidateSize:
    def test_returns_floats(self):
        assert validate_size(3, 4) == (3.0, 4.0)

    def test_rejects_nan(self):
        with pytest.raises(ValueError, match="finite"):
            validate_size(float("nan"), 4)

    def test_rejects_string(self):
        with pytest.raises(TypeError, match="number"):
            validate_size("10", 4)


class TestValidateReiterable:
    def test_accepts_list(self):
        validate_reiterable([1, 2])

    def test_rejects_generator(self):
        with pytest.raises(TypeError, match="list"):
            validate_reiterable(x for x in range(2))


class TestValidateColormapName:
    def test_builtin_gradient(self):
        import heatgrid.core.color_map  # noqa: F401  registers built-in gradients

        assert validate_colormap_name("five_color_heatmap") == "five_color_heatmap"

    def test_matplotlib_name(self):
        assert validate_colormap_name("viridis") == "viridis"

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown colormap"):
            validate_colormap_name("nope")
