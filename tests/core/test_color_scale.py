"""Tests for threshold color scales - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

import math

import pytest

from quakemap.core.color_scale import (
    ColorScale,
    ColorScaleEntry,
    DEPTH_SCALE,
    MAGNITUDE_SCALE,
)


class TestDepthScale:
    """Tests for DEPTH_SCALE (exclusive-above bands)."""

    @pytest.mark.parametrize("depth,expected", [
        (650.0, "#b30000"),
        (300.1, "#b30000"),
        (300.0, "#e34a33"),
        (151.0, "#e34a33"),
        (150.0, "#fc8d59"),
        (71.0, "#fc8d59"),
        (70.0, "#fdbb84"),
        (35.4, "#fdbb84"),
        (30.0, "#fee8c8"),
        (11.0, "#fee8c8"),
        (10.0, "#fff7ec"),
        (5.0, "#fff7ec"),
        (-3.5, "#fff7ec"),
    ])
    def test_bands(self, depth, expected):
        """Each depth falls in the band strictly above its boundary."""
        assert DEPTH_SCALE.color_for(depth) == expected

    def test_boundary_is_exclusive(self):
        """300 km belongs to the >150 band, not >300."""
        assert DEPTH_SCALE.color_for(300.0) == "#e34a33"

    def test_null_depth_is_shallow(self):
        """Unknown depth falls through to the shallowest color."""
        assert DEPTH_SCALE.null_color is None
        assert DEPTH_SCALE.color_for(None) == "#fff7ec"


class TestMagnitudeScale:
    """Tests for MAGNITUDE_SCALE (inclusive-at-or-above bands)."""

    @pytest.mark.parametrize("magnitude,expected", [
        (9.1, "#800026"),
        (8.1, "#800026"),
        (8.0, "#800026"),
        (7.9, "#BD0026"),
        (6.0, "#BD0026"),
        (5.0, "#E31A1C"),
        (4.0, "#FD8D3C"),
        (3.9, "#FEB24C"),
        (2.0, "#FEB24C"),
        (1.9, "#FFEDA0"),
        (0.0, "#FFEDA0"),
        (-1.2, "#FFEDA0"),
    ])
    def test_bands(self, magnitude, expected):
        """Each magnitude falls in the band at or above its boundary."""
        assert MAGNITUDE_SCALE.color_for(magnitude) == expected

    def test_boundary_is_inclusive(self):
        """M6.0 belongs to the >=6 band."""
        assert MAGNITUDE_SCALE.color_for(6.0) == "#BD0026"

    def test_null_magnitude_is_gray(self):
        """Unknown magnitude gets a distinct neutral gray."""
        assert MAGNITUDE_SCALE.color_for(None) == "#cccccc"


class TestColorScaleTotality:
    """color_for never raises and only returns the scale's colors."""

    @pytest.mark.parametrize("scale", [DEPTH_SCALE, MAGNITUDE_SCALE])
    @pytest.mark.parametrize("value", [
        None, -1e9, -10, 0, 0.5, 2, 10, 10.0001, 299.99, 1e9,
        math.inf, -math.inf, math.nan,
    ])
    def test_output_is_a_defined_color(self, scale, value):
        """Every input maps to one of the fixed colors."""
        assert scale.color_for(value) in scale.colors

    def test_depth_scale_has_six_colors(self):
        """Depth scale defines six colors (null reuses the shallow band)."""
        assert len(set(DEPTH_SCALE.colors)) == 6

    def test_magnitude_scale_has_seven_colors(self):
        """Magnitude scale defines six bands plus the unknown gray."""
        assert len(set(MAGNITUDE_SCALE.colors)) == 7

    def test_nan_matches_no_band(self):
        """NaN compares false everywhere and falls to the base color."""
        assert MAGNITUDE_SCALE.color_for(math.nan) == "#FFEDA0"


class TestColorScaleConstruction:
    """Tests for building custom scales."""

    def test_custom_null_color(self):
        """A scale can give unknown values their own color."""
        scale = ColorScale(
            name="depth-with-unknown",
            entries=DEPTH_SCALE.entries,
            base_color=DEPTH_SCALE.base_color,
            inclusive=False,
            null_color="#999999",
        )
        assert scale.color_for(None) == "#999999"
        assert scale.color_for(35.4) == "#fdbb84"

    def test_rejects_unsorted_thresholds(self):
        """Thresholds must be strictly increasing."""
        with pytest.raises(ValueError, match="strictly increasing"):
            ColorScale(
                name="bad",
                entries=(ColorScaleEntry(5, "#000"), ColorScaleEntry(2, "#111")),
                base_color="#fff",
            )

    def test_rejects_duplicate_thresholds(self):
        """Equal thresholds would make a band unreachable."""
        with pytest.raises(ValueError):
            ColorScale(
                name="bad",
                entries=(ColorScaleEntry(2, "#000"), ColorScaleEntry(2, "#111")),
                base_color="#fff",
            )

    def test_empty_scale_returns_base_color(self):
        """A scale with no bands always returns its base color."""
        scale = ColorScale(name="flat", entries=(), base_color="#abcdef")
        assert scale.color_for(100) == "#abcdef"

    def test_is_immutable(self):
        """ColorScale is frozen."""
        with pytest.raises(AttributeError):
            DEPTH_SCALE.base_color = "#000000"
