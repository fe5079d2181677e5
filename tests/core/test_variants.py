"""Tests for map variants."""

import pytest

from quakemap.core.color_scale import DEPTH_SCALE, MAGNITUDE_SCALE
from quakemap.core.variants import (
    BASIS_DEPTH,
    BASIS_MAGNITUDE,
    DEFAULT_VARIANT,
    FEED_BASE_URL,
    VARIANTS,
    UnknownVariantError,
    get_variant,
)


class TestVariants:
    """Tests for the built-in variants."""

    def test_depth_variant(self):
        variant = VARIANTS["depth"]

        assert variant.basis == BASIS_DEPTH
        assert variant.scale is DEPTH_SCALE
        assert variant.legend_grades == (-10, 10, 30, 70, 150, 300)
        assert variant.legend_offset == 1

    def test_magnitude_variant(self):
        variant = VARIANTS["magnitude"]

        assert variant.basis == BASIS_MAGNITUDE
        assert variant.scale is MAGNITUDE_SCALE
        assert variant.legend_grades == (0, 2, 4, 5, 6, 8)
        assert variant.legend_offset == 0
        assert variant.feed_url.endswith("/4.5_week.geojson")

    def test_significant_variant(self):
        variant = VARIANTS["significant"]

        assert variant.scale is MAGNITUDE_SCALE
        assert variant.feed_url.endswith("/significant_month.geojson")

    @pytest.mark.parametrize("name", sorted(VARIANTS))
    def test_feeds_are_usgs_summary_feeds(self, name):
        assert VARIANTS[name].feed_url.startswith(FEED_BASE_URL)
        assert VARIANTS[name].name == name

    def test_default_variant_is_registered(self):
        assert DEFAULT_VARIANT in VARIANTS


class TestGetVariant:
    """Tests for get_variant()."""

    def test_returns_registered_variant(self):
        assert get_variant("depth") is VARIANTS["depth"]

    def test_unknown_variant_lists_choices(self):
        with pytest.raises(UnknownVariantError, match="depth, magnitude, significant"):
            get_variant("tsunami")

    def test_unknown_variant_is_key_error(self):
        with pytest.raises(KeyError):
            get_variant("nope")
