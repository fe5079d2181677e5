"""Functional Core - Pure functions with no side effects.

This module contains all map logic as pure functions:
- Feed parsing into earthquake records
- Color scales (depth and magnitude)
- Marker attributes (radius, color, tooltip)
- Legend generation
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from quakemap.core.earthquake import (
    EarthquakeRecord,
    MalformedFeedError,
    parse_feed,
    to_lat_lon,
    from_lat_lon,
)
from quakemap.core.color_scale import ColorScale, ColorScaleEntry, DEPTH_SCALE, MAGNITUDE_SCALE
from quakemap.core.markers import MarkerStyle, radius_for, color_for, build_marker, build_markers
from quakemap.core.legend import LegendEntry, build_legend, legend_for_variant, render_legend_html
from quakemap.core.formatter import format_tooltip, format_error_message
from quakemap.core.variants import MapVariant, VARIANTS, get_variant

__all__ = [
    # Earthquake
    "EarthquakeRecord",
    "MalformedFeedError",
    "parse_feed",
    "to_lat_lon",
    "from_lat_lon",
    # Color scales
    "ColorScale",
    "ColorScaleEntry",
    "DEPTH_SCALE",
    "MAGNITUDE_SCALE",
    # Markers
    "MarkerStyle",
    "radius_for",
    "color_for",
    "build_marker",
    "build_markers",
    # Legend
    "LegendEntry",
    "build_legend",
    "legend_for_variant",
    "render_legend_html",
    # Formatter
    "format_tooltip",
    "format_error_message",
    # Variants
    "MapVariant",
    "VARIANTS",
    "get_variant",
]
