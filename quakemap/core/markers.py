"""Marker attributes - Pure functions.

Derives the radius, fill color and tooltip of a map marker from an
earthquake record. The actual drawing is handled by the shell layer.
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

from quakemap.core.color_scale import ColorScale
from quakemap.core.earthquake import EarthquakeRecord, SkippedFeature, parse_feed
from quakemap.core.formatter import format_tooltip
from quakemap.core.variants import BASIS_DEPTH, MapVariant


DEFAULT_RADIUS = 3
NEGATIVE_MAGNITUDE_RADIUS = 2
MIN_RADIUS = 3
RADIUS_SCALE = 0.5

BORDER_COLOR = "#fff"
BORDER_WEIGHT = 0.5
BORDER_OPACITY = 1.0
FILL_OPACITY = 0.7


@dataclass(frozen=True)
class MarkerStyle:
    """Immutable render parameters for one circle marker.

    Attributes:
        latitude: Marker latitude
        longitude: Marker longitude
        radius: Circle radius in pixels
        fill_color: Hex fill color
        tooltip: Hover text (HTML)
        color: Border color
        weight: Border width in pixels
        opacity: Border opacity
        fill_opacity: Fill opacity
    """
    latitude: float
    longitude: float
    radius: float
    fill_color: str
    tooltip: str
    color: str = BORDER_COLOR
    weight: float = BORDER_WEIGHT
    opacity: float = BORDER_OPACITY
    fill_opacity: float = FILL_OPACITY

    @property
    def location(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


@dataclass
class MarkerBatch:
    """Markers built from one feed.

    Attributes:
        markers: Markers in feed order
        skipped: Features that produced no marker
    """
    markers: list[MarkerStyle]
    skipped: list[SkippedFeature]


def radius_for(magnitude: float | None) -> float:
    """Marker radius for a magnitude.

    Pure function. Quadratic so that larger events stand out, floored so
    that small events stay visible. Unknown magnitude gets a small default
    and negative (micro) magnitudes get the smallest radius.

    Args:
        magnitude: Event magnitude, or None

    Returns:
        Radius in pixels
    """
    if magnitude is None:
        return DEFAULT_RADIUS
    if magnitude < 0:
        return NEGATIVE_MAGNITUDE_RADIUS
    return max(magnitude * magnitude * RADIUS_SCALE, MIN_RADIUS)


def color_for(value: float | None, scale: ColorScale) -> str:
    """Fill color for a depth or magnitude value on the given scale.

    Pure function.
    """
    return scale.color_for(value)


def color_value(record: EarthquakeRecord, variant: MapVariant) -> float | None:
    """Pick the record value the variant colors by."""
    if variant.basis == BASIS_DEPTH:
        return record.depth_km
    return record.magnitude


def build_marker(
    record: EarthquakeRecord,
    variant: MapVariant,
    tz: tzinfo | None = None,
) -> MarkerStyle:
    """Build the marker for one earthquake.

    Pure function.

    Args:
        record: Earthquake to draw
        variant: Map variant (decides the color basis and scale)
        tz: Display timezone for the tooltip

    Returns:
        MarkerStyle with all parameters set
    """
    latitude, longitude = record.lat_lon
    return MarkerStyle(
        latitude=latitude,
        longitude=longitude,
        radius=radius_for(record.magnitude),
        fill_color=color_for(color_value(record, variant), variant.scale),
        tooltip=format_tooltip(record, tz),
    )


def build_markers(
    geojson: dict[str, Any],
    variant: MapVariant,
    tz: tzinfo | None = None,
) -> MarkerBatch:
    """Build markers for every usable feature of a feed.

    Pure function.

    Raises:
        MalformedFeedError: If the document has no `features` list
    """
    parsed = parse_feed(geojson)
    return MarkerBatch(
        markers=[build_marker(r, variant, tz) for r in parsed.records],
        skipped=parsed.skipped,
    )
