"""Earthquake records and feed parsing - Pure functions.

This module turns USGS GeoJSON features into typed EarthquakeRecord objects.
Unlike an alerting pipeline, a map keeps events with unknown magnitude or
depth, so those fields are optional here.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence


class MalformedFeedError(ValueError):
    """Raised when a feed response has no usable `features` array."""


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable earthquake record as read from the feed.

    Attributes:
        id: USGS event ID (empty if absent)
        longitude: Epicenter longitude
        latitude: Epicenter latitude
        depth_km: Depth in kilometers, None if unknown
        magnitude: Event magnitude, None if unknown
        place: Human-readable location description (optional)
        time_ms: Event time in milliseconds since the epoch (optional)
        url: USGS event page URL (optional)
    """
    id: str
    longitude: float
    latitude: float
    depth_km: float | None = None
    magnitude: float | None = None
    place: str | None = None
    time_ms: int | None = None
    url: str | None = None

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    @property
    def time(self) -> datetime | None:
        """Event time as an aware UTC datetime."""
        if self.time_ms is None:
            return None
        return datetime.fromtimestamp(self.time_ms / 1000, tz=timezone.utc)


@dataclass(frozen=True)
class SkippedFeature:
    """A feature that could not be placed on the map.

    Attributes:
        index: Position of the feature in the feed
        feature_id: Feature ID if the feed provided one
        reason: Why the feature was skipped
    """
    index: int
    feature_id: str | None
    reason: str


@dataclass
class ParsedFeed:
    """Result of parsing a feed.

    Attributes:
        records: Valid records, in feed order
        skipped: Diagnostics for features that were skipped
    """
    records: list[EarthquakeRecord]
    skipped: list[SkippedFeature]


def to_lat_lon(coordinates: Sequence[float]) -> tuple[float, float]:
    """Reorder GeoJSON [lon, lat, (depth)] into (lat, lon).

    Pure function.
    """
    return (coordinates[1], coordinates[0])


def from_lat_lon(
    lat_lon: Sequence[float],
    depth: float | None = None,
) -> list[float | None]:
    """Rebuild a GeoJSON [lon, lat, depth] triple from (lat, lon).

    Pure function. Inverse of to_lat_lon().
    """
    return [lat_lon[1], lat_lon[0], depth]


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def _optional_str(value: Any) -> str | None:
    if not value:
        return None
    return str(value)


def parse_feature(feature: dict[str, Any]) -> EarthquakeRecord:
    """Parse a single GeoJSON feature into an EarthquakeRecord.

    Pure function.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        EarthquakeRecord

    Raises:
        ValueError: If the feature has no usable geometry/coordinates,
            or a property cannot be read (bad number, unrepresentable time)
    """
    geometry = feature.get("geometry") or {}
    if not isinstance(geometry, dict):
        raise ValueError("missing geometry/coordinates: geometry is not an object")

    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        raise ValueError("missing geometry/coordinates")

    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}
    depth = coords[2] if len(coords) > 2 else None
    time_ms = props.get("time")

    try:
        record = EarthquakeRecord(
            id=feature.get("id") or "",
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=_optional_float(depth),
            magnitude=_optional_float(props.get("mag")),
            place=_optional_str(props.get("place")),
            time_ms=int(time_ms) if time_ms is not None else None,
            url=_optional_str(props.get("url")),
        )
        # Times outside the datetime range cannot be shown in a tooltip
        record.time
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise ValueError(f"invalid coordinates or properties: {e}") from e
    return record


def get_features(geojson: Any) -> list[dict[str, Any]]:
    """Return the `features` array of a FeatureCollection.

    Pure function.

    Raises:
        MalformedFeedError: If the document has no `features` list
    """
    if not isinstance(geojson, dict):
        raise MalformedFeedError(
            f"Expected a GeoJSON object, got {type(geojson).__name__}"
        )

    features = geojson.get("features")
    if not isinstance(features, list):
        raise MalformedFeedError(
            "Data received, but it contains no earthquake features "
            "or is in an unexpected format"
        )

    return features


def parse_feed(geojson: Any) -> ParsedFeed:
    """Parse a USGS FeatureCollection, keeping feed order.

    Pure function. Features without geometry are skipped and reported
    rather than failing the whole feed.

    Args:
        geojson: Decoded GeoJSON document

    Returns:
        ParsedFeed with records and skipped-feature diagnostics

    Raises:
        MalformedFeedError: If the document has no `features` list
    """
    records: list[EarthquakeRecord] = []
    skipped: list[SkippedFeature] = []

    for index, feature in enumerate(get_features(geojson)):
        if not isinstance(feature, dict):
            skipped.append(SkippedFeature(index, None, "feature is not an object"))
            continue

        try:
            records.append(parse_feature(feature))
        except ValueError as e:
            skipped.append(SkippedFeature(index, feature.get("id"), str(e)))

    return ParsedFeed(records=records, skipped=skipped)
