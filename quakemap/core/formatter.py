"""Display text formatting - Pure functions.

Builds the HTML shown in marker tooltips and the message that replaces
the map when a load cycle fails.
"""

from datetime import datetime, timezone, tzinfo
from html import escape

from quakemap.core.earthquake import EarthquakeRecord


NOT_AVAILABLE = "N/A"
UNKNOWN_PLACE = "Information unavailable"
INFO_LINK_TEXT = "More Info (USGS)"

# Load failure kinds
ERROR_NETWORK = "network"
ERROR_HTTP = "http"
ERROR_FILE = "file"
ERROR_DECODE = "decode"
ERROR_MALFORMED = "malformed"
ERROR_CONFIG = "config"

REMEDIATION_HINTS = {
    ERROR_NETWORK: (
        "This might be a network issue or a temporary problem with the USGS "
        "server. Please check your internet connection and try again."
    ),
    ERROR_HTTP: (
        "The USGS server answered with an error. The feed may be temporarily "
        "unavailable; try again in a few minutes."
    ),
    ERROR_FILE: (
        "<b>Note:</b> The feed was read from a local file. Check that the path "
        "exists and contains a GeoJSON FeatureCollection."
    ),
    ERROR_CONFIG: (
        "Check the map variant and feed URL in the configuration."
    ),
}

DEFAULT_HINT = (
    "Please check your internet connection and ensure the USGS server is "
    "accessible. Try refreshing the page."
)

MALFORMED_FEED_MESSAGE = (
    "Data received from USGS, but it appears to contain no earthquake "
    "features or is in an unexpected format."
)


def format_magnitude(magnitude: float | None) -> str:
    """Format magnitude to one decimal place, or N/A."""
    if magnitude is None:
        return NOT_AVAILABLE
    return f"{magnitude:.1f}"


def format_depth(depth_km: float | None) -> str:
    """Format depth to one decimal place with a km unit, or N/A."""
    if depth_km is None:
        return NOT_AVAILABLE
    return f"{depth_km:.1f} km"


def format_timestamp(time_ms: int | None, tz: tzinfo | None = None) -> str:
    """Format epoch milliseconds as a human-readable timestamp.

    Pure function (given an explicit tz).

    Args:
        time_ms: Milliseconds since the epoch
        tz: Display timezone. None uses the local zone of the host.

    Returns:
        Timestamp like "2023-12-19 04:00:00 PST", or N/A
    """
    if time_ms is None:
        return NOT_AVAILABLE
    try:
        utc_time = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
        return utc_time.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    except (OverflowError, OSError, ValueError):
        return NOT_AVAILABLE


def format_tooltip(record: EarthquakeRecord, tz: tzinfo | None = None) -> str:
    """Format the hover tooltip for a marker.

    Pure function.

    Args:
        record: Earthquake to describe
        tz: Display timezone for the event time (local zone if None)

    Returns:
        Tooltip HTML
    """
    place = escape(record.place) if record.place else UNKNOWN_PLACE

    lines = [
        f"<b>Magnitude: {format_magnitude(record.magnitude)}</b>",
        f"Location: {place}",
        f"Time: {format_timestamp(record.time_ms, tz)}",
        f"Depth: {format_depth(record.depth_km)}",
    ]

    if record.url:
        lines.append(
            f'<a href="{escape(record.url, quote=True)}" target="_blank" '
            f'rel="noopener noreferrer">{INFO_LINK_TEXT}</a>'
        )

    return "<br>".join(lines)


def format_error_message(kind: str, detail: str) -> str:
    """Format the user-visible message for a failed load cycle.

    Pure function.

    Args:
        kind: Failure kind (network, http, file, decode or malformed)
        detail: Short description of the failure

    Returns:
        Message HTML, with a remediation hint where one applies
    """
    if kind == ERROR_MALFORMED:
        return MALFORMED_FEED_MESSAGE

    hint = REMEDIATION_HINTS.get(kind, DEFAULT_HINT)
    return (
        f"Error loading earthquake data: {escape(detail.rstrip('.'))}."
        f"<br><br>{hint}"
    )
