"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from urllib.parse import urlparse

from quakemap.core.variants import DEFAULT_VARIANT, VARIANTS, MapVariant, get_variant


# CARTO Voyager raster tiles (mostly English labels)
DEFAULT_TILE_URL = "https://{s}.basemaps.cartocdn.com/rastertiles/voyager/{z}/{x}/{y}{r}.png"
DEFAULT_TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    'contributors &copy; <a href="https://carto.com/attributions">CARTO</a>'
)

SUPPORTED_FEED_SCHEMES = ("http", "https", "file")


@dataclass
class TileLayerConfig:
    """Base map tile layer.

    Attributes:
        url: Tile URL template
        attribution: Attribution HTML
        subdomains: Tile server subdomains
        max_zoom: Highest zoom level the tiles support
    """
    url: str = DEFAULT_TILE_URL
    attribution: str = DEFAULT_TILE_ATTRIBUTION
    subdomains: str = "abcd"
    max_zoom: int = 20


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        variant: Map variant name (depth, magnitude or significant)
        feed_url: Feed URL override (None uses the variant's feed)
        center_latitude: Initial map center latitude
        center_longitude: Initial map center longitude
        zoom_start: Initial zoom level
        title: Page title
        tiles: Base map tile layer
        output_path: Where scripts write the rendered page
        timeout_seconds: Feed request timeout
        timezone: IANA timezone for tooltip times (None for host local time)
    """
    variant: str = DEFAULT_VARIANT
    feed_url: str | None = None
    center_latitude: float = 20.0
    center_longitude: float = 0.0
    zoom_start: int = 2
    title: str = "Recent Earthquakes"
    tiles: TileLayerConfig = field(default_factory=TileLayerConfig)
    output_path: str = "earthquakes.html"
    timeout_seconds: float = 30
    timezone: str | None = None

    @property
    def map_variant(self) -> MapVariant:
        """The configured variant.

        Raises:
            UnknownVariantError: If the variant name is not registered
        """
        return get_variant(self.variant)

    @property
    def effective_feed_url(self) -> str:
        """Feed URL to fetch: the override, or the variant's own feed."""
        return self.feed_url or self.map_variant.feed_url


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_feed_url(url: str, field_name: str) -> list[ValidationError]:
    """Validate a feed URL.

    Pure function. Unresolved ${...} placeholders are reported as warnings.
    """
    if url.startswith("${"):
        return [ValidationError(
            field=field_name,
            message="Feed URL not resolved (still contains placeholder)",
            severity="warning",
        )]

    scheme = urlparse(url).scheme
    if scheme not in SUPPORTED_FEED_SCHEMES:
        return [ValidationError(
            field=field_name,
            message=(
                f"Unsupported feed URL scheme '{scheme}' "
                f"(expected one of {', '.join(SUPPORTED_FEED_SCHEMES)})"
            ),
        )]

    return []


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.variant not in VARIANTS:
        errors.append(ValidationError(
            field="variant",
            message=(
                f"Unknown variant '{config.variant}' "
                f"(expected one of {', '.join(sorted(VARIANTS))})"
            ),
        ))

    if config.feed_url is not None:
        errors.extend(validate_feed_url(config.feed_url, "feed_url"))

    errors.extend(validate_coordinates(
        config.center_latitude,
        config.center_longitude,
        "center",
    ))

    if not 0 <= config.zoom_start <= config.tiles.max_zoom:
        errors.append(ValidationError(
            field="zoom_start",
            message=f"Zoom {config.zoom_start} out of range [0, {config.tiles.max_zoom}]",
        ))

    if config.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout must be positive, got {config.timeout_seconds}",
        ))

    if not config.output_path:
        errors.append(ValidationError(
            field="output_path",
            message="No output path configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
