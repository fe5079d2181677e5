"""Map variants - Pure configuration data.

Each variant bundles a feed, the value markers are colored by and the
legend breakpoints for that scale.
"""

from dataclasses import dataclass

from quakemap.core.color_scale import ColorScale, DEPTH_SCALE, MAGNITUDE_SCALE


FEED_BASE_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

BASIS_DEPTH = "depth"
BASIS_MAGNITUDE = "magnitude"


class UnknownVariantError(KeyError):
    """Raised when a variant name is not registered."""


@dataclass(frozen=True)
class MapVariant:
    """Immutable description of one map flavor.

    Attributes:
        name: Variant name used in config
        feed_url: USGS GeoJSON summary feed URL
        basis: Which record value drives marker color ("depth" or "magnitude")
        scale: Color scale shared by markers and legend
        legend_title: Heading shown above the legend
        legend_grades: Ascending legend breakpoints
        legend_offset: Added to each breakpoint before the color lookup so the
            sample lands inside its band
    """
    name: str
    feed_url: str
    basis: str
    scale: ColorScale
    legend_title: str
    legend_grades: tuple[float, ...]
    legend_offset: float = 0


DEPTH_GRADES = (-10, 10, 30, 70, 150, 300)
MAGNITUDE_GRADES = (0, 2, 4, 5, 6, 8)


VARIANTS: dict[str, MapVariant] = {
    "depth": MapVariant(
        name="depth",
        feed_url=f"{FEED_BASE_URL}/all_week.geojson",
        basis=BASIS_DEPTH,
        scale=DEPTH_SCALE,
        legend_title="Depth (km)",
        legend_grades=DEPTH_GRADES,
        # Depth bands are open above the boundary
        legend_offset=1,
    ),
    "magnitude": MapVariant(
        name="magnitude",
        feed_url=f"{FEED_BASE_URL}/4.5_week.geojson",
        basis=BASIS_MAGNITUDE,
        scale=MAGNITUDE_SCALE,
        legend_title="Magnitude",
        legend_grades=MAGNITUDE_GRADES,
    ),
    "significant": MapVariant(
        name="significant",
        feed_url=f"{FEED_BASE_URL}/significant_month.geojson",
        basis=BASIS_MAGNITUDE,
        scale=MAGNITUDE_SCALE,
        legend_title="Magnitude",
        legend_grades=MAGNITUDE_GRADES,
    ),
}

DEFAULT_VARIANT = "magnitude"


def get_variant(name: str) -> MapVariant:
    """Look up a registered variant by name.

    Raises:
        UnknownVariantError: If no variant has that name
    """
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(
            f"Unknown map variant '{name}'. "
            f"Valid variants: {', '.join(sorted(VARIANTS))}"
        ) from None
