"""Threshold color scales - Pure data and lookup.

A ColorScale is a table of (threshold, color) pairs plus a comparison
direction and a color for unknown values. Depth and magnitude coloring
are both instances of it, and the legend reads the same table, so
markers and legend cannot drift apart.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorScaleEntry:
    """Lower bound of a band and the color used for it.

    Attributes:
        threshold: Band lower bound
        color: Hex color for values in the band
    """
    threshold: float
    color: str


@dataclass(frozen=True)
class ColorScale:
    """Immutable threshold-to-color lookup table.

    Attributes:
        name: Scale name (e.g. "depth")
        entries: Bands in strictly ascending threshold order
        base_color: Color for values below every threshold
        inclusive: True for `value >= threshold`, False for `value > threshold`
        null_color: Color for unknown values. None means unknown values
            fall through to base_color.
    """
    name: str
    entries: tuple[ColorScaleEntry, ...]
    base_color: str
    inclusive: bool = True
    null_color: str | None = None

    def __post_init__(self) -> None:
        thresholds = [e.threshold for e in self.entries]
        if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError(
                f"Color scale '{self.name}' thresholds must be strictly "
                f"increasing, got {thresholds}"
            )

    @property
    def colors(self) -> tuple[str, ...]:
        """Every color the scale can return."""
        colors = [self.base_color] + [e.color for e in self.entries]
        if self.null_color is not None:
            colors.append(self.null_color)
        return tuple(colors)

    def matches(self, value: float, entry: ColorScaleEntry) -> bool:
        """Check whether a value falls in or above an entry's band."""
        if self.inclusive:
            return value >= entry.threshold
        return value > entry.threshold

    def color_for(self, value: float | None) -> str:
        """Look up the color for a value.

        Pure function. Bands are checked highest threshold first and the
        first match wins. NaN matches no band.
        """
        if value is None:
            return self.null_color if self.null_color is not None else self.base_color

        for entry in reversed(self.entries):
            if self.matches(value, entry):
                return entry.color

        return self.base_color


# Deeper events are darker. Bands are open above their boundary.
DEPTH_SCALE = ColorScale(
    name="depth",
    entries=(
        ColorScaleEntry(10, "#fee8c8"),
        ColorScaleEntry(30, "#fdbb84"),
        ColorScaleEntry(70, "#fc8d59"),
        ColorScaleEntry(150, "#e34a33"),
        ColorScaleEntry(300, "#b30000"),
    ),
    base_color="#fff7ec",
    inclusive=False,
    null_color=None,
)

# Stronger events are darker. Unknown magnitude is gray.
MAGNITUDE_SCALE = ColorScale(
    name="magnitude",
    entries=(
        ColorScaleEntry(2, "#FEB24C"),   # minor
        ColorScaleEntry(4, "#FD8D3C"),   # light
        ColorScaleEntry(5, "#E31A1C"),   # moderate
        ColorScaleEntry(6, "#BD0026"),   # strong
        ColorScaleEntry(8, "#800026"),   # major
    ),
    base_color="#FFEDA0",
    inclusive=True,
    null_color="#cccccc",
)
