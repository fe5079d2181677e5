"""Legend generation - Pure functions.

The legend is regenerated from the same color scale the markers use.
"""

from dataclasses import dataclass
from html import escape
from typing import Callable, Sequence

from quakemap.core.variants import MapVariant


RANGE_SEPARATOR = "–"  # en dash


@dataclass(frozen=True)
class LegendEntry:
    """One legend row.

    Attributes:
        color: Swatch hex color
        label: Range label (e.g. "2–4" or "8+")
    """
    color: str
    label: str


def format_grade(grade: float) -> str:
    """Format a breakpoint without a trailing .0 for whole numbers."""
    if float(grade).is_integer():
        return str(int(grade))
    return f"{grade:g}"


def build_legend(
    grades: Sequence[float],
    color_fn: Callable[[float], str],
    offset: float = 0,
) -> list[LegendEntry]:
    """Build legend rows from ascending breakpoints.

    Pure function. Each swatch is colored by sampling color_fn at the
    breakpoint plus offset; the last band is open-ended.

    Args:
        grades: Ascending breakpoints
        color_fn: Value-to-color lookup shared with the markers
        offset: Added to each breakpoint before sampling (use 1 for scales
            whose bands exclude their lower boundary)

    Returns:
        One LegendEntry per breakpoint
    """
    entries = []

    for i, grade in enumerate(grades):
        start = format_grade(grade)
        if i + 1 < len(grades):
            label = f"{start}{RANGE_SEPARATOR}{format_grade(grades[i + 1])}"
        else:
            label = f"{start}+"
        entries.append(LegendEntry(color=color_fn(grade + offset), label=label))

    return entries


def legend_for_variant(variant: MapVariant) -> list[LegendEntry]:
    """Build the legend for a map variant.

    Pure function.
    """
    return build_legend(
        variant.legend_grades,
        variant.scale.color_for,
        offset=variant.legend_offset,
    )


def render_legend_html(title: str, entries: Sequence[LegendEntry]) -> str:
    """Render legend rows as HTML fragments (swatch + label).

    Pure function.
    """
    parts = [f"<h4>{escape(title)}</h4>"]
    for entry in entries:
        parts.append(
            f'<i style="background:{entry.color}"></i> {escape(entry.label)}'
        )
    return "<br>".join(parts)
