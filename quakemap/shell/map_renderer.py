"""Map Renderer - Imperative Shell.

This module draws markers and the legend onto an interactive Leaflet map
using folium, and writes the resulting HTML page. Marker parameters and
legend content come from the core module.
"""

import logging
from html import escape
from pathlib import Path

import folium

from quakemap.core.config import Config
from quakemap.core.markers import MarkerStyle


logger = logging.getLogger(__name__)


LEGEND_TEMPLATE = """
<style>
  .quake-legend {{
    position: fixed; bottom: 30px; right: 10px; z-index: 9999;
    background: rgba(255, 255, 255, 0.9); padding: 6px 10px;
    border-radius: 5px; box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);
    font: 13px/18px Arial, Helvetica, sans-serif; color: #555;
  }}
  .quake-legend h4 {{ margin: 0 0 5px; color: #777; }}
  .quake-legend i {{
    width: 18px; height: 18px; float: left; margin-right: 8px; opacity: 0.7;
  }}
</style>
<div class="quake-legend">{content}</div>
"""

ERROR_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body>
  <div style="padding: 20px; color: red; border: 1px solid red; background-color: #fee; margin: 10px;">{message}</div>
</body>
</html>
"""


class MapRenderer:
    """Renders earthquake markers and a legend to an HTML map page.

    This is part of the imperative shell - it owns the map surface.
    """

    def __init__(self, config: Config) -> None:
        """Create the base map with its tile layer.

        Args:
            config: Map center, zoom, title and tile settings
        """
        self.title = config.title
        self.marker_count = 0
        self.error_html: str | None = None

        self.map = folium.Map(
            location=[config.center_latitude, config.center_longitude],
            zoom_start=config.zoom_start,
            tiles=None,
        )
        folium.TileLayer(
            tiles=config.tiles.url,
            attr=config.tiles.attribution,
            subdomains=config.tiles.subdomains,
            max_zoom=config.tiles.max_zoom,
            name="Base map",
        ).add_to(self.map)

        root = self.map.get_root()
        root.header.add_child(
            folium.Element(f"<title>{escape(self.title)}</title>"),
            name="title",
        )

    def add_marker(self, marker: MarkerStyle) -> folium.CircleMarker:
        """Add a circle marker with a sticky hover tooltip."""
        circle = folium.CircleMarker(
            location=list(marker.location),
            radius=marker.radius,
            color=marker.color,
            weight=marker.weight,
            opacity=marker.opacity,
            fill=True,
            fill_color=marker.fill_color,
            fill_opacity=marker.fill_opacity,
            tooltip=folium.Tooltip(marker.tooltip, sticky=True),
        )
        circle.add_to(self.map)
        self.marker_count += 1
        return circle

    def set_legend(self, legend_html: str) -> None:
        """Replace the legend content."""
        self.map.get_root().html.add_child(
            folium.Element(LEGEND_TEMPLATE.format(content=legend_html)),
            name="legend",
        )

    def show_error(self, message_html: str) -> None:
        """Replace the whole map surface with an error message."""
        self.error_html = message_html

    def render(self) -> str:
        """Render the page as an HTML string."""
        if self.error_html is not None:
            return ERROR_PAGE_TEMPLATE.format(
                title=escape(self.title),
                message=self.error_html,
            )
        return self.map.get_root().render()

    def save(self, path: str | Path) -> Path:
        """Write the rendered page to a file.

        This method performs file I/O.

        Returns:
            Path that was written
        """
        path = Path(path)
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)

        path.write_text(self.render(), encoding="utf-8")

        logger.info(
            "Wrote map with %d markers to %s",
            self.marker_count,
            path,
        )
        return path
