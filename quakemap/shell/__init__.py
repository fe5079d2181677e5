"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP / local file)
- Map renderer (folium HTML output)
- Configuration loading (environment/files)

Keep this layer thin and simple. All map logic should be in core.
"""

from quakemap.shell.feed_client import FeedClient, FeedError
from quakemap.shell.map_renderer import MapRenderer
from quakemap.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "FeedClient",
    "FeedError",
    "MapRenderer",
    "load_config",
    "load_config_from_env",
]
