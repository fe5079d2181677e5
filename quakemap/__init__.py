"""Interactive map of recent USGS earthquakes."""

__version__ = "1.0.0"
