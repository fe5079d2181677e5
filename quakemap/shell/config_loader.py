"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, TileLayerConfig) are defined in quakemap/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from quakemap.core.config import Config, TileLayerConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place so validation can flag it.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_tiles(data: dict[str, Any]) -> TileLayerConfig:
    """Parse the tile layer section from config data."""
    defaults = TileLayerConfig()
    return TileLayerConfig(
        url=_resolve_value(data.get("url", defaults.url)),
        attribution=data.get("attribution", defaults.attribution),
        subdomains=data.get("subdomains", defaults.subdomains),
        max_zoom=int(data.get("max_zoom", defaults.max_zoom)),
    )


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Resolve an IANA timezone name.

    Returns None (host local time) when no name is given or the name is
    unknown.
    """
    if not name:
        return None

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %s, using local time", name)
        return None


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()
    center = data.get("center", {})

    feed_url = data.get("feed_url")
    if feed_url is not None:
        feed_url = _resolve_value(feed_url)

    return Config(
        variant=data.get("variant", defaults.variant),
        feed_url=feed_url,
        center_latitude=float(center.get("latitude", defaults.center_latitude)),
        center_longitude=float(center.get("longitude", defaults.center_longitude)),
        zoom_start=int(data.get("zoom_start", defaults.zoom_start)),
        title=data.get("title", defaults.title),
        tiles=_parse_tiles(data.get("tiles", {})),
        output_path=_resolve_value(data.get("output_path", defaults.output_path)),
        timeout_seconds=float(data.get("timeout_seconds", defaults.timeout_seconds)),
        timezone=data.get("timezone"),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: variant=%s, feed=%s",
        config.variant,
        config.feed_url or "(variant default)",
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for deployments without a YAML file.

    Environment variables:
        QUAKEMAP_VARIANT: Map variant (depth, magnitude, significant)
        QUAKEMAP_FEED_URL: Feed URL override
        QUAKEMAP_OUTPUT_PATH: Where to write the rendered page
        QUAKEMAP_TIMEOUT: Feed request timeout in seconds
        QUAKEMAP_TIMEZONE: IANA timezone for tooltip times

    Returns:
        Config object from environment
    """
    defaults = Config()

    return Config(
        variant=os.environ.get("QUAKEMAP_VARIANT", defaults.variant),
        feed_url=os.environ.get("QUAKEMAP_FEED_URL") or None,
        output_path=os.environ.get("QUAKEMAP_OUTPUT_PATH", defaults.output_path),
        timeout_seconds=float(os.environ.get("QUAKEMAP_TIMEOUT", defaults.timeout_seconds)),
        timezone=os.environ.get("QUAKEMAP_TIMEZONE") or None,
    )
