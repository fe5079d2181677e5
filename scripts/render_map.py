#!/usr/bin/env python3
"""Render the earthquake map to an HTML file.

Fetches the feed once, draws the markers and legend, and writes a
self-contained page that can be opened in any browser.

Usage:
    # Default variant (magnitude, M4.5+ past week)
    python scripts/render_map.py

    # Depth-colored map of all events in the past week
    python scripts/render_map.py --variant depth --output depth.html

    # Render from a saved copy of the feed
    python scripts/render_map.py --feed-url file:///tmp/all_week.geojson

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quakemap.core.config import validate_config
from quakemap.core.variants import VARIANTS
from quakemap.orchestrator import Orchestrator
from quakemap.shell.config_loader import load_config

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render recent USGS earthquakes to an interactive HTML map",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        help="Map variant (overrides config)",
    )
    parser.add_argument(
        "--feed-url",
        help="Feed URL or file:// path (overrides the variant's feed)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output HTML file (overrides config)",
    )
    parser.add_argument(
        "--timezone",
        help="IANA timezone for tooltip times, e.g. America/Los_Angeles",
    )
    return parser.parse_args(argv)


def apply_overrides(config, args: argparse.Namespace):
    """Apply command-line overrides on top of the loaded config."""
    if args.variant:
        config.variant = args.variant
    if args.feed_url:
        config.feed_url = args.feed_url
    if args.output:
        config.output_path = args.output
    if args.timezone:
        config.timezone = args.timezone
    return config


def main(argv=None) -> int:
    args = parse_args(argv)
    config = apply_overrides(load_config(args.config), args)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("%s: %s", error.field, error.message)
        return 2

    orchestrator = Orchestrator(config)
    result = orchestrator.render()
    path = orchestrator.renderer.save(config.output_path)

    print(result.summary)
    print(f"Map written to {path}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
