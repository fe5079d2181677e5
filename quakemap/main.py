"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration, runs the orchestrator and
serves the rendered map page.
"""

import logging
import os
from typing import Any

import functions_framework
from flask import Request

from quakemap.core.config import validate_config
from quakemap.orchestrator import Orchestrator
from quakemap.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


def _get_config():
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("QUAKEMAP_VARIANT") or os.environ.get("QUAKEMAP_FEED_URL"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def _config_errors(config) -> list[str]:
    """Validate configuration, logging warnings.

    Returns:
        Critical error messages (empty if the config is usable)
    """
    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    messages = [f"{e.field}: {e.message}" for e in validation.critical_errors]
    if messages:
        logger.error("Invalid configuration: %s", "; ".join(messages))
    return messages


@functions_framework.http
def earthquake_map(request: Request) -> tuple[Any, int, dict[str, str]]:
    """HTTP Cloud Function entry point.

    Runs one map load cycle and returns the rendered page. A failed load
    cycle still returns a page (the error message) with status 502.

    Args:
        request: Flask request object. An optional `variant` query
            parameter overrides the configured variant.

    Returns:
        Tuple of (body, HTTP status code, headers)
    """
    logger.info("Rendering earthquake map")

    try:
        config = _get_config()

        variant = request.args.get("variant") if request.args else None
        if variant:
            config.variant = variant

        messages = _config_errors(config)
        if messages:
            return {"status": "error", "errors": messages}, 400, {}

        orchestrator = Orchestrator(config)
        result = orchestrator.render()

        logger.info("Completed: %s", result.summary)

        status_code = 200 if result.success else 502
        return orchestrator.renderer.render(), status_code, HTML_HEADERS

    except Exception as e:
        logger.exception("Unexpected error rendering earthquake map")
        return {
            "status": "error",
            "message": str(e),
        }, 500, {}


def run_local() -> int:
    """Render the map once and write it to the configured output path.

    Returns:
        Process exit code: 0 on success, 1 if the load cycle failed,
        2 if the configuration is invalid
    """
    print("Rendering earthquake map locally...")

    config = _get_config()
    messages = _config_errors(config)
    if messages:
        for message in messages:
            print(f"Invalid configuration: {message}")
        return 2

    orchestrator = Orchestrator(config)
    result = orchestrator.render()
    path = orchestrator.renderer.save(config.output_path)
    print(f"{result.summary}\nWrote {path}")

    return 0 if result.success else 1


# For local testing
if __name__ == "__main__":
    import sys

    sys.exit(run_local())
