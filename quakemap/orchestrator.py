"""Orchestrator - Wires Functional Core and Imperative Shell.

This module runs one map load cycle: fetch the feed, turn features into
markers, draw them, then draw the legend. It also owns the error policy:
fetch and format failures replace the map with a message, bad features
are skipped and reported.
"""

import logging
from dataclasses import dataclass, field
from datetime import tzinfo

from quakemap.core.config import Config
from quakemap.core.earthquake import MalformedFeedError, SkippedFeature
from quakemap.core.formatter import (
    ERROR_CONFIG,
    ERROR_MALFORMED,
    format_error_message,
)
from quakemap.core.legend import legend_for_variant, render_legend_html
from quakemap.core.markers import build_markers
from quakemap.core.variants import UnknownVariantError
from quakemap.shell.config_loader import resolve_timezone
from quakemap.shell.feed_client import FeedClient, FeedError
from quakemap.shell.map_renderer import MapRenderer


logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of a complete map load cycle.

    Attributes:
        feed_url: Feed that was requested
        markers_added: Markers drawn on the map
        skipped: Features skipped for missing geometry
        errors: Fatal errors (the map was replaced by a message)
    """
    feed_url: str
    markers_added: int = 0
    skipped: list[SkippedFeature] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if the map was rendered."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the load cycle."""
        if not self.success:
            return f"Failed to render map: {'; '.join(self.errors)}"
        return (
            f"Added {self.markers_added} earthquake markers, "
            f"{len(self.skipped)} features skipped"
        )


class Orchestrator:
    """Coordinates one earthquake map load cycle.

    This class wires together:
    - Feed client (fetches the GeoJSON feed)
    - Core functions (parsing, marker attributes, legend)
    - Map renderer (draws the page)
    """

    def __init__(
        self,
        config: Config,
        feed_client: FeedClient | None = None,
        renderer: MapRenderer | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            feed_client: Feed client (created if not provided)
            renderer: Map renderer (created if not provided)
            tz: Tooltip timezone (resolved from config if not provided)
        """
        self.config = config
        self.feed_client = feed_client or FeedClient(timeout=config.timeout_seconds)
        self.renderer = renderer or MapRenderer(config)
        self.tz = tz if tz is not None else resolve_timezone(config.timezone)

    def _fail(self, result: RenderResult, kind: str, detail: str) -> RenderResult:
        """Replace the map with an error message and record the failure."""
        self.renderer.show_error(format_error_message(kind, detail))
        result.errors.append(detail)
        return result

    def render(self) -> RenderResult:
        """Run a complete load cycle.

        This is the main entry point that:
        1. Fetches the feed (one attempt)
        2. Builds markers, skipping features without geometry
        3. Adds markers in feed order
        4. Builds the legend from the same color scale

        Never raises; failures are reported in the result and on the page.

        Returns:
            RenderResult with details of what happened
        """
        try:
            variant = self.config.map_variant
            feed_url = self.config.effective_feed_url
        except UnknownVariantError as e:
            result = RenderResult(feed_url=self.config.feed_url or "")
            logger.error("Invalid configuration: %s", e.args[0])
            return self._fail(result, ERROR_CONFIG, e.args[0])

        result = RenderResult(feed_url=feed_url)

        # Step 1: Fetch feed
        try:
            geojson = self.feed_client.fetch(feed_url)
        except FeedError as e:
            logger.error("Error fetching earthquake data: %s", e)
            return self._fail(result, e.kind, str(e))
        except Exception as e:
            logger.exception("Unexpected error fetching earthquake data")
            return self._fail(result, "unknown", str(e) or type(e).__name__)

        # Step 2: Build markers (pure core function)
        try:
            batch = build_markers(geojson, variant, self.tz)
        except MalformedFeedError as e:
            logger.warning("Received data lacks 'features' array: %s", e)
            return self._fail(result, ERROR_MALFORMED, str(e))
        except Exception as e:
            logger.exception("Unexpected error building markers")
            return self._fail(result, "unknown", str(e) or type(e).__name__)

        for skipped in batch.skipped:
            logger.warning(
                "Skipping feature %d (%s): %s",
                skipped.index,
                skipped.feature_id or "no id",
                skipped.reason,
            )
        result.skipped = batch.skipped

        # Step 3: Draw markers in feed order
        for marker in batch.markers:
            self.renderer.add_marker(marker)
        result.markers_added = len(batch.markers)

        # Step 4: Legend, once all markers are placed
        legend_html = render_legend_html(
            variant.legend_title,
            legend_for_variant(variant),
        )
        self.renderer.set_legend(legend_html)

        logger.info(
            "Added %d earthquake markers to the map (%s variant)",
            result.markers_added,
            variant.name,
        )

        return result
