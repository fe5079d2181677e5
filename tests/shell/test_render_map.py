"""Tests for the render_map command-line script.

The orchestrator is mocked; these tests cover argument handling only.
"""

import importlib.util
import os
from unittest.mock import MagicMock, patch

import pytest

from quakemap.core.config import Config
from quakemap.orchestrator import RenderResult


SCRIPT_PATH = os.path.join(
    os.path.dirname(__file__), "..", "..", "scripts", "render_map.py"
)


@pytest.fixture(scope="module")
def render_map():
    """Load scripts/render_map.py as a module."""
    spec = importlib.util.spec_from_file_location("render_map", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("variant: magnitude\noutput_path: from_config.html\n")
    return path


class TestOverrides:
    """Tests for parse_args() and apply_overrides()."""

    def test_flags_override_config(self, render_map):
        args = render_map.parse_args([
            "--variant", "depth",
            "--feed-url", "file:///tmp/all_week.geojson",
            "-o", "depth.html",
            "--timezone", "America/Los_Angeles",
        ])

        config = render_map.apply_overrides(Config(), args)

        assert config.variant == "depth"
        assert config.feed_url == "file:///tmp/all_week.geojson"
        assert config.output_path == "depth.html"
        assert config.timezone == "America/Los_Angeles"

    def test_no_flags_keep_config(self, render_map):
        original = Config(variant="significant", output_path="keep.html")

        config = render_map.apply_overrides(
            Config(variant="significant", output_path="keep.html"),
            render_map.parse_args([]),
        )

        assert config == original

    def test_rejects_unknown_variant(self, render_map):
        with pytest.raises(SystemExit):
            render_map.parse_args(["--variant", "tsunami"])


class TestMain:
    """Tests for main()."""

    def test_renders_to_output_path(self, render_map, config_file):
        orchestrator = MagicMock()
        orchestrator.render.return_value = RenderResult(feed_url="x", markers_added=4)

        with patch.object(render_map, "Orchestrator", return_value=orchestrator) as mock_class:
            code = render_map.main(["--config", str(config_file), "--output", "out.html"])

        assert code == 0
        assert mock_class.call_args.args[0].output_path == "out.html"
        orchestrator.renderer.save.assert_called_once_with("out.html")

    def test_failed_cycle_returns_one(self, render_map, config_file):
        orchestrator = MagicMock()
        orchestrator.render.return_value = RenderResult(feed_url="x", errors=["boom"])

        with patch.object(render_map, "Orchestrator", return_value=orchestrator):
            assert render_map.main(["--config", str(config_file)]) == 1

    def test_invalid_config_returns_two(self, render_map, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("variant: tsunami\n")

        with patch.object(render_map, "Orchestrator") as mock_class:
            assert render_map.main(["--config", str(path)]) == 2

        mock_class.assert_not_called()
