"""Unit tests for render logging and statistics."""

import logging
from unittest.mock import MagicMock

from gridoutline.utils import RenderLogger, RenderStats, configure_logging


class TestRenderStats:
    """Tests for RenderStats."""

    def test_island_count(self):
        stats = RenderStats(contour_count=5, hole_count=2)
        assert stats.island_count == 3

    def test_duration(self):
        """Test duration in milliseconds."""
        assert RenderStats(start_time=1.0, end_time=1.25).duration_ms == 250.0
        assert RenderStats().duration_ms == 0.0


class TestRenderLogger:
    """Tests for RenderLogger."""

    def test_accumulates_stats(self):
        """Test that stage logs update the statistics."""
        mock = MagicMock()
        render_logger = RenderLogger(mock)

        render_logger.log_corners(0, corners=4, arcs=4)
        render_logger.log_corners(1, corners=8, arcs=2)
        render_logger.log_contours(total=2, holes=1, dropped=0)
        render_logger.log_bridges(rendered=3, stale=1)

        stats = render_logger.stats
        assert stats.corner_count == 12
        assert stats.arc_count == 6
        assert stats.contour_count == 2
        assert stats.hole_count == 1
        assert stats.bridges_rendered == 3
        assert stats.stale_bridges == 1
        assert mock.debug.call_count == 4

    def test_render_complete_logged_at_info(self):
        mock = MagicMock()
        RenderLogger(mock).log_render_complete(path_length=42, duration_ms=1.234)

        _, kwargs = mock.info.call_args
        assert kwargs["path_chars"] == 42
        assert kwargs["duration_ms"] == 1.23


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler_only_when_requested(self, tmp_path):
        """Test that no log file is created by default."""
        configure_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

        log_file = tmp_path / "render.log"
        configure_logging(log_file=log_file)
        assert any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
        assert log_file.exists()

    def test_repeated_calls_do_not_stack_handlers(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_quiet_console(self):
        """Test that quiet mode only lets errors through."""
        configure_logging(console_level="DEBUG", quiet=True)
        (handler,) = logging.getLogger().handlers
        assert handler.level == logging.ERROR
