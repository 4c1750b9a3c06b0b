"""Logging utilities for gridoutline."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render run."""

    contour_count: int = 0
    hole_count: int = 0
    corner_count: int = 0
    arc_count: int = 0
    dropped_contours: int = 0
    bridges_rendered: int = 0
    stale_bridges: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def island_count(self) -> int:
        return self.contour_count - self.hole_count

    @property
    def duration_ms(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time) * 1000
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Unlike batch tools, rendering a grid is cheap, so no log file is
    written unless one is requested.

    Args:
        log_file: Path to log file (None disables file output)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Repeated calls replace the handlers installed by the previous one
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("gridoutline")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
        started=datetime.now().isoformat(timespec="seconds"),
    )

    return logger


class RenderLogger:
    """Logger for tracking render stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, rows: int, cols: int, filled: int) -> None:
        """Log start of a render."""
        self._logger.debug("Rendering grid", rows=rows, cols=cols, filled=filled)

    def log_contours(self, total: int, holes: int, dropped: int) -> None:
        """Log contour assembly results."""
        self._logger.debug("Contours traced", total=total, outer=total - holes, holes=holes, dropped=dropped)
        self._stats.contour_count += total
        self._stats.hole_count += holes
        self._stats.dropped_contours += dropped

    def log_corners(self, contour_idx: int, corners: int, arcs: int) -> None:
        """Log corner resolution for one contour."""
        self._logger.debug("Corners resolved", contour=contour_idx, corners=corners, arcs=arcs)
        self._stats.corner_count += corners
        self._stats.arc_count += arcs

    def log_bridges(self, rendered: int, stale: int) -> None:
        """Log bridge fillet results."""
        self._logger.debug("Bridges rendered", bridges=rendered, stale=stale)
        self._stats.bridges_rendered += rendered
        self._stats.stale_bridges += stale

    def log_render_complete(self, path_length: int, duration_ms: float) -> None:
        """Log a finished render."""
        self._logger.info(
            "Grid rendered",
            contours=self._stats.contour_count,
            corners=self._stats.corner_count,
            bridges=self._stats.bridges_rendered,
            path_chars=path_length,
            duration_ms=round(duration_ms, 2),
        )

    def log_render_empty(self) -> None:
        self._logger.info("Nothing to render")

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
