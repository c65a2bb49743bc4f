"""Logging utilities for Geoanalyzer."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from geoanalyzer.domain import ShapeKind

_HANDLER_PREFIX = "geoanalyzer"


@dataclass
class AnalysisStats:
    """Statistics for one analysis session."""

    analyzed_count: int = 0
    invalid_count: int = 0
    rendered_count: int = 0
    by_shape: Counter[ShapeKind] = field(default_factory=Counter)
    outcomes: list[tuple[ShapeKind, str]] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        """Analyses that did not end in a terminal outcome."""
        return self.analyzed_count - self.invalid_count


def _remove_installed_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if handler.get_name() and handler.get_name().startswith(_HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    _remove_installed_handlers(root_logger)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(f"{_HANDLER_PREFIX}.file")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{_HANDLER_PREFIX}.console")
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

    logger = structlog.get_logger("geoanalyzer")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class AnalysisLogger:
    """Logger for analysis events and session statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = AnalysisStats()

    def log_analysis(self, shape: ShapeKind, category: str, points: int) -> None:
        """Log a completed classification."""
        self._logger.info(
            "Shape analyzed",
            shape=shape.value,
            category=category,
            points=points,
        )
        self._stats.analyzed_count += 1
        self._stats.by_shape[shape] += 1
        self._stats.outcomes.append((shape, category))

    def log_terminal_outcome(self, shape: ShapeKind, category: str, reason: str) -> None:
        """Log a classification that stopped early (invalid or degenerate)."""
        self._logger.info(
            "Shape rejected",
            shape=shape.value,
            category=category,
            reason=reason,
        )
        self._stats.analyzed_count += 1
        self._stats.invalid_count += 1
        self._stats.by_shape[shape] += 1
        self._stats.outcomes.append((shape, category))

    def log_render(self, subject: str, columns: int, rows: int) -> None:
        """Log grid rendering details."""
        self._logger.debug(
            "Grid rendered",
            subject=subject,
            columns=columns,
            rows=rows,
        )
        self._stats.rendered_count += 1

    @property
    def stats(self) -> AnalysisStats:
        """Get current session statistics."""
        return self._stats
