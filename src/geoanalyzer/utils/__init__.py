"""Utility functions for geoanalyzer.

This module provides logging setup and configuration, and the session
statistics kept while analyzing shapes.
"""

from geoanalyzer.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
]
