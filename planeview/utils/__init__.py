# planeview/utils/__init__.py
"""Utility package re-exporting shared helpers for planeview."""

from planeview.utils.error_tracker import ErrorTracker
from planeview.utils.format import format_vector
from planeview.utils.logger import configure, get_logger

__all__ = [
    "ErrorTracker",
    "configure",
    "format_vector",
    "get_logger",
]
