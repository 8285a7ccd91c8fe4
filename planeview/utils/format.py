# planeview/utils/format.py
"""Formatting helpers for NumPy outputs."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def format_vector(vec: npt.ArrayLike, precision: int = 6) -> str:
    """Format a short vector as ``(x, y[, z])`` for log messages.

    Args:
        vec: Any 1-D array-like
        precision: Number of significant digits

    Returns:
        Parenthesised, comma-separated representation
    """
    values = np.asarray(vec, dtype=np.float64).ravel()
    return "(" + ", ".join(f"{float(x):.{precision}g}" for x in values) + ")"


__all__ = ["format_vector"]
