# planeview/core/geometry/vectors.py
"""Small 3-vector / 2-vector helpers on top of NumPy."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from planeview.config import DEGENERACY_TOL
from planeview.errors import DegenerateVectorError

Vector3 = npt.NDArray[np.float64]
Vector2 = npt.NDArray[np.float64]


def _as_vec(p: npt.ArrayLike, size: int) -> npt.NDArray[np.float64]:
    arr = np.array(p, dtype=np.float64).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} coordinates, got shape {np.shape(p)}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"coordinates must be finite, got {arr.tolist()}")
    return arr


def as_vec3(p: npt.ArrayLike) -> Vector3:
    """Copy ``p`` into a fresh float64 array of shape (3,)."""
    return _as_vec(p, 3)


def as_vec2(p: npt.ArrayLike) -> Vector2:
    """Copy ``p`` into a fresh float64 array of shape (2,)."""
    return _as_vec(p, 2)


def frozen(arr: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Return ``arr`` marked read-only."""
    arr.flags.writeable = False
    return arr


def sub(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.subtract(a, b, dtype=np.float64)


def dot(a: npt.ArrayLike, b: npt.ArrayLike) -> float:
    return float(np.dot(a, b))


def cross(a: npt.ArrayLike, b: npt.ArrayLike) -> Vector3:
    return np.cross(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))


def norm(a: npt.ArrayLike) -> float:
    return float(np.linalg.norm(a))


def normalize(a: npt.ArrayLike, *, eps: float = DEGENERACY_TOL) -> npt.NDArray[np.float64]:
    """Scale ``a`` to unit length.

    Raises:
        DegenerateVectorError: if ``|a| <= eps``; never returns NaN/Inf.
    """
    arr = np.asarray(a, dtype=np.float64)
    length = norm(arr)
    if not length > eps:
        raise DegenerateVectorError(f"cannot normalize vector of length {length:g}")
    return arr / length


__all__ = [
    "Vector2",
    "Vector3",
    "as_vec2",
    "as_vec3",
    "cross",
    "dot",
    "frozen",
    "norm",
    "normalize",
    "sub",
]
