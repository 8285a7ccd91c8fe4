# planeview/core/geometry/projector.py
"""Project 3D points into the oblique (u, v) basis of a frame.

A point P is first made relative to the frame origin and flattened onto the
plane, then ``P'' = a*u + b*v`` is solved. The system is 2x2 embedded in three
coordinates, so two coordinate axes (a pivot pair) are chosen where the
system is well conditioned and the third equation is implied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import permutations
from typing import Final, Optional

import numpy as np
import numpy.typing as npt

from planeview.config import DEGENERACY_TOL
from planeview.core.geometry.frame import BasisFrame
from planeview.core.geometry.vectors import Vector2, Vector3, as_vec3, dot, frozen
from planeview.errors import UnsolvableProjectionError
from planeview.utils.format import format_vector
from planeview.utils.logger import get_logger

LOGGER = get_logger(__name__)

# (0,1), (0,2), (1,0), (1,2), (2,0), (2,1): both orientations of every axis
# pair, since the |u[i]| check is not symmetric in i and j.
PIVOT_PAIRS: Final[tuple[tuple[int, int], ...]] = tuple(permutations(range(3), 2))


class ProjectionStatus(str, Enum):
    """Outcome of a basis projection."""

    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True, eq=False)
class ProjectionResult:
    """Basis coordinates of a point, or the reason there are none."""

    status: ProjectionStatus
    coords: Optional[Vector2] = None
    pivot: Optional[tuple[int, int]] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ProjectionStatus.SOLVED

    def unwrap(self) -> Vector2:
        """Return the coordinates or raise UnsolvableProjectionError."""
        if self.status is not ProjectionStatus.SOLVED or self.coords is None:
            raise UnsolvableProjectionError(self.reason or "projection has no solution")
        return self.coords

    @classmethod
    def solved(cls, coords: Vector2, pivot: tuple[int, int]) -> ProjectionResult:
        return cls(status=ProjectionStatus.SOLVED, coords=frozen(coords), pivot=pivot)

    @classmethod
    def unsolvable(cls, reason: str) -> ProjectionResult:
        return cls(status=ProjectionStatus.UNSOLVABLE, reason=reason)


def flatten(frame: BasisFrame, p: npt.ArrayLike) -> Vector3:
    """Offset of ``p`` from the origin with its out-of-plane component removed."""
    rel = as_vec3(p) - frame.origin
    return rel - dot(rel, frame.normal) * frame.normal


def _pivot_det(frame: BasisFrame, i: int, j: int, eps: float) -> Optional[float]:
    u, v = frame.u, frame.v
    if abs(u[i]) <= eps:
        return None
    det = u[i] * v[j] - u[j] * v[i]
    if abs(det) <= eps:
        return None
    return float(det)


def qualifying_pivots(
    frame: BasisFrame, *, eps: float = DEGENERACY_TOL
) -> list[tuple[int, int]]:
    """All pivot pairs usable for this frame, in search order."""
    return [(i, j) for i, j in PIVOT_PAIRS if _pivot_det(frame, i, j, eps) is not None]


def solve_pivot(
    frame: BasisFrame,
    flat: npt.ArrayLike,
    i: int,
    j: int,
    *,
    eps: float = DEGENERACY_TOL,
) -> Optional[Vector2]:
    """Solve ``flat = a*u + b*v`` using coordinate axes i and j.

    Returns None when the pair does not qualify for this frame.
    """
    det = _pivot_det(frame, i, j, eps)
    if det is None:
        return None
    u, v = frame.u, frame.v
    q = np.asarray(flat, dtype=np.float64)
    b = (u[i] * q[j] - u[j] * q[i]) / det
    a = (q[i] - b * v[i]) / u[i]
    return np.array([a, b], dtype=np.float64)


def to_basis(
    frame: BasisFrame, p: npt.ArrayLike, *, eps: float = DEGENERACY_TOL
) -> ProjectionResult:
    """Basis coordinates (a, b) with ``p ~= origin + a*u + b*v``.

    Off-plane input is tolerated: the normal component is dropped before
    solving. The first qualifying pivot pair in PIVOT_PAIRS is used.
    """
    flat = flatten(frame, p)
    for i, j in PIVOT_PAIRS:
        coords = solve_pivot(frame, flat, i, j, eps=eps)
        if coords is not None:
            LOGGER.debug(
                "Projected {} -> {} via axes ({}, {})",
                format_vector(p),
                format_vector(coords),
                i,
                j,
            )
            return ProjectionResult.solved(coords, (i, j))

    reason = (
        f"no pivot axis pair qualifies for u={format_vector(frame.u)} "
        f"v={format_vector(frame.v)} (eps={eps:g})"
    )
    LOGGER.error("Cannot project {}: {}", format_vector(p), reason)
    return ProjectionResult.unsolvable(reason)


def project_point(
    frame: BasisFrame, p: npt.ArrayLike, *, eps: float = DEGENERACY_TOL
) -> Vector2:
    """Like :func:`to_basis` but raises UnsolvableProjectionError on failure."""
    return to_basis(frame, p, eps=eps).unwrap()


__all__ = [
    "PIVOT_PAIRS",
    "ProjectionResult",
    "ProjectionStatus",
    "flatten",
    "project_point",
    "qualifying_pivots",
    "solve_pivot",
    "to_basis",
]
