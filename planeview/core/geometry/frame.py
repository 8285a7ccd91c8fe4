# planeview/core/geometry/frame.py
"""Oblique 2D coordinate frame on the plane of a reference triangle."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from planeview.config import DEGENERACY_TOL
from planeview.core.geometry.vectors import (
    Vector3,
    as_vec2,
    as_vec3,
    cross,
    frozen,
    norm,
    normalize,
)
from planeview.errors import DegenerateFrameError, DegenerateVectorError
from planeview.utils.format import format_vector
from planeview.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class BasisFrame:
    """Affine basis of a reference triangle ABC.

    Attributes:
        origin: A
        u: B - A (not necessarily unit length)
        v: C - A (not necessarily orthogonal to u)
        normal: unit ``u x v``, right-hand rule from u to v
    """

    origin: Vector3
    u: Vector3
    v: Vector3
    normal: Vector3

    def __post_init__(self) -> None:
        """Validate shapes and store read-only copies."""
        for name in ("origin", "u", "v", "normal"):
            arr = np.array(getattr(self, name), dtype=np.float64)
            if arr.shape != (3,):
                raise ValueError(f"{name} must be length 3, got {arr.shape}")
            object.__setattr__(self, name, frozen(arr))

    @property
    def vertices(self) -> tuple[Vector3, Vector3, Vector3]:
        """The reference triangle A, B, C."""
        return self.origin, self.origin + self.u, self.origin + self.v

    @property
    def area(self) -> float:
        return 0.5 * norm(cross(self.u, self.v))

    def point_at(self, a: float, b: float) -> Vector3:
        """3D point with basis coordinates (a, b)."""
        return self.origin + a * self.u + b * self.v


def make_frame(
    a: npt.ArrayLike,
    b: npt.ArrayLike,
    c: npt.ArrayLike,
    *,
    eps: float = DEGENERACY_TOL,
) -> BasisFrame:
    """Build the basis frame of triangle ABC.

    Raises:
        DegenerateFrameError: if A, B, C are collinear (|u x v| <= eps).
    """
    origin = as_vec3(a)
    u = as_vec3(b) - origin
    v = as_vec3(c) - origin
    try:
        normal = normalize(cross(u, v), eps=eps)
    except DegenerateVectorError as exc:
        raise DegenerateFrameError(
            f"reference triangle {format_vector(origin)}, {format_vector(origin + u)}, "
            f"{format_vector(origin + v)} is degenerate: {exc}"
        ) from exc

    frame = BasisFrame(origin=origin, u=u, v=v, normal=normal)
    LOGGER.info(
        "Built basis frame origin={} u={} v={} normal={}",
        format_vector(origin),
        format_vector(u),
        format_vector(v),
        format_vector(normal),
    )
    return frame


def from_basis(frame: BasisFrame, coords: npt.ArrayLike) -> Vector3:
    """Inverse of projection: ``origin + a*u + b*v``."""
    a, b = as_vec2(coords)
    return frame.point_at(float(a), float(b))


__all__ = ["BasisFrame", "from_basis", "make_frame"]
