# planeview/core/geometry/coplanarity.py
"""Signed distance of points from the reference plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy.typing as npt

from planeview.config import COPLANARITY_TOL, RELATIVE_TOL_DEFAULT
from planeview.core.geometry.frame import BasisFrame
from planeview.core.geometry.vectors import Vector3, as_vec3, dot, norm
from planeview.errors import CoplanarityError

_ORDINALS: tuple[str, ...] = ("first", "second", "third")


@dataclass(frozen=True, eq=False)
class CoplanarityWarning:
    """One vertex found off the reference plane."""

    index: int
    point: Vector3
    deviation: float
    tolerance: float

    @property
    def message(self) -> str:
        ordinal = _ORDINALS[self.index] if self.index < len(_ORDINALS) else f"#{self.index}"
        return (
            f"{ordinal} point is not coplanar with the reference triangle "
            f"by {abs(self.deviation):g} (tol {self.tolerance:g})"
        )


def deviation(frame: BasisFrame, p: npt.ArrayLike) -> float:
    """Signed distance from ``p`` to the frame plane, positive along the normal."""
    return dot(as_vec3(p) - frame.origin, frame.normal)


def check_points(
    frame: BasisFrame,
    points: Sequence[npt.ArrayLike],
    *,
    tol: float = COPLANARITY_TOL,
    strict: bool = False,
) -> list[CoplanarityWarning]:
    """Report every point whose |deviation| exceeds ``tol``.

    Raises:
        CoplanarityError: only when ``strict`` is set and a point is off-plane.
    """
    warnings: list[CoplanarityWarning] = []
    for index, p in enumerate(points):
        point = as_vec3(p)
        d = deviation(frame, point)
        if abs(d) > tol:
            warnings.append(CoplanarityWarning(index=index, point=point, deviation=d, tolerance=tol))
    if strict and warnings:
        raise CoplanarityError(warnings)
    return warnings


def check_coplanar(
    frame: BasisFrame,
    a: npt.ArrayLike,
    b: npt.ArrayLike,
    c: npt.ArrayLike,
    *,
    tol: float = COPLANARITY_TOL,
    strict: bool = False,
) -> list[CoplanarityWarning]:
    """Check the three vertices of a triangle against the frame plane."""
    return check_points(frame, (a, b, c), tol=tol, strict=strict)


def scaled_tolerance(
    frame: BasisFrame, *points: npt.ArrayLike, rel: float = RELATIVE_TOL_DEFAULT
) -> float:
    """Tolerance proportional to the magnitude of the geometry involved.

    The scale is the largest of |u|, |v| and the distance of each given point
    from the frame origin.
    """
    scale = max(
        [norm(frame.u), norm(frame.v)] + [norm(as_vec3(p) - frame.origin) for p in points]
    )
    return rel * scale


__all__ = [
    "CoplanarityWarning",
    "check_coplanar",
    "check_points",
    "deviation",
    "scaled_tolerance",
]
