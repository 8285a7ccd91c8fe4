# planeview/core/geometry/__init__.py
"""Plane basis construction, coplanarity checks and point projection."""

from __future__ import annotations

from planeview.core.geometry.coplanarity import (
    CoplanarityWarning,
    check_coplanar,
    check_points,
    deviation,
    scaled_tolerance,
)
from planeview.core.geometry.frame import BasisFrame, from_basis, make_frame
from planeview.core.geometry.projector import (
    PIVOT_PAIRS,
    ProjectionResult,
    ProjectionStatus,
    flatten,
    project_point,
    qualifying_pivots,
    solve_pivot,
    to_basis,
)

__all__ = [
    "PIVOT_PAIRS",
    "BasisFrame",
    "CoplanarityWarning",
    "ProjectionResult",
    "ProjectionStatus",
    "check_coplanar",
    "check_points",
    "deviation",
    "flatten",
    "from_basis",
    "make_frame",
    "project_point",
    "qualifying_pivots",
    "scaled_tolerance",
    "solve_pivot",
    "to_basis",
]
