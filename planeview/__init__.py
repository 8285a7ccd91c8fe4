# planeview/__init__.py
"""Debug visualizer projecting 3D triangles onto a reference plane."""

from __future__ import annotations

from planeview.config import Settings, get_settings
from planeview.core.geometry import (
    BasisFrame,
    CoplanarityWarning,
    ProjectionResult,
    check_coplanar,
    deviation,
    make_frame,
    to_basis,
)
from planeview.errors import (
    CoplanarityError,
    DegenerateFrameError,
    FrameNotSetError,
    PlaneViewError,
    UnsolvableProjectionError,
)
from planeview.render import FaceStatus, MatplotlibRenderer, ScreenMapper, decode_color
from planeview.visualizer import ColoredTriangle, DebugVisualizer

__all__ = [
    "BasisFrame",
    "ColoredTriangle",
    "CoplanarityError",
    "CoplanarityWarning",
    "DebugVisualizer",
    "DegenerateFrameError",
    "FaceStatus",
    "FrameNotSetError",
    "MatplotlibRenderer",
    "PlaneViewError",
    "ProjectionResult",
    "ScreenMapper",
    "Settings",
    "UnsolvableProjectionError",
    "check_coplanar",
    "decode_color",
    "deviation",
    "get_settings",
    "make_frame",
    "to_basis",
]
