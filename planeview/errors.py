# planeview/errors.py
"""Exception hierarchy for frame construction, projection and drawing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from planeview.core.geometry.coplanarity import CoplanarityWarning


class PlaneViewError(Exception):
    """Base class for all planeview errors."""


class DegenerateVectorError(PlaneViewError, ValueError):
    """A vector too short to be normalized."""


class DegenerateFrameError(PlaneViewError, ValueError):
    """Reference triangle has (near) zero area: its vertices are collinear."""


class UnsolvableProjectionError(PlaneViewError, RuntimeError):
    """No pivot axis pair qualifies; the frame itself is broken."""


class CoplanarityError(PlaneViewError, ValueError):
    """Raised in strict mode when points deviate from the reference plane."""

    def __init__(self, warnings: Sequence[CoplanarityWarning]) -> None:
        self.warnings = tuple(warnings)
        worst = max(abs(w.deviation) for w in self.warnings) if self.warnings else 0.0
        super().__init__(
            f"{len(self.warnings)} point(s) off the reference plane, max deviation {worst:g}"
        )


class FrameNotSetError(PlaneViewError, RuntimeError):
    """Drawing requested before a reference triangle was set."""


__all__ = [
    "PlaneViewError",
    "DegenerateVectorError",
    "DegenerateFrameError",
    "UnsolvableProjectionError",
    "CoplanarityError",
    "FrameNotSetError",
]
