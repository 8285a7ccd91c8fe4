# planeview/render/protocols.py
"""Protocol interface for drawing surfaces.

The visualizer only ever hands pixel coordinates and colors to a renderer; it
never touches the surface itself.
"""

from __future__ import annotations

from typing import Protocol

import numpy.typing as npt

from planeview.render.colors import RGB


class RendererProtocol(Protocol):
    """Protocol for a 2D drawing surface."""

    def clear_surface(self) -> None:
        """Wipe everything drawn so far."""
        ...

    def draw_point(self, pixel: npt.ArrayLike) -> None:
        """Draw a small marker centred on ``pixel``."""
        ...

    def draw_filled_triangle(
        self,
        p0: npt.ArrayLike,
        p1: npt.ArrayLike,
        p2: npt.ArrayLike,
        color: RGB,
        alpha: float,
    ) -> None:
        """Fill the triangle p0 p1 p2."""
        ...


__all__ = ["RendererProtocol"]
