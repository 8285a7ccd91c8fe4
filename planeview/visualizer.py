# planeview/visualizer.py
"""Draw 3D triangles projected onto the plane of a reference triangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy.typing as npt

from planeview.config import Settings, get_settings
from planeview.core.geometry.coplanarity import CoplanarityWarning, check_coplanar
from planeview.core.geometry.frame import BasisFrame, make_frame
from planeview.core.geometry.projector import to_basis
from planeview.core.geometry.vectors import Vector2, Vector3, as_vec3
from planeview.errors import CoplanarityError, DegenerateFrameError, FrameNotSetError
from planeview.render.colors import RGB, decode_color, to_hex
from planeview.render.protocols import RendererProtocol
from planeview.render.screen import ScreenMapper
from planeview.utils.error_tracker import ErrorTracker
from planeview.utils.format import format_vector
from planeview.utils.logger import get_logger

LOGGER = get_logger(__name__)

WarningCallback = Callable[[CoplanarityWarning], None]
PixelTriangle = tuple[Vector2, Vector2, Vector2]

_UNIT_TRIANGLE: tuple[tuple[float, float], ...] = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))


@dataclass(frozen=True, eq=False)
class ColoredTriangle:
    """A triangle to draw with one of the eight tag colors."""

    tag: int
    a: Vector3
    b: Vector3
    c: Vector3

    def __post_init__(self) -> None:
        """Validate the tag and normalise vertices."""
        decode_color(self.tag)
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, as_vec3(getattr(self, name)))

    @property
    def vertices(self) -> tuple[Vector3, Vector3, Vector3]:
        return self.a, self.b, self.c


class DebugVisualizer:
    """Owns the active reference frame and forwards pixels to a renderer."""

    def __init__(
        self,
        renderer: RendererProtocol | None = None,
        settings: Settings | None = None,
        *,
        mapper: ScreenMapper | None = None,
        tracker: Optional[ErrorTracker] = None,
        on_warning: Optional[WarningCallback] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if renderer is None:
            from planeview.render.canvas import MatplotlibRenderer

            renderer = MatplotlibRenderer(
                self.settings.canvas, renders_root=self.settings.paths.renders_root
            )
        self.renderer = renderer
        self.mapper = mapper or ScreenMapper(self.settings.screen)
        self.tracker = tracker or ErrorTracker(context="planeview.visualizer")
        self.on_warning = on_warning
        self._frame: Optional[BasisFrame] = None
        self._last_warnings: list[CoplanarityWarning] = []

    @property
    def frame(self) -> BasisFrame:
        if self._frame is None:
            raise FrameNotSetError("set_reference_triangle() must be called before drawing")
        return self._frame

    @property
    def has_frame(self) -> bool:
        return self._frame is not None

    @property
    def last_warnings(self) -> list[CoplanarityWarning]:
        """Coplanarity warnings raised by the most recent draw call."""
        return list(self._last_warnings)

    def set_reference_triangle(
        self, a: npt.ArrayLike, b: npt.ArrayLike, c: npt.ArrayLike
    ) -> BasisFrame:
        """Replace the active frame, clear the surface and draw the unit triangle.

        Raises:
            DegenerateFrameError: the canvas and previous frame are left untouched.
        """
        try:
            frame = make_frame(a, b, c, eps=self.settings.tolerance.degeneracy)
        except DegenerateFrameError as exc:
            self.tracker.record("frame", str(exc))
            raise

        self._frame = frame
        self._last_warnings = []
        self.tracker.clear()
        self.renderer.clear_surface()
        pixels = tuple(self.mapper.to_screen(uv) for uv in _UNIT_TRIANGLE)
        self._draw(pixels, self.settings.canvas.reference_color)  # type: ignore[arg-type]
        LOGGER.info("Reference triangle set, area={:.6g}", frame.area)
        return frame

    def project(self, p: npt.ArrayLike, *, frame: BasisFrame | None = None) -> Vector2:
        """Pixel position of a 3D point under ``frame`` (default: active frame)."""
        frame = frame or self.frame
        result = to_basis(frame, p, eps=self.settings.tolerance.degeneracy)
        if not result.ok:
            self.tracker.record("projection", result.reason)
        return self.mapper.to_screen(result.unwrap())

    def draw_projected_triangle(
        self,
        tag: int,
        a: npt.ArrayLike,
        b: npt.ArrayLike,
        c: npt.ArrayLike,
        *,
        frame: BasisFrame | None = None,
    ) -> PixelTriangle:
        """Check, project and draw triangle ABC in the color of ``tag``.

        Off-plane vertices are reported (callback, tracker, log) and drawn
        using their flattened position.

        Raises:
            FrameNotSetError: no frame given and none active.
            CoplanarityError: strict tolerance mode and a vertex is off-plane.
            UnsolvableProjectionError: the frame admits no pivot pair.
        """
        # one frame for all three vertices
        frame = frame or self.frame
        color = decode_color(tag)
        tol = self.settings.tolerance

        try:
            warnings = check_coplanar(frame, a, b, c, tol=tol.coplanarity, strict=tol.strict)
        except CoplanarityError as exc:
            for warning in exc.warnings:
                self.tracker.record("coplanarity", warning.message)
            raise
        self._report(warnings)

        pixels = tuple(self.project(p, frame=frame) for p in (a, b, c))
        LOGGER.debug(
            "Triangle tag={} color={} pixels={}",
            tag,
            to_hex(color),
            ", ".join(format_vector(px, precision=5) for px in pixels),
        )
        self._draw(pixels, color)  # type: ignore[arg-type]
        return pixels  # type: ignore[return-value]

    def draw_triangles(self, triangles: Iterable[ColoredTriangle]) -> list[PixelTriangle]:
        """Draw a batch of triangles against one snapshot of the active frame."""
        frame = self.frame
        return [
            self.draw_projected_triangle(tri.tag, *tri.vertices, frame=frame)
            for tri in triangles
        ]

    def _report(self, warnings: list[CoplanarityWarning]) -> None:
        self._last_warnings = list(warnings)
        for warning in warnings:
            self.tracker.record("coplanarity", warning.message, level="warning")
            if self.on_warning is not None:
                self.on_warning(warning)

    def _draw(self, pixels: PixelTriangle, color: RGB) -> None:
        self.renderer.draw_filled_triangle(
            *pixels, color=color, alpha=self.settings.canvas.alpha
        )
        for pixel in pixels:
            self.renderer.draw_point(pixel)


__all__ = [
    "ColoredTriangle",
    "DebugVisualizer",
    "PixelTriangle",
    "WarningCallback",
]
