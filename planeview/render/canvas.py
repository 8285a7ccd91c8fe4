# planeview/render/canvas.py
"""Matplotlib-backed drawing surface."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import numpy.typing as npt
from matplotlib.patches import Polygon, Rectangle

from planeview.config import CanvasConfig, get_settings
from planeview.core.geometry.vectors import as_vec2
from planeview.render.colors import RGB, to_unit
from planeview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class MatplotlibRenderer:
    """Square pixel canvas with the origin at the top-left corner."""

    def __init__(
        self, config: CanvasConfig | None = None, *, renders_root: Path | None = None
    ) -> None:
        self.config = config or CanvasConfig()
        self.renders_root = (
            Path(renders_root) if renders_root is not None else get_settings().paths.renders_root
        )
        side = self.config.size_px / self.config.dpi
        self.fig = plt.figure(figsize=(side, side), dpi=self.config.dpi)
        self.fig.patch.set_facecolor(self.config.background_color)
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self._setup_axes()

    @property
    def size(self) -> int:
        return self.config.size_px

    @property
    def patch_count(self) -> int:
        return len(self.ax.patches)

    def _setup_axes(self) -> None:
        size = self.config.size_px
        self.ax.set_xlim(0, size)
        self.ax.set_ylim(size, 0)
        self.ax.set_aspect("equal")
        self.ax.set_axis_off()

    def clear_surface(self) -> None:
        self.ax.cla()
        self._setup_axes()
        LOGGER.debug("Cleared {}x{} canvas", self.size, self.size)

    def draw_point(self, pixel: npt.ArrayLike) -> None:
        x, y = as_vec2(pixel)
        half = self.config.point_size_px / 2.0
        self.ax.add_patch(
            Rectangle(
                (x - half, y - half),
                self.config.point_size_px,
                self.config.point_size_px,
                facecolor=self.config.point_color,
                edgecolor="none",
                alpha=1.0,
            )
        )

    def draw_filled_triangle(
        self,
        p0: npt.ArrayLike,
        p1: npt.ArrayLike,
        p2: npt.ArrayLike,
        color: RGB,
        alpha: float,
    ) -> None:
        verts = np.vstack([as_vec2(p0), as_vec2(p1), as_vec2(p2)])
        self.ax.add_patch(
            Polygon(verts, closed=True, facecolor=to_unit(color), edgecolor="none", alpha=alpha)
        )

    def save(self, path: Path | str | None = None) -> Path:
        """Write the canvas and release the figure from pyplot.

        Relative paths, and the default timestamped name, resolve under
        ``renders_root``. The canvas can still be drawn on and saved again.
        """
        if path is None:
            path = f"planeview_{datetime.now():%Y%m%d_%H%M%S_%f}.png"
        path = Path(path)
        if not path.is_absolute():
            path = self.renders_root / path
        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(path, dpi=self.config.dpi, facecolor=self.fig.get_facecolor())
        plt.close(self.fig)
        LOGGER.info("Saved canvas to {}", path)
        return path

    def close(self) -> None:
        plt.close(self.fig)


__all__ = ["MatplotlibRenderer"]
