# planeview/render/screen.py
"""Affine map between basis coordinates and canvas pixels."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from planeview.config import ScreenConfig
from planeview.core.geometry.vectors import Vector2, as_vec2


class ScreenMapper:
    """``pixel = offset + coord * scale``.

    With the defaults, basis (0, 0) lands on pixel (100, 100) and the unit
    square spans pixels 100..500 on both axes. Points outside [0, 1]^2 simply
    map outside that window.
    """

    def __init__(self, config: ScreenConfig | None = None) -> None:
        self.config = config or ScreenConfig()
        self.offset = np.array(self.config.offset_px, dtype=np.float64)
        self.scale = float(self.config.scale_px)

    def __repr__(self) -> str:
        return f"ScreenMapper(offset={tuple(self.offset.tolist())}, scale={self.scale:g})"

    def to_screen(self, coord: npt.ArrayLike) -> Vector2:
        return self.offset + as_vec2(coord) * self.scale

    def to_basis(self, pixel: npt.ArrayLike) -> Vector2:
        return (as_vec2(pixel) - self.offset) / self.scale

    @staticmethod
    def is_visible(pixel: npt.ArrayLike, width: float, height: float) -> bool:
        x, y = as_vec2(pixel)
        return 0.0 <= x <= width and 0.0 <= y <= height


__all__ = ["ScreenMapper"]
