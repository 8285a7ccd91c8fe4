# planeview/render/__init__.py
"""Drawing glue: screen mapping, color tags and renderers."""

from __future__ import annotations

from planeview.render.canvas import MatplotlibRenderer
from planeview.render.colors import RGB, FaceStatus, decode_color, to_hex, to_unit
from planeview.render.protocols import RendererProtocol
from planeview.render.screen import ScreenMapper

__all__ = [
    "RGB",
    "FaceStatus",
    "MatplotlibRenderer",
    "RendererProtocol",
    "ScreenMapper",
    "decode_color",
    "to_hex",
    "to_unit",
]
