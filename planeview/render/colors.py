# planeview/render/colors.py
"""3-bit color tags: bit 2 red, bit 1 green, bit 0 blue."""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Final, Tuple

import numpy as np

RGB = Tuple[int, int, int]

CHANNEL_OFF: Final[int] = 0
CHANNEL_ON: Final[int] = 255
MAX_TAG: Final[int] = 7


class FaceStatus(IntEnum):
    """Face classification of a solid boolean operation, usable as a color tag."""

    UNKNOWN = 1  # blue
    INSIDE = 2  # green
    OUTSIDE = 3  # cyan
    SAME = 4  # red
    OPPOSITE = 5  # magenta


def decode_color(tag: int) -> RGB:
    """Map a tag in 0..7 to one of eight full-intensity RGB colors.

    Any integer type is accepted (Python int, IntEnum, NumPy integers); bools
    and floats are rejected.
    """
    if isinstance(tag, (bool, np.bool_)):
        raise TypeError("color tag must be an int, got bool")
    try:
        tag = operator.index(tag)
    except TypeError:
        raise TypeError(f"color tag must be an int, got {type(tag).__name__}") from None
    if not 0 <= tag <= MAX_TAG:
        raise ValueError(f"color tag must be within 0..{MAX_TAG}, got {tag}")
    r = CHANNEL_ON if tag & 4 else CHANNEL_OFF
    g = CHANNEL_ON if tag & 2 else CHANNEL_OFF
    b = CHANNEL_ON if tag & 1 else CHANNEL_OFF
    return r, g, b


def to_hex(rgb: RGB) -> str:
    return "#" + "".join(f"{int(c):02x}" for c in rgb)


def to_unit(rgb: RGB) -> tuple[float, float, float]:
    """Channels scaled to [0, 1], the form matplotlib expects."""
    r, g, b = (int(c) / 255.0 for c in rgb)
    return r, g, b


__all__ = [
    "RGB",
    "FaceStatus",
    "decode_color",
    "to_hex",
    "to_unit",
]
