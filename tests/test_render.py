# tests/test_render.py
"""Tests for screen mapping, color tags and the matplotlib canvas."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from planeview.config import CanvasConfig, ScreenConfig
from planeview.render.canvas import MatplotlibRenderer
from planeview.render.colors import FaceStatus, decode_color, to_hex, to_unit
from planeview.render.screen import ScreenMapper


def test_screen_default_mapping() -> None:
    """(0,0) -> (100,100), (1,1) -> (500,500)."""
    mapper = ScreenMapper()
    assert np.allclose(mapper.to_screen((0.0, 0.0)), [100.0, 100.0])
    assert np.allclose(mapper.to_screen((1.0, 1.0)), [500.0, 500.0])
    assert np.allclose(mapper.to_screen((1.0, 0.0)), [500.0, 100.0])
    assert np.allclose(mapper.to_screen((0.0, 1.0)), [100.0, 500.0])


def test_screen_inverse() -> None:
    """to_basis undoes to_screen."""
    mapper = ScreenMapper(ScreenConfig(offset_px=(10.0, 20.0), scale_px=50.0))
    coord = np.array([0.37, -1.25])
    assert np.allclose(mapper.to_basis(mapper.to_screen(coord)), coord)


def test_off_screen_is_not_an_error() -> None:
    """Coordinates outside the unit square simply land off the canvas."""
    mapper = ScreenMapper()
    pixel = mapper.to_screen((-1.0, 5.0))
    assert np.allclose(pixel, [-300.0, 2100.0])
    assert not ScreenMapper.is_visible(pixel, 1600, 1600)
    assert ScreenMapper.is_visible(mapper.to_screen((0.5, 0.5)), 1600, 1600)


def test_screen_config_rejects_zero_scale() -> None:
    """A zero scale would make the map non-invertible."""
    with pytest.raises(ValueError, match="scale_px"):
        ScreenConfig(scale_px=0.0)


@pytest.mark.parametrize(
    ("tag", "rgb"),
    [
        (0, (0, 0, 0)),
        (1, (0, 0, 255)),
        (2, (0, 255, 0)),
        (4, (255, 0, 0)),
        (5, (255, 0, 255)),
        (7, (255, 255, 255)),
    ],
)
def test_decode_color(tag: int, rgb: tuple[int, int, int]) -> None:
    """Bits 2, 1, 0 select red, green, blue at full intensity."""
    assert decode_color(tag) == rgb


def test_decode_color_rejects_out_of_range() -> None:
    """Only 0..7 are valid tags."""
    with pytest.raises(ValueError):
        decode_color(8)
    with pytest.raises(ValueError):
        decode_color(-1)
    with pytest.raises(TypeError):
        decode_color(1.0)  # type: ignore[arg-type]


def test_decode_color_accepts_numpy_integers() -> None:
    """Tags read back from NumPy arrays decode like plain ints."""
    assert decode_color(np.array([5])[0]) == (255, 0, 255)
    assert decode_color(np.uint8(2)) == (0, 255, 0)
    with pytest.raises(TypeError):
        decode_color(True)
    with pytest.raises(TypeError):
        decode_color(np.bool_(True))  # type: ignore[arg-type]


def test_color_conversions() -> None:
    """Hex strings and unit floats for renderers."""
    assert to_hex(decode_color(5)) == "#ff00ff"
    assert to_hex((0, 255, 255)) == "#00ffff"
    assert to_unit((255, 0, 255)) == (1.0, 0.0, 1.0)


def test_face_status_tags() -> None:
    """Face classifications double as color tags."""
    assert decode_color(FaceStatus.UNKNOWN) == (0, 0, 255)
    assert decode_color(FaceStatus.OUTSIDE) == (0, 255, 255)
    assert decode_color(FaceStatus.OPPOSITE) == (255, 0, 255)


def test_canvas_draws_patches() -> None:
    """Triangles and point markers become patches; clear removes them."""
    renderer = MatplotlibRenderer(CanvasConfig(size_px=200, dpi=100))
    try:
        renderer.draw_filled_triangle((10, 10), (50, 10), (10, 50), (255, 0, 0), 0.5)
        renderer.draw_point((10, 10))
        assert renderer.patch_count == 2
        marker = renderer.ax.patches[1]
        assert marker.get_width() == pytest.approx(4.0)
        assert marker.get_xy() == pytest.approx((8.0, 8.0))
        renderer.clear_surface()
        assert renderer.patch_count == 0
        assert renderer.ax.get_ylim() == (200.0, 0.0)
    finally:
        renderer.close()


@pytest.mark.slow
def test_canvas_save(tmp_path: Path) -> None:
    """save creates missing directories and writes the image."""
    renderer = MatplotlibRenderer(CanvasConfig(size_px=100, dpi=50))
    try:
        renderer.draw_filled_triangle((0, 0), (100, 0), (0, 100), (0, 255, 0), 0.5)
        out = renderer.save(tmp_path / "renders" / "frame.png")
    finally:
        renderer.close()
    assert out.exists()
    assert out.stat().st_size > 0


def test_canvas_save_resolves_under_renders_root(tmp_path: Path) -> None:
    """Relative and default paths land in the configured renders directory."""
    renders = tmp_path / "renders"
    renderer = MatplotlibRenderer(CanvasConfig(size_px=50, dpi=50), renders_root=renders)
    try:
        named = renderer.save("frame.png")
        stamped = renderer.save()
    finally:
        renderer.close()
    assert named == renders / "frame.png"
    assert named.exists()
    assert stamped.parent == renders
    assert stamped.name.startswith("planeview_")
    assert stamped.suffix == ".png"
    assert stamped.exists()


def test_canvas_save_releases_figure(tmp_path: Path) -> None:
    """Saving closes the pyplot figure but the canvas stays usable."""
    import matplotlib.pyplot as plt

    baseline = len(plt.get_fignums())
    renderer = MatplotlibRenderer(CanvasConfig(size_px=50, dpi=50), renders_root=tmp_path)
    assert len(plt.get_fignums()) == baseline + 1
    renderer.save("first.png")
    assert len(plt.get_fignums()) == baseline

    renderer.draw_point((10, 10))
    assert renderer.patch_count == 1
    assert renderer.save("second.png").exists()
    assert len(plt.get_fignums()) == baseline
