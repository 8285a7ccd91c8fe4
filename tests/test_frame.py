# tests/test_frame.py
"""Tests for basis frame construction."""

from __future__ import annotations

import numpy as np
import pytest

from planeview.core.geometry.frame import BasisFrame, from_basis, make_frame
from planeview.core.geometry.vectors import cross, dot, norm
from planeview.errors import DegenerateFrameError


def test_frame_fields(xy_frame: BasisFrame) -> None:
    """origin, u, v and normal follow from the three vertices."""
    assert np.allclose(xy_frame.origin, [0.0, 0.0, 0.0])
    assert np.allclose(xy_frame.u, [1.0, 0.0, 0.0])
    assert np.allclose(xy_frame.v, [0.0, 1.0, 0.0])
    assert np.allclose(xy_frame.normal, [0.0, 0.0, 1.0])


def test_normal_is_unit_and_right_handed(skewed_frame: BasisFrame) -> None:
    """normal has unit length, is orthogonal to u and v and follows u x v."""
    n = skewed_frame.normal
    assert norm(n) == pytest.approx(1.0)
    assert dot(n, skewed_frame.u) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, skewed_frame.v) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, cross(skewed_frame.u, skewed_frame.v)) > 0


def test_swapping_vertices_flips_normal() -> None:
    """Reversing the winding reverses the normal."""
    f1 = make_frame((0, 0, 0), (1, 0, 0), (0, 1, 0))
    f2 = make_frame((0, 0, 0), (0, 1, 0), (1, 0, 0))
    assert np.allclose(f1.normal, -f2.normal)


def test_collinear_vertices_raise() -> None:
    """A zero-area reference triangle never yields a frame."""
    with pytest.raises(DegenerateFrameError, match="degenerate"):
        make_frame((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0))


def test_coincident_vertices_raise() -> None:
    """Repeated vertices are degenerate too."""
    with pytest.raises(DegenerateFrameError):
        make_frame((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 2.0, 0.0))


def test_degenerate_is_value_error() -> None:
    """DegenerateFrameError can be caught as ValueError."""
    with pytest.raises(ValueError):
        make_frame((0, 0, 0), (0, 0, 1), (0, 0, 2))


def test_frame_arrays_are_read_only(xy_frame: BasisFrame) -> None:
    """Stored vectors cannot be mutated in place."""
    with pytest.raises(ValueError):
        xy_frame.u[0] = 5.0


def test_frame_is_frozen(xy_frame: BasisFrame) -> None:
    """Attributes cannot be reassigned."""
    with pytest.raises(Exception):  # FrozenInstanceError
        xy_frame.origin = np.zeros(3)  # type: ignore[misc]


def test_frame_copies_inputs() -> None:
    """Constructing from caller arrays does not lock the caller's arrays."""
    origin = np.zeros(3)
    frame = BasisFrame(
        origin=origin,
        u=np.array([1.0, 0.0, 0.0]),
        v=np.array([0.0, 1.0, 0.0]),
        normal=np.array([0.0, 0.0, 1.0]),
    )
    origin[0] = 1.0
    assert frame.origin[0] == 0.0


def test_frame_rejects_bad_shape() -> None:
    """Vectors must have three components."""
    with pytest.raises(ValueError, match="u must be length 3"):
        BasisFrame(origin=np.zeros(3), u=np.zeros(2), v=np.zeros(3), normal=np.zeros(3))


def test_vertices_and_point_at(skewed_frame: BasisFrame) -> None:
    """vertices reproduces A, B, C; point_at is the affine combination."""
    a, b, c = skewed_frame.vertices
    assert np.allclose(a, [1.0, -2.0, 0.5])
    assert np.allclose(b, [3.0, -1.0, 2.5])
    assert np.allclose(c, [0.5, 1.0, 1.0])
    assert np.allclose(skewed_frame.point_at(1.0, 0.0), b)
    assert np.allclose(from_basis(skewed_frame, (0.0, 1.0)), c)


def test_area() -> None:
    """Area is half the parallelogram spanned by u and v."""
    frame = make_frame((0, 0, 0), (2, 0, 0), (0, 3, 0))
    assert frame.area == pytest.approx(3.0)
