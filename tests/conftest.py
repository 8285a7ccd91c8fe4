# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

if TYPE_CHECKING:
    from planeview.config import Settings
    from planeview.core.geometry.frame import BasisFrame


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer PLANEVIEW_* overrides out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("PLANEVIEW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def xy_frame() -> BasisFrame:
    """Unit right triangle in the z=0 plane, normal +z."""
    from planeview.core.geometry.frame import make_frame

    return make_frame((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))


@pytest.fixture
def skewed_frame() -> BasisFrame:
    """Oblique, non-unit, tilted frame away from the origin."""
    from planeview.core.geometry.frame import make_frame

    return make_frame((1.0, -2.0, 0.5), (3.0, -1.0, 2.5), (0.5, 1.0, 1.0))


@pytest.fixture
def mock_renderer() -> MagicMock:
    """Renderer double recording every draw call."""
    from planeview.render.protocols import RendererProtocol

    return MagicMock(spec=RendererProtocol)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Default settings with temporary directories."""
    from planeview.config import (
        CanvasConfig,
        PathsConfig,
        ScreenConfig,
        Settings,
        ToleranceConfig,
    )

    paths = PathsConfig(
        data_root=tmp_path,
        renders_root=tmp_path / "renders",
        logs_root=tmp_path / "logs",
    )
    return Settings(
        paths=paths,
        tolerance=ToleranceConfig(),
        screen=ScreenConfig(),
        canvas=CanvasConfig(),
    )


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(1234)
