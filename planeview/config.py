# planeview/config.py
"""Centralized configuration for the planeview debug visualizer.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final, Tuple

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_int(key: str, default: int) -> int:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    return int(value) if value is not None else default


def _env_float(key: str, default: float) -> float:
    """Resolve float from environment variable with fallback."""
    value = os.getenv(key)
    return float(value) if value is not None else default


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean flag ("1", "true", "yes", "on") from environment."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ============================================================================
# NUMERICAL TOLERANCES
# ============================================================================
# Absolute thresholds; they catch points genuinely off the plane, not rounding.
DEGENERACY_TOL: Final[float] = 1e-20
COPLANARITY_TOL: Final[float] = 1e-20
RELATIVE_TOL_DEFAULT: Final[float] = 1e-9

# ============================================================================
# SCREEN & CANVAS CONSTANTS
# ============================================================================

SCREEN_OFFSET_PX: Final[Tuple[float, float]] = (100.0, 100.0)
SCREEN_SCALE_PX: Final[float] = 400.0

CANVAS_SIZE_PX: Final[int] = 1600
CANVAS_DPI: Final[int] = 100
POINT_SIZE_PX: Final[float] = 4.0
TRIANGLE_ALPHA: Final[float] = 0.5

REFERENCE_COLOR: Final[Tuple[int, int, int]] = (0, 255, 255)
BACKGROUND_COLOR: Final[str] = "black"
POINT_COLOR: Final[str] = "white"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    data_root: Path
    renders_root: Path
    logs_root: Path


@dataclass(frozen=True)
class ToleranceConfig:
    """Thresholds for degeneracy and coplanarity checks."""

    degeneracy: float = DEGENERACY_TOL
    coplanarity: float = COPLANARITY_TOL
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate tolerances."""
        if self.degeneracy < 0:
            raise ValueError(f"degeneracy tolerance must be >= 0, got {self.degeneracy}")
        if self.coplanarity < 0:
            raise ValueError(f"coplanarity tolerance must be >= 0, got {self.coplanarity}")


@dataclass(frozen=True)
class ScreenConfig:
    """Affine basis -> pixel mapping."""

    offset_px: Tuple[float, float] = SCREEN_OFFSET_PX
    scale_px: float = SCREEN_SCALE_PX

    def __post_init__(self) -> None:
        """Validate scale."""
        if self.scale_px == 0:
            raise ValueError("scale_px must be non-zero")


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing surface configuration."""

    size_px: int = CANVAS_SIZE_PX
    dpi: int = CANVAS_DPI
    point_size_px: float = POINT_SIZE_PX
    alpha: float = TRIANGLE_ALPHA
    background_color: str = BACKGROUND_COLOR
    point_color: str = POINT_COLOR
    reference_color: Tuple[int, int, int] = REFERENCE_COLOR

    def __post_init__(self) -> None:
        """Validate canvas parameters."""
        if self.size_px <= 0:
            raise ValueError(f"size_px must be positive, got {self.size_px}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be within [0, 1], got {self.alpha}")


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    tolerance: ToleranceConfig
    screen: ScreenConfig
    canvas: CanvasConfig
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = False


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        PLANEVIEW_DATA_ROOT: Base data directory
        PLANEVIEW_RENDERS_ROOT: Directory for saved renders
        PLANEVIEW_LOGS_ROOT: Logs directory
        PLANEVIEW_DEGENERACY_TOL: Frame/pivot degeneracy threshold
        PLANEVIEW_COPLANARITY_TOL: Coplanarity warning threshold
        PLANEVIEW_STRICT: Raise instead of warn on coplanarity violations
        PLANEVIEW_SCREEN_SCALE: Pixels per basis unit
        PLANEVIEW_CANVAS_SIZE: Canvas side in pixels
        PLANEVIEW_LOG_LEVEL: Logging level
        PLANEVIEW_LOG_TO_FILE: Also write logs to PLANEVIEW_LOGS_ROOT
    """
    data_root = _env_path("PLANEVIEW_DATA_ROOT", BASE_DIR / "data")
    paths = PathsConfig(
        data_root=data_root,
        renders_root=_env_path("PLANEVIEW_RENDERS_ROOT", data_root / "renders"),
        logs_root=_env_path("PLANEVIEW_LOGS_ROOT", data_root / "logs"),
    )

    tolerance = ToleranceConfig(
        degeneracy=_env_float("PLANEVIEW_DEGENERACY_TOL", DEGENERACY_TOL),
        coplanarity=_env_float("PLANEVIEW_COPLANARITY_TOL", COPLANARITY_TOL),
        strict=_env_bool("PLANEVIEW_STRICT", False),
    )
    screen = ScreenConfig(scale_px=_env_float("PLANEVIEW_SCREEN_SCALE", SCREEN_SCALE_PX))
    canvas = CanvasConfig(size_px=_env_int("PLANEVIEW_CANVAS_SIZE", CANVAS_SIZE_PX))

    return Settings(
        paths=paths,
        tolerance=tolerance,
        screen=screen,
        canvas=canvas,
        log_level=LogLevel(os.getenv("PLANEVIEW_LOG_LEVEL", LogLevel.INFO.value).upper()),
        log_to_file=_env_bool("PLANEVIEW_LOG_TO_FILE", False),
    )


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "PathsConfig",
    "ToleranceConfig",
    "ScreenConfig",
    "CanvasConfig",
    # Enums
    "LogLevel",
    # Constants
    "BASE_DIR",
    "DEGENERACY_TOL",
    "COPLANARITY_TOL",
    "RELATIVE_TOL_DEFAULT",
    "SCREEN_OFFSET_PX",
    "SCREEN_SCALE_PX",
    "CANVAS_SIZE_PX",
    "CANVAS_DPI",
    "POINT_SIZE_PX",
    "TRIANGLE_ALPHA",
    "REFERENCE_COLOR",
    "BACKGROUND_COLOR",
    "POINT_COLOR",
]
