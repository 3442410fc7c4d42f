"""Process-wide render settings shared by the camera and renderer."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Viewport size in pixels and vertical field of view in degrees."""

    width: int = 800
    height: int = 600
    fov: float = 90.0


_lock = threading.Lock()
_config = RenderConfig()


def get_config() -> RenderConfig:
    """Return a snapshot of the current render configuration."""
    with _lock:
        return _config


def update_config(width: int, height: int, fov: float) -> None:
    """Replace the current render configuration."""
    if width < 0 or height < 0:
        raise ValueError(f"viewport size must not be negative: {width}x{height}")
    global _config
    with _lock:
        _config = RenderConfig(int(width), int(height), float(fov))