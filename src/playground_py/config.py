"""Configuration for playground-py."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_TRUTHY = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class PlaygroundConfig:
    """Configuration for a playground editing session.

    Environment variables:
        PLAYGROUND_CANVAS_WIDTH: Canvas width in pixels (default 800)
        PLAYGROUND_CANVAS_HEIGHT: Canvas height in pixels (default 600)
        PLAYGROUND_CONTAIN_DRAG: Keep dragged elements inside the canvas (default true)
        PLAYGROUND_DEBUG: Enable debug level logging (default false)
        PLAYGROUND_JSON_LOGS: Output logs as JSON (default false)
    """

    canvas_width: float = field(default_factory=lambda: float(os.getenv("PLAYGROUND_CANVAS_WIDTH", "800")))
    canvas_height: float = field(default_factory=lambda: float(os.getenv("PLAYGROUND_CANVAS_HEIGHT", "600")))
    canvas_name: str = "Untitled Canvas"
    contain_drag: bool = field(default_factory=lambda: _env_bool("PLAYGROUND_CONTAIN_DRAG", True))

    # Logging
    debug: bool = field(default_factory=lambda: _env_bool("PLAYGROUND_DEBUG", False))
    json_logs: bool = field(default_factory=lambda: _env_bool("PLAYGROUND_JSON_LOGS", False))
