from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "BOX_CONNECT_CONFIG"


@dataclass(frozen=True, slots=True)
class PuzzleConfig:
    # Move events closer than this to the last point are dropped as pointer jitter.
    min_point_spacing: float = 5.0
    # Trailing points of the in-progress path skipped by the self-crossing check.
    self_exemption_window: int = 10
    win_delay_s: float = 0.3
    category_count: int = 3
    line_width: int = 8
    window_size: tuple[int, int] = (960, 540)

    def __post_init__(self) -> None:
        if self.min_point_spacing <= 0:
            raise ValueError("min_point_spacing must be > 0")
        if self.self_exemption_window < 1:
            raise ValueError("self_exemption_window must be >= 1")
        if self.win_delay_s < 0:
            raise ValueError("win_delay_s must be >= 0")
        if self.category_count < 1:
            raise ValueError("category_count must be >= 1")
        if self.line_width < 1:
            raise ValueError("line_width must be >= 1")
        w, h = self.window_size
        if w <= 0 or h <= 0:
            raise ValueError("window_size must be positive")

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_point_spacing": float(self.min_point_spacing),
            "self_exemption_window": int(self.self_exemption_window),
            "win_delay_s": float(self.win_delay_s),
            "category_count": int(self.category_count),
            "line_width": int(self.line_width),
            "window_size": [int(self.window_size[0]), int(self.window_size[1])],
        }

    @classmethod
    def from_dict(cls, data: object) -> "PuzzleConfig":
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        return cls(
            min_point_spacing=_as_positive_float(data.get("min_point_spacing"), defaults.min_point_spacing),
            self_exemption_window=max(
                1, _as_int(data.get("self_exemption_window"), defaults.self_exemption_window)
            ),
            win_delay_s=max(0.0, _as_float(data.get("win_delay_s"), defaults.win_delay_s)),
            category_count=max(1, _as_int(data.get("category_count"), defaults.category_count)),
            line_width=max(1, _as_int(data.get("line_width"), defaults.line_width)),
            window_size=_as_size(data.get("window_size"), defaults.window_size),
        )


def default_config_path() -> Path | None:
    explicit = os.environ.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()
    return None


def load_config(path: Path | None = None) -> PuzzleConfig:
    """Load tunables from a JSON file; unreadable files fall back to defaults."""

    if path is None:
        path = default_config_path()
    if path is None:
        return PuzzleConfig()
    if not path.exists():
        logger.warning("config file %s not found; using defaults", path)
        return PuzzleConfig()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("failed to read config %s: %s; using defaults", path, e)
        return PuzzleConfig()
    config = PuzzleConfig.from_dict(payload)
    logger.debug("loaded config from %s: %s", path, config)
    return config


def _as_float(value: object, default: float) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _as_positive_float(value: object, default: float) -> float:
    parsed = _as_float(value, default)
    return parsed if parsed > 0 else default


def _as_int(value: object, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _as_size(value: object, default: tuple[int, int]) -> tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return default
    w = _as_int(value[0], 0)
    h = _as_int(value[1], 0)
    if w <= 0 or h <= 0:
        return default
    return (w, h)
