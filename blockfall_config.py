
"""Tunables and their validation"""
from typing import Any, Dict, Optional

CONFIG = {
    "GRID_ROWS": 21,        # includes the floor row
    "GRID_COLS": 12,        # includes both side walls
    "FREQUENCY": 3,         # accepted ticks per input-response tick
    "KEYFRAMES": 5,         # input-response ticks per gravity tick
    "MIN_FRAME_MS": 40,     # 1000ms / 25fps
    "CELL_SIZE": 32,
    "FPS": 60,
    "SEED": None,
    "ALT_ROTATE_REVERSE": False,
    "LOG_LEVEL": "INFO",
}


class ConfigError(ValueError):
    pass


def _positive_int(cfg, key):
    v = cfg[key]
    if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
        raise ConfigError(f"{key} must be a positive integer, got {v!r}")


def validate_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge overrides onto the defaults and reject unusable values."""
    cfg = dict(CONFIG)
    if overrides:
        cfg.update(overrides)
    for key in ("GRID_ROWS", "GRID_COLS", "FREQUENCY", "KEYFRAMES"):
        _positive_int(cfg, key)
    if not isinstance(cfg["MIN_FRAME_MS"], (int, float)) or cfg["MIN_FRAME_MS"] < 0:
        raise ConfigError(f"MIN_FRAME_MS must be >= 0, got {cfg['MIN_FRAME_MS']!r}")
    return cfg
