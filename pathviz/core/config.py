#!/usr/bin/env python3
# pathviz/core/config.py
"""
Run configuration.

RunConfig is handed to every search and read live: step_delay at each
suspension, directions at each expansion. Toggling `diagonal` or changing
`step_delay` mid-run therefore applies from the next step on.

load_config() resolves defaults -> environment -> --key=value argv flags:
    PATHVIZ_STEP_DELAY / --delay=SECONDS
    PATHVIZ_DIAGONAL   / --diagonal
    PATHVIZ_GRID       / --grid=WxH
    PATHVIZ_ALGO       / --algo=NAME
    PATHVIZ_LOG_LEVEL  / --log-level=LEVEL
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pathviz.core.directions import directions_for
from pathviz.core.types import Direction

DEFAULT_STEP_DELAY = 0.01
DEFAULT_GRID = (48, 32)
DEFAULT_ALGO = "Depth First Search"
MAX_STEP_DELAY = 2.0

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


@dataclass
class RunConfig:
    step_delay: float = DEFAULT_STEP_DELAY
    diagonal: bool = False

    @property
    def directions(self) -> Tuple[Direction, ...]:
        return directions_for(self.diagonal)

    def bump_delay(self, factor: float) -> float:
        """Scale the delay (speed buttons); clamped to [0, MAX_STEP_DELAY]."""
        if self.step_delay <= 0 and factor > 1:
            self.step_delay = 0.001
        else:
            self.step_delay = min(MAX_STEP_DELAY, max(0.0, self.step_delay * factor))
        return self.step_delay


@dataclass
class AppConfig:
    run: RunConfig = field(default_factory=RunConfig)
    grid_width: int = DEFAULT_GRID[0]
    grid_height: int = DEFAULT_GRID[1]
    algorithm: str = DEFAULT_ALGO
    log_level: str = "INFO"


def _parse_delay(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"step delay must be a number of seconds, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"step delay must be >= 0, got {value}")
    return min(value, MAX_STEP_DELAY)


def _parse_bool(raw: str) -> bool:
    low = raw.strip().lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError(f"expected a boolean, got {raw!r}")


def _parse_grid(raw: str) -> Tuple[int, int]:
    parts = raw.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"grid size must look like WxH, got {raw!r}")
    try:
        w, h = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"grid size must look like WxH, got {raw!r}") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"grid size must be positive, got {w}x{h}")
    return w, h


def _argv_flags(argv: Sequence[str]) -> Dict[str, Optional[str]]:
    flags: Dict[str, Optional[str]] = {}
    for arg in argv:
        if not arg.startswith("--"):
            continue
        key, sep, value = arg[2:].partition("=")
        flags[key] = value if sep else None
    return flags


def load_config(argv: Optional[List[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    settings: Dict[str, str] = {}
    for key, env_name in (("delay", "PATHVIZ_STEP_DELAY"),
                          ("diagonal", "PATHVIZ_DIAGONAL"),
                          ("grid", "PATHVIZ_GRID"),
                          ("algo", "PATHVIZ_ALGO"),
                          ("log-level", "PATHVIZ_LOG_LEVEL")):
        if env_name in environ:
            settings[key] = environ[env_name]
    for key, value in _argv_flags(argv).items():
        # bare --diagonal switches it on
        settings[key] = "1" if value is None and key == "diagonal" else (value or "")

    cfg = AppConfig()
    if "delay" in settings:
        cfg.run.step_delay = _parse_delay(settings["delay"])
    if "diagonal" in settings:
        cfg.run.diagonal = _parse_bool(settings["diagonal"])
    if "grid" in settings:
        cfg.grid_width, cfg.grid_height = _parse_grid(settings["grid"])
    if settings.get("algo"):
        cfg.algorithm = settings["algo"]
    if settings.get("log-level"):
        cfg.log_level = settings["log-level"].upper()
    return cfg
