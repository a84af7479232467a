"""Configuration loading from defaults, environment variables and overrides."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from . import constants
from .errors import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of the simulation. Distances in pixels, speeds per tick."""
    viewport_width: float = constants.VIEWPORT_WIDTH
    viewport_height: float = constants.VIEWPORT_HEIGHT
    gap_height: float = constants.PIPE_GAP
    gravity: float = constants.GRAVITY
    jump_impulse: float = constants.JUMP_IMPULSE
    pipe_speed: float = constants.PIPE_SPEED
    bird_radius: float = constants.BIRD_RADIUS
    pipe_width: float = constants.PIPE_WIDTH
    tick_interval_seconds: float = constants.TICK_INTERVAL
    spawn_interval_seconds: float = constants.SPAWN_INTERVAL
    bird_x: float = constants.BIRD_X
    max_fall_velocity: Optional[float] = constants.MAX_FALL_VELOCITY
    score_once_per_pipe: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")
        for name in ("viewport_width", "viewport_height", "pipe_width",
                     "tick_interval_seconds", "spawn_interval_seconds"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("gap_height", "bird_radius", "pipe_speed"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.max_fall_velocity is not None and self.max_fall_velocity <= 0:
            raise ConfigError(f"max_fall_velocity must be positive, got {self.max_fall_velocity!r}")

    @property
    def half_height(self) -> float:
        return self.viewport_height / 2


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_optional(cast):
    def parse(raw: str):
        if raw.strip().lower() in ("", "none"):
            return None
        return cast(raw)
    return parse


_PARSERS = {
    "max_fall_velocity": _parse_optional(float),
    "score_once_per_pipe": _parse_bool,
    "seed": _parse_optional(int),
}


def env_var_name(field_name: str) -> str:
    return f"{constants.ENV_PREFIX}{field_name.upper()}"


def load_config(env: Optional[Dict[str, str]] = None, **overrides: Any) -> GameConfig:
    """
    Build a GameConfig. Precedence: overrides > environment > defaults.

    When `env` is None the process environment is used, after loading a
    `.env` file if one is present. Overrides whose value is None are ignored
    so argparse namespaces can be passed straight through.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    known = {f.name for f in fields(GameConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")

    values: Dict[str, Any] = {}
    for name in known:
        raw = env.get(env_var_name(name))
        if raw is None:
            continue
        parse = _PARSERS.get(name, float)
        try:
            values[name] = parse(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_var_name(name)}: {raw!r}") from e

    values.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**values)
