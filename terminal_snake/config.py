"""
Game configuration.

Compiled-in defaults that can be overridden through environment variables
(or a .env file) and then through command-line flags in main.py.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.constants import AXIS_DELTAS, SCREEN

# Defaults
DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 32
DEFAULT_TICK_MS = 100
DEFAULT_RESTART_DELAY_MS = 2000

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS
    restart_on_death: bool = False
    restart_delay_ms: int = DEFAULT_RESTART_DELAY_MS
    axes: str = SCREEN
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board size must be positive, got {self.width}x{self.height}")
        if self.tick_ms < 0 or self.restart_delay_ms < 0:
            raise ValueError("Tick interval and restart delay cannot be negative")
        if self.axes not in AXIS_DELTAS:
            raise ValueError(
                f"Unknown axis convention '{self.axes}'. Use one of: {', '.join(sorted(AXIS_DELTAS))}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}'. Use one of: {', '.join(sorted(LOG_LEVELS))}"
            )

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    @property
    def restart_delay_seconds(self) -> float:
        return self.restart_delay_ms / 1000

    def with_overrides(self, **overrides) -> "GameConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


def _bool_env(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got '{raw}'")


def _choice_env(env: Mapping[str, str], name: str, default: str, choices, upper: bool = False) -> str:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().upper() if upper else raw.strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(sorted(choices))}, got '{raw}'")
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from the environment.

    Args:
        env: mapping to read instead of os.environ (a .env file is only
             loaded when reading the real environment)

    Raises:
        ValueError: if a variable cannot be parsed or is out of range
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return GameConfig(
        width=_int_env(env, "SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_int_env(env, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
        tick_ms=_int_env(env, "SNAKE_TICK_MS", DEFAULT_TICK_MS),
        restart_on_death=_bool_env(env, "SNAKE_RESTART", False),
        restart_delay_ms=_int_env(env, "SNAKE_RESTART_DELAY_MS", DEFAULT_RESTART_DELAY_MS),
        axes=_choice_env(env, "SNAKE_AXES", SCREEN, AXIS_DELTAS),
        log_level=_choice_env(env, "SNAKE_LOG_LEVEL", "WARNING", LOG_LEVELS, upper=True),
        log_file=env.get("SNAKE_LOG_FILE") or None,
    )
