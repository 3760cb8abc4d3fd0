"""
config.py
=========
Central configuration module for Manor Mystery.

Game-balance constants live here so they can be adjusted without touching
the data structures or the controller. Values can be overridden through
environment variables (or a ``.env`` file loaded by the entry points).

Usage:
    from config import GAME_CONFIG, GameConfig, load_game_config, log_level
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


# ---------------------------------------------------------------------------
# Game-balance parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Top-level rules of a single investigation.

    Attributes:
        accusation_threshold: Minimum number of collected clues that must point
                              at the accused for the case to count as solved.
        bucket_count:         Number of chains in the Suspect Directory. Fixed
                              for the lifetime of the table.
        stop_at_leaf:         When True, walking into a room with no exits ends
                              the exploration and opens the judgment phase.
                              When False a dead end is only reported.
    """
    accusation_threshold: int  = 2
    bucket_count:         int  = 10
    stop_at_leaf:         bool = False


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

ENV_THRESHOLD    = "MANOR_ACCUSATION_THRESHOLD"
ENV_BUCKET_COUNT = "MANOR_BUCKET_COUNT"
ENV_STOP_AT_LEAF = "MANOR_STOP_AT_LEAF"
ENV_LOG_LEVEL    = "MANOR_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY  = {"0", "false", "no", "off", ""}


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_game_config(environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from environment variables.

    Unset variables keep the dataclass defaults.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        A new frozen GameConfig.

    Raises:
        ValueError: If a variable is set but cannot be parsed, or a count is
                    below 1. The message names the offending variable.
    """
    env      = os.environ if environ is None else environ
    defaults = GameConfig()
    return GameConfig(
        accusation_threshold=_positive_int(env, ENV_THRESHOLD, defaults.accusation_threshold),
        bucket_count=_positive_int(env, ENV_BUCKET_COUNT, defaults.bucket_count),
        stop_at_leaf=_flag(env, ENV_STOP_AT_LEAF, defaults.stop_at_leaf),
    )


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Return the numeric log level from ``MANOR_LOG_LEVEL`` (WARNING if unset).

    Raises:
        ValueError: If the variable is not one of the standard level names.
    """
    env  = os.environ if environ is None else environ
    name = env.get(ENV_LOG_LEVEL, "").strip().upper() or "WARNING"
    if name not in _LOG_LEVELS:
        raise ValueError(
            f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}, got {name!r}"
        )
    return logging.getLevelName(name)


# ---------------------------------------------------------------------------
# Singleton instance (import-ready)
# ---------------------------------------------------------------------------

GAME_CONFIG = GameConfig()
