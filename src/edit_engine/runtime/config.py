"""Environment driven settings for the edit engine.

Every option is read from an ``EDIT_ENGINE_``-prefixed environment variable:

``LOG_LEVEL`` -- minimum telelog level (``INFO``)
``LOG_FILE`` -- optional log file path
``LOG_JSON`` / ``LOG_BUFFERED`` / ``LOG_BUFFER_SIZE`` -- telelog output tuning
``DISABLE_CONSOLE`` / ``NO_COLOR`` -- console output switches
``STRATEGY`` -- default application strategy (``sequential``)
``CLUSTER_THRESHOLD`` -- edit count at which ``auto`` picks ``clustered``
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "EDIT_ENGINE_"

STRATEGIES = ("sequential", "clustered", "auto")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class EngineSettings:
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    log_buffered: bool = False
    log_buffer_size: int = 2048
    console_output: bool = True
    colored_output: bool = True
    strategy: str = "sequential"
    cluster_threshold: int = 32

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy '{self.strategy}', expected one of {STRATEGIES}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")
        if self.cluster_threshold < 1:
            raise ValueError("cluster_threshold must be positive")
        if self.log_buffer_size < 1:
            raise ValueError("log_buffer_size must be positive")


def _env(
    environ: Mapping[str, str], name: str, default: Optional[str] = None
) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _env(environ, name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env(environ, name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ
    strategy = (_env(env, "STRATEGY") or "sequential").strip().lower()
    if strategy not in STRATEGIES:
        raise ValueError(
            f"{ENV_PREFIX}STRATEGY must be one of {STRATEGIES}, got {strategy!r}"
        )
    level = (_env(env, "LOG_LEVEL") or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {LOG_LEVELS}")

    return EngineSettings(
        log_level=level,
        log_file=_env(env, "LOG_FILE") or "",
        log_json=_env_flag(env, "LOG_JSON", False),
        log_buffered=_env_flag(env, "LOG_BUFFERED", False),
        log_buffer_size=_env_int(env, "LOG_BUFFER_SIZE", 2048),
        console_output=not _env_flag(env, "DISABLE_CONSOLE", False),
        colored_output=not _env_flag(env, "NO_COLOR", False),
        strategy=strategy,
        cluster_threshold=_env_int(env, "CLUSTER_THRESHOLD", 32),
    )


_SETTINGS: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def override_settings(**changes: object) -> EngineSettings:
    """Replace selected fields of the process-wide settings."""

    global _SETTINGS
    _SETTINGS = replace(get_settings(), **changes)
    return _SETTINGS


def reset_settings() -> None:
    global _SETTINGS
    _SETTINGS = None


__all__ = [
    "ENV_PREFIX",
    "EngineSettings",
    "STRATEGIES",
    "get_settings",
    "load_settings",
    "override_settings",
    "reset_settings",
]
