"""Centralized configuration for the grid engine, sourced from environment."""

from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from gridpack.core.models import OverflowPolicy
from gridpack.runtime.errors import RECOVERABLE_CONFIG_ERRORS, log_recoverable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GridpackConfig:
    log_level: str
    log_format: str
    log_file_path: str | None
    overflow_policy: OverflowPolicy
    snap_candidate_limit: int


_CONFIG: ContextVar[GridpackConfig | None] = ContextVar("gridpack_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except RECOVERABLE_CONFIG_ERRORS:
            log_recoverable(logger, f"config_int_invalid name={name}")
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return "text"
    return value


def _normalize_overflow_policy(raw: str) -> OverflowPolicy:
    value = str(raw).strip().upper()
    try:
        return OverflowPolicy(value)
    except RECOVERABLE_CONFIG_ERRORS:
        log_recoverable(logger, f"config_overflow_policy_invalid value={raw!r}")
        return OverflowPolicy.DROP


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with gridpack-prefixed override."""
    value = _raw("GRIDPACK_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> GridpackConfig:
    log_file_path = _text("GRIDPACK_LOG_FILE", "", env=env)
    return GridpackConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("GRIDPACK_LOG_FORMAT", "text", env=env)),
        log_file_path=log_file_path or None,
        overflow_policy=_normalize_overflow_policy(
            _text("GRIDPACK_OVERFLOW_POLICY", OverflowPolicy.DROP.value, env=env)
        ),
        snap_candidate_limit=_int("GRIDPACK_SNAP_CANDIDATE_LIMIT", 0, minimum=0, env=env),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> GridpackConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: GridpackConfig) -> GridpackConfig:
    _CONFIG.set(config)
    return config


def get_config() -> GridpackConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "GridpackConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
