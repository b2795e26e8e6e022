from __future__ import annotations

from gridpack.core.models import OverflowPolicy
from gridpack.runtime.config import (
    get_config,
    initialize_config,
    load_config,
    resolve_log_level_name,
    set_config,
)


def test_load_config_defaults() -> None:
    cfg = load_config(env={})
    assert cfg.log_level == "INFO"
    assert cfg.log_format == "text"
    assert cfg.log_file_path is None
    assert cfg.overflow_policy is OverflowPolicy.DROP
    assert cfg.snap_candidate_limit == 0


def test_load_config_parses_values() -> None:
    cfg = load_config(
        env={
            "GRIDPACK_LOG_LEVEL": "debug",
            "GRIDPACK_LOG_FORMAT": "JSON",
            "GRIDPACK_LOG_FILE": "logs/gridpack.jsonl",
            "GRIDPACK_OVERFLOW_POLICY": " keep ",
            "GRIDPACK_SNAP_CANDIDATE_LIMIT": "12",
        }
    )
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"
    assert cfg.log_file_path == "logs/gridpack.jsonl"
    assert cfg.overflow_policy is OverflowPolicy.KEEP
    assert cfg.snap_candidate_limit == 12


def test_load_config_falls_back_on_invalid_values() -> None:
    cfg = load_config(
        env={
            "GRIDPACK_LOG_FORMAT": "xml",
            "GRIDPACK_OVERFLOW_POLICY": "grow",
            "GRIDPACK_SNAP_CANDIDATE_LIMIT": "many",
        }
    )
    assert cfg.log_format == "text"
    assert cfg.overflow_policy is OverflowPolicy.DROP
    assert cfg.snap_candidate_limit == 0


def test_snap_candidate_limit_is_clamped() -> None:
    assert load_config(env={"GRIDPACK_SNAP_CANDIDATE_LIMIT": "-4"}).snap_candidate_limit == 0


def test_resolve_log_level_prefers_gridpack_prefix() -> None:
    env = {"LOG_LEVEL": "warning", "GRIDPACK_LOG_LEVEL": "error"}
    assert resolve_log_level_name(env=env) == "ERROR"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"


def test_initialize_and_set_config_share_context(monkeypatch) -> None:
    monkeypatch.setenv("GRIDPACK_OVERFLOW_POLICY", "keep")
    cfg = initialize_config()
    assert get_config() is cfg
    assert cfg.overflow_policy is OverflowPolicy.KEEP

    replacement = load_config(env={})
    set_config(replacement)
    assert get_config() is replacement
