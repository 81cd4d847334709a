"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from azdoprovider.errors import ConfigError
from azdoprovider.models.config import (
    MAX_WORK_FACTOR,
    MIN_WORK_FACTOR,
    LogConfig,
    MemoConfig,
    ProviderConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"AZDO_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    raw = _env(key, str(default))
    try:
        val = int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid integer for AZDO_{key}: {raw!r}") from exc
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> ProviderConfig:
    """Load configuration from AZDO_* environment variables."""
    return ProviderConfig(
        org_service_url=_env("ORG_SERVICE_URL", ""),
        memo=MemoConfig(
            work_factor=_env_int(
                "MEMO_WORK_FACTOR",
                MIN_WORK_FACTOR,
                min_val=MIN_WORK_FACTOR,
                max_val=MAX_WORK_FACTOR,
            ),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
