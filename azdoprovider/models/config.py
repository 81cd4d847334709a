"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31


@dataclass
class MemoConfig:
    """Secret memo hashing configuration.

    The memo only detects change, so the bcrypt cost stays at the minimum.
    """

    work_factor: int = MIN_WORK_FACTOR


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class ProviderConfig:
    """Top-level provider configuration."""

    org_service_url: str = ""
    memo: MemoConfig = field(default_factory=MemoConfig)
    log: LogConfig = field(default_factory=LogConfig)
