"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name``, or ``None`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_log_level(value: str) -> int:
    """Translate a level name (``debug``, ``INFO``...) or number into a logging level."""

    normalized = value.strip()
    if normalized.isdigit():
        return int(normalized)
    level = logging.getLevelNamesMapping().get(normalized.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level
