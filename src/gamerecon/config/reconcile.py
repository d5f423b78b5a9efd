"""Reconciliation defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import optional_env_var, parse_log_level

FILTER_ENV_VAR = "GAMERECON_FILTER"
LOG_LEVEL_ENV_VAR = "GAMERECON_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    default_filter: str = ""
    log_level: int = logging.INFO


def get_reconcile_config() -> ReconcileConfig:
    level = optional_env_var(LOG_LEVEL_ENV_VAR)
    return ReconcileConfig(
        default_filter=optional_env_var(FILTER_ENV_VAR) or "",
        log_level=parse_log_level(level) if level is not None else logging.INFO,
    )
