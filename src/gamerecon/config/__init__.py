"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, parse_log_level
from .errors import ConfigurationError
from .ingest import IngestConfig, get_ingest_config
from .logging import configure_logging
from .reconcile import ReconcileConfig, get_reconcile_config

__all__ = [
    "ConfigurationError",
    "IngestConfig",
    "ReconcileConfig",
    "configure_logging",
    "get_ingest_config",
    "get_reconcile_config",
    "optional_env_var",
    "parse_log_level",
]
