from __future__ import annotations

import logging

import pytest

from gamerecon.config import (
    ConfigurationError,
    configure_logging,
    get_ingest_config,
    get_reconcile_config,
    optional_env_var,
    parse_log_level,
)
from gamerecon.domain.model import SourceName


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAMERECON_EXAMPLE", "   ")

    assert optional_env_var("GAMERECON_EXAMPLE") is None


def test_optional_env_var_strips(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAMERECON_EXAMPLE", " value ")

    assert optional_env_var("GAMERECON_EXAMPLE") == "value"


def test_reconcile_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GAMERECON_FILTER", raising=False)
    monkeypatch.delenv("GAMERECON_LOG_LEVEL", raising=False)

    config = get_reconcile_config()

    assert config.default_filter == ""
    assert config.log_level == logging.INFO


def test_reconcile_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAMERECON_FILTER", "g1,g8")
    monkeypatch.setenv("GAMERECON_LOG_LEVEL", "debug")

    config = get_reconcile_config()

    assert config.default_filter == "g1,g8"
    assert config.log_level == logging.DEBUG


@pytest.mark.parametrize(("value", "expected"), [("WARNING", 30), ("error", 40), ("15", 15)])
def test_parse_log_level(value: str, expected: int) -> None:
    assert parse_log_level(value) == expected


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        parse_log_level("chatty")


def test_ingest_config_keyword_order() -> None:
    config = get_ingest_config()

    assert config.source_keywords == (
        ("cms", SourceName.CMS),
        ("iwg", SourceName.CONTENT_HUB),
        ("upam", SourceName.UPAM),
    )
    assert config.archive_suffix == ".zip"


def test_configure_logging_defaults_to_environment_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setenv("GAMERECON_LOG_LEVEL", "warning")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging(level=logging.DEBUG, force=True)

    assert [call["level"] for call in calls] == [logging.WARNING, logging.DEBUG]
    assert calls[1]["force"] is True


def test_configure_logging_rejects_invalid_environment_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GAMERECON_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        configure_logging()
