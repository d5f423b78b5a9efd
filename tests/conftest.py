from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gamerecon.domain.model import CanonicalRecord, SourceName

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

Document = dict[str, object]

DATA_DIR = Path(__file__).resolve().parent / "data"
FIXTURE_FILES: dict[SourceName, str] = {
    SourceName.CMS: "prod-cms.json",
    SourceName.CONTENT_HUB: "prod-iwg-gamelist.json",
    SourceName.UPAM: "prod-upam.json",
}


def _load_fixture(name: str) -> Document:
    return json.loads((DATA_DIR / name).read_text())


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def fixture_paths() -> dict[SourceName, Path]:
    return {source: DATA_DIR / name for source, name in FIXTURE_FILES.items()}


@pytest.fixture
def cms_document() -> Document:
    return _load_fixture(FIXTURE_FILES[SourceName.CMS])


@pytest.fixture
def content_hub_document() -> Document:
    return _load_fixture(FIXTURE_FILES[SourceName.CONTENT_HUB])


@pytest.fixture
def upam_document() -> Document:
    return _load_fixture(FIXTURE_FILES[SourceName.UPAM])


@pytest.fixture
def make_records() -> Callable[[Iterable[str]], tuple[CanonicalRecord, ...]]:
    """Build active records named after their ids."""

    def factory(ids: Iterable[str]) -> tuple[CanonicalRecord, ...]:
        return tuple(CanonicalRecord(id=game_id, name=f"Name {game_id}", active=True) for game_id in ids)

    return factory
