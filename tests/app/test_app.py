from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from gamerecon.adapters.files import IngestedDocument
from gamerecon.app import build_snapshot, reconcile_files
from gamerecon.domain.model import Region, SourceName

if TYPE_CHECKING:
    from pathlib import Path


def test_reconcile_files_end_to_end(fixture_paths: dict[SourceName, Path]) -> None:
    report = reconcile_files(fixture_paths.values())

    assert report.environment == "PROD"
    assert report.files == ("prod-cms.json", "prod-iwg-gamelist.json", "prod-upam.json")
    assert report.snapshot.loaded_sources == tuple(SourceName)
    assert report.result.summary.total == 7


def test_reconcile_files_with_missing_source(
    fixture_paths: dict[SourceName, Path], caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")

    report = reconcile_files([fixture_paths[SourceName.CMS]], filter_text="game")

    assert {region for region in Region if report.result.entries(region)} == {Region.CMS_ONLY}
    assert report.result.region_ids(Region.CMS_ONLY) == ("game1", "game2", "game3", "game5")
    assert "No document supplied for: Content Hub, UPAM" in caplog.text


def test_reconcile_files_with_nothing_usable(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("WARNING")
    broken = tmp_path / "prod-cms.json"
    broken.write_text("{")

    report = reconcile_files([broken])

    assert report.result.summary.total == 0
    assert report.environment is None
    assert "No recognised source documents were loaded" in caplog.text


def test_later_file_for_same_source_replaces_earlier(
    tmp_path: Path, fixture_paths: dict[SourceName, Path]
) -> None:
    replacement = tmp_path / "stage-upam.json"
    replacement.write_text(
        json.dumps({"data": [{"attributes": {"externalGameId": "game42", "enabled": True}}]})
    )

    report = reconcile_files([fixture_paths[SourceName.UPAM], replacement])

    assert report.environment == "STAGE"
    assert report.result.region_ids(Region.UPAM_ONLY) == ("game42",)


def test_build_snapshot_folds_documents_in_order() -> None:
    documents = [
        IngestedDocument(
            source=SourceName.CMS,
            filename="a-cms.json",
            environment="A",
            document={"results": [{"gameId": "g1"}]},
        ),
        IngestedDocument(
            source=SourceName.CMS,
            filename="b-cms.json",
            environment="B",
            document={"results": [{"gameId": "g2"}]},
        ),
    ]

    snapshot = build_snapshot(documents)

    assert [record.id for record in snapshot.records_for(SourceName.CMS)] == ["g2"]
