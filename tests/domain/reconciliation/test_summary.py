from __future__ import annotations

import pytest

from gamerecon.domain.model import Region
from gamerecon.domain.reconciliation import (
    SummaryCounts,
    empty_regions,
    filter_regions,
    partition,
    summarize,
)


def test_summarize_empty_regions() -> None:
    summary = summarize(empty_regions())

    assert summary == SummaryCounts()
    assert summary.total == 0


@pytest.mark.parametrize("raw_filter", ["", "g", "g1", "g1,g6", "zzz", "1,2,3"])
def test_counts_always_match_region_lengths(raw_filter: str) -> None:
    regions = filter_regions(
        partition(
            {"g1": "", "g2": "", "g3": "", "g12": ""},
            {"g1": "", "g2": "", "g6": ""},
            {"g1": "", "g3": "", "g8": "", "g23": ""},
        ),
        raw_filter,
    )

    summary = summarize(regions)

    for region in Region:
        assert summary.count(region) == len(regions[region])
    assert summary.total == sum(len(entries) for entries in regions.values())
    assert summary.by_region() == {region: len(entries) for region, entries in regions.items()}


def test_count_attributes_mirror_regions() -> None:
    summary = summarize(partition({"a": ""}, {"a": "", "b": ""}, {"c": ""}))

    assert summary.cms_and_content_hub == 1
    assert summary.content_hub_only == 1
    assert summary.upam_only == 1
    assert summary.total == 3
