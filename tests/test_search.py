"""Tests for title and tag filtering."""

import pytest

from craftgallery.models import VideoEntry, default_entries
from craftgallery.search import filter_entries


@pytest.mark.parametrize("query", ["", "   ", "\t"])
def test_blank_query_is_identity(query):
    entries = default_entries()
    assert filter_entries(entries, query) is entries


def test_case_insensitive_title_and_tag_match(paper_crown):
    assert filter_entries([paper_crown], "PAPER") == [paper_crown]
    assert filter_entries([paper_crown], "Kid") == [paper_crown]
    assert filter_entries([paper_crown], "xyz") == []


def test_substring_is_not_anchored(paper_crown):
    assert filter_entries([paper_crown], "per cro") == [paper_crown]
    assert filter_entries([paper_crown], " rown ") == [paper_crown]


def test_description_is_not_searched():
    entry = VideoEntry(title="Jar", video_url="jar.mp4", description="sparkly glitter")
    assert filter_entries([entry], "glitter") == []


def test_order_preserved_and_entries_untouched():
    entries = [
        VideoEntry(title="Snow Slime", video_url="1.mp4", tags=["slime"]),
        VideoEntry(title="Paper Boat", video_url="2.mp4"),
        VideoEntry(title="Glitter", video_url="3.mp4", tags=["SLIME", "glitter"]),
    ]
    before = [e.model_copy(deep=True) for e in entries]
    result = filter_entries(entries, "slime")
    assert [e.video_url for e in result] == ["1.mp4", "3.mp4"]
    assert entries == before
