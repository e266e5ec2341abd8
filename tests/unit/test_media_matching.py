"""Unit tests for media range matching, ordering and rendering."""

import pytest

from acceptnorm_mcp.utils.media import (
    EntryList,
    MediaTypeEntry,
    media_type_matches,
    render_entries,
    sort_entries,
)
from acceptnorm_mcp.utils.media.matching import type_wildcard


@pytest.mark.parametrize(
    "pattern,media_type,expected",
    [
        ("*/*", "text/html", True),
        ("*/*", "anything", True),
        ("text/*", "text/html", True),
        ("text/*", "image/png", False),
        ("text/*", "texts/html", False),
        ("text/html", "text/html", True),
        ("text/html", "text/plain", False),
        ("*/html", "text/html", False),
        ("text", "text", True),
        ("text/*", "text", False),
    ],
)
def test_media_type_matches(pattern, media_type, expected):
    assert media_type_matches(pattern, media_type) is expected


def test_type_wildcard():
    assert type_wildcard("text/html") == "text/*"
    assert type_wildcard("text") == ""


def _list(*pairs):
    entries = EntryList()
    for media_type, quality in pairs:
        entries.append(MediaTypeEntry(media_type, quality))
    return entries


def test_sort_by_quality_desc_then_type_asc():
    entries = sort_entries(
        _list(
            ("text/plain", 0.5),
            ("image/png", 1.0),
            ("application/json", 0.5),
            ("*/*", 0.1),
            ("audio/ogg", 1.0),
        )
    )
    assert [e.type for e in entries] == [
        "audio/ogg",
        "image/png",
        "application/json",
        "text/plain",
        "*/*",
    ]


def test_render_omits_full_quality_and_rounds_to_one_digit():
    entries = _list(("text/html", 1.0), ("text/plain", 0.333), ("*/*", 0.0))
    assert render_entries(entries) == "text/html, text/plain;q=0.3, */*;q=0.0"


def test_render_empty_list():
    assert render_entries(EntryList()) == ""


def test_entry_list_refuses_appends_when_full():
    entries = EntryList(1)
    assert entries.append(MediaTypeEntry("a/a"))
    assert not entries.append(MediaTypeEntry("b/b"))
    assert len(entries) == 1
    assert entries.full


def test_entry_list_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        EntryList(0)
