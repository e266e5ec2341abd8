"""Unit tests for the Accept header negotiation strategies.

This module covers canonicalize, filter, best_match, prefer, quality and
accepts, including their empty-input fallbacks and tie-breaking rules.
"""

import pytest

from acceptnorm_mcp.exceptions import UnknownStrategyError
from acceptnorm_mcp.utils.media import (
    AcceptNegotiator,
    NegotiationState,
    accepts,
    best_match,
    canonicalize,
    filter_accept,
    negotiate,
    parse_accept_header,
    prefer,
    quality,
)


# canonicalize


@pytest.mark.parametrize("header", [None, ""])
def test_canonicalize_empty(header):
    assert canonicalize(header) == ""


def test_canonicalize_sorts_and_renders():
    header = "text/plain;q=0.5, application/json, TEXT/HTML;q=0.5"
    assert (
        canonicalize(header)
        == "application/json, text/html;q=0.5, text/plain;q=0.5"
    )


def test_canonicalize_rounds_quality_for_display(browser_accept):
    assert canonicalize(browser_accept) == (
        "application/xhtml+xml, image/avif, image/webp, text/html, "
        "application/xml;q=0.9, */*;q=0.8"
    )
    assert canonicalize("text/html;q=0.333") == "text/html;q=0.3"


def test_canonicalize_renders_negative_zero_as_zero():
    assert canonicalize("e/f;q=-0") == "e/f;q=0.0"
    assert canonicalize("e/f;q=-0.0, a/b;q=0") == "a/b;q=0.0, e/f;q=0.0"


@pytest.mark.parametrize(
    "header",
    [
        "text/html, application/json;q=0.9, */*;q=0.1",
        "image/*;q=0.5, image/png, image/webp;q=0.5, text/html;level=1;q=0.2",
        "a/b;q=0, c/d;q=1.0, e/f;q=0.7",
    ],
)
def test_canonicalize_is_idempotent(header):
    once = canonicalize(header)
    assert canonicalize(once) == once


def test_canonical_output_is_ordered(browser_accept):
    entries = parse_accept_header(canonicalize(browser_accept + ", zz/top;q=0.8"))
    for a, b in zip(entries, list(entries)[1:]):
        assert a.quality >= b.quality
        if a.quality == b.quality:
            assert a.type <= b.type


# filter


def test_filter_keeps_accepted_preferences_with_best_quality():
    header = "text/*;q=0.5, application/json, image/png;q=0"
    assert (
        filter_accept(header, "application/json,text/html,image/png")
        == "application/json, text/html;q=0.5"
    )


def test_filter_uses_highest_matching_quality():
    header = "*/*;q=0.2, text/*;q=0.6, text/html;q=0.4"
    assert filter_accept(header, "text/html") == "text/html;q=0.6"


def test_filter_empty_header_returns_first_preference_verbatim():
    assert filter_accept("", "a/b,c/d") == "a/b"
    assert filter_accept(None, " A/B ,c/d") == "a/b"


def test_filter_without_preferences_canonicalizes():
    assert filter_accept("text/plain;q=0.3, text/html", "") == (
        "text/html, text/plain;q=0.3"
    )
    assert filter_accept("text/plain;q=0.3, text/html", None) == (
        "text/html, text/plain;q=0.3"
    )


def test_filter_falls_back_to_first_preference():
    assert filter_accept("image/png", "text/html,application/json") == "text/html"


def test_filter_blank_preference_items():
    assert filter_accept("text/html", " , ,") == ""
    assert filter_accept("", " , ,") == ""


# best_match


def test_best_match_picks_highest_quality():
    header = "text/html;q=0.8, application/json;q=0.9"
    assert best_match(header, "text/html,application/json") == "application/json"


def test_best_match_ties_go_to_earlier_preference():
    assert best_match("text/*", "text/plain,text/html") == "text/plain"


def test_best_match_without_any_match_returns_first_preference():
    assert best_match("image/png", "text/html,application/json") == "text/html"


def test_best_match_edge_inputs():
    assert best_match("", "A/B,c/d") == "a/b"
    assert best_match("text/html", "") == ""
    assert best_match(None, None) == ""


# prefer


def test_prefer_is_first_match_not_best_match():
    header = "text/html;q=0.1, application/json"
    prefs = "text/html,application/json"
    assert prefer(header, prefs) == "text/html"
    assert best_match(header, prefs) == "application/json"


def test_prefer_skips_zero_quality_matches():
    assert prefer("image/png;q=0, image/*;q=0.5", "image/png,image/jpeg") == "image/png"
    assert prefer("image/png;q=0, image/jpeg", "image/png,image/jpeg") == "image/jpeg"


def test_prefer_returns_original_header_without_match():
    assert prefer("image/png;q=0", "image/png,image/jpeg") == "image/png;q=0"
    assert prefer("Image/PNG", "text/html") == "Image/PNG"


def test_prefer_edge_inputs():
    assert prefer("", "x/y") == ""
    assert prefer("Text/HTML", "") == "Text/HTML"


# quality / accepts


def test_quality_exact_match():
    header = "*/*;q=0.5, text/html;q=0.9"
    assert quality(header, "text/html") == 0.9
    assert quality(header, "TEXT/HTML") == 0.9


def test_quality_falls_back_to_wildcards():
    header = "*/*;q=0.5, text/html;q=0.9"
    assert quality(header, "text/plain") == 0.5
    assert quality("*/*;q=0.1, text/*;q=0.4", "text/plain") == 0.4
    assert quality("text/*;q=0.4, */*;q=0.1", "text/plain") == 0.4
    assert quality("*/*;q=0.3", "text") == 0.3


def test_quality_repeated_wildcards_use_last_occurrence():
    assert quality("text/*;q=0.6, text/*;q=0.2", "text/csv") == 0.2
    assert quality("*/*;q=0.3, */*;q=0.7", "a/b") == 0.7


def test_quality_duplicate_exact_entries_use_first_occurrence():
    assert quality("text/html;q=0.2, text/html;q=0.9", "text/html") == 0.2


def test_quality_no_match_and_empty_inputs():
    assert quality("image/png", "text/html") == 0.0
    assert quality("", "text/html") == 0.0
    assert quality("text/html", "") == 0.0
    assert quality(None, None) == 0.0


@pytest.mark.parametrize(
    "header,media_type",
    [
        ("text/html;q=0", "text/html"),
        ("text/*;q=0.2", "text/csv"),
        ("image/png", "text/html"),
        ("", "text/html"),
        ("*/*", "application/json"),
        ("text/html;q=abc", "text/html"),
    ],
)
def test_accepts_agrees_with_quality(header, media_type):
    assert accepts(header, media_type) == (quality(header, media_type) > 0.0)


# dispatch and facade


def test_negotiate_by_name():
    header = "text/html;q=0.8, application/json;q=0.9"
    prefs = "text/html,application/json"
    assert negotiate("best_match", header, prefs) == "application/json"
    assert negotiate("FILTER", header, prefs) == (
        "application/json;q=0.9, text/html;q=0.8"
    )
    assert negotiate("canonicalize", header) == (
        "application/json;q=0.9, text/html;q=0.8"
    )
    assert negotiate("quality", header, "text/html") == 0.8
    assert negotiate("accepts", header, "image/png") is False


def test_negotiate_unknown_strategy():
    with pytest.raises(UnknownStrategyError) as exc_info:
        negotiate("random", "text/html")
    err = exc_info.value
    assert err.to_dict()["error"] == "UNKNOWN_STRATEGY"
    assert "best_match" in err.details["available"]


def test_negotiator_reuses_state_buffer():
    negotiator = AcceptNegotiator(NegotiationState(8))
    first = negotiator.parse("a/a, b/b")
    assert [e.type for e in first] == ["a/a", "b/b"]

    assert negotiator.best_match("c/c;q=0.5, d/d", "c/c,d/d") == "d/d"
    second = negotiator.parse("e/e")
    assert second is first
    assert [e.type for e in first] == ["e/e"]


def test_negotiator_capacity_applies_to_preferences():
    negotiator = AcceptNegotiator(max_entries=1)
    assert list(negotiator.preferences("a/a,b/b")) == ["a/a"]
    assert negotiator.filter("b/b", "a/a,b/b") == "a/a"
