"""Accept header negotiation strategies.

This module composes the parser, matcher, sorter and serializer into the
public strategies:

- :func:`canonicalize` sorts and re-renders a header;
- :func:`filter_accept` restricts a header to the caller's preferences;
- :func:`best_match` picks the single preference the client likes most;
- :func:`prefer` picks the first preference the client accepts at all;
- :func:`quality` and :func:`accepts` look up one concrete media type.

Every strategy is total: empty or malformed input produces a documented
fallback value, never an exception. Strategies that parse the header do
so into the buffer of a :class:`NegotiationState`, so a caller that
passes its own state must not keep entries from a previous call.
"""

import logging
from typing import Callable, Dict, Optional, Union

from ...exceptions import UnknownStrategyError
from .canonical import render_entries, sort_entries
from .matching import WILDCARD, media_type_matches, type_wildcard
from .parser import parse_preferred_types
from .state import NegotiationState, get_negotiation_state
from .types import EntryList, MediaTypeEntry, PreferenceList

logger = logging.getLogger(__name__)


def _resolve_state(state: Optional[NegotiationState]) -> NegotiationState:
    return state if state is not None else get_negotiation_state()


def _effective_quality(entries: EntryList, candidate: str) -> float:
    """Highest quality among entries whose range covers ``candidate``."""
    best = 0.0
    for entry in entries:
        if media_type_matches(entry.type, candidate) and entry.quality > best:
            best = entry.quality
    return best


def canonicalize(
    header: Optional[str], state: Optional[NegotiationState] = None
) -> str:
    """Return the canonical form of an Accept header.

    :param header: Raw Accept header
    :type header: Optional[str]
    :param state: Reusable negotiation state
    :type state: Optional[NegotiationState]
    :return: Sorted header text, ``""`` for an empty header
    :rtype: str
    """
    if not header:
        return ""
    entries = _resolve_state(state).repopulate(header)
    return render_entries(sort_entries(entries))


def filter_accept(
    header: Optional[str],
    preferred: Optional[str],
    state: Optional[NegotiationState] = None,
) -> str:
    """Restrict an Accept header to the media types the caller can produce.

    Each preference is kept with the highest quality of any header range
    matching it, when that quality is positive. If nothing survives, the
    first preference is returned at full quality, so the result is never
    empty once the caller names a preference.

    :param header: Raw Accept header
    :type header: Optional[str]
    :param preferred: Comma-separated preferred media types
    :type preferred: Optional[str]
    :param state: Reusable negotiation state
    :type state: Optional[NegotiationState]
    :return: Canonical header text listing accepted preferences
    :rtype: str
    """
    if not preferred:
        return canonicalize(header, state)

    state = _resolve_state(state)
    prefs = parse_preferred_types(preferred, state.max_entries)
    if not header:
        return prefs.first or ""

    entries = state.repopulate(header)
    filtered = EntryList(state.max_entries)
    for candidate in prefs:
        if filtered.full:
            break
        score = _effective_quality(entries, candidate)
        if score > 0.0:
            filtered.append(MediaTypeEntry(candidate, score))

    if not filtered and prefs:
        logger.debug("No preference accepted, falling back to %s", prefs.first)
        filtered.append(MediaTypeEntry(prefs.first, 1.0))

    return render_entries(sort_entries(filtered))


def best_match(
    header: Optional[str],
    preferred: Optional[str],
    state: Optional[NegotiationState] = None,
) -> str:
    """Return the preferred media type the client rates highest.

    Ties go to the preference listed first.

    :param header: Raw Accept header
    :type header: Optional[str]
    :param preferred: Comma-separated preferred media types
    :type preferred: Optional[str]
    :param state: Reusable negotiation state
    :type state: Optional[NegotiationState]
    :return: One preferred media type, ``""`` without preferences
    :rtype: str
    """
    state = _resolve_state(state)
    prefs = parse_preferred_types(preferred, state.max_entries)
    if not prefs:
        return ""
    if not header:
        return prefs.first

    entries = state.repopulate(header)
    best_type: Optional[str] = None
    best_quality = -1.0
    for candidate in prefs:
        score = _effective_quality(entries, candidate)
        if score > best_quality:
            best_quality = score
            best_type = candidate

    if best_type is None:
        best_type = prefs.first
    logger.debug("Best match %s (q=%s)", best_type, best_quality)
    return best_type


def prefer(
    header: Optional[str],
    preferred: Optional[str],
    state: Optional[NegotiationState] = None,
) -> str:
    """Return the first preferred media type the client accepts.

    Unlike :func:`best_match` this is first-match: the earliest preference
    covered by any range with a positive quality wins. When no preference
    is accepted the original header is returned untouched.

    :param header: Raw Accept header
    :type header: Optional[str]
    :param preferred: Comma-separated preferred media types
    :type preferred: Optional[str]
    :param state: Reusable negotiation state
    :type state: Optional[NegotiationState]
    :return: A preferred media type or the original header
    :rtype: str
    """
    if not header:
        return ""
    state = _resolve_state(state)
    prefs = parse_preferred_types(preferred, state.max_entries)
    if not prefs:
        return header

    entries = state.repopulate(header)
    for candidate in prefs:
        for entry in entries:
            if entry.quality > 0.0 and media_type_matches(entry.type, candidate):
                return candidate

    return header


def quality(
    header: Optional[str],
    media_type: Optional[str],
    state: Optional[NegotiationState] = None,
) -> float:
    """Return the quality an Accept header assigns to a media type.

    Lookup is by specificity, scanning the header in its original order:
    the first exact entry wins, then a ``type/*`` range, then ``*/*``.
    Duplicate exact entries resolve to the first one, not the highest.

    :param header: Raw Accept header
    :type header: Optional[str]
    :param media_type: Concrete media type, compared case-insensitively
    :type media_type: Optional[str]
    :param state: Reusable negotiation state
    :type state: Optional[NegotiationState]
    :return: Quality in [0.0, 1.0], 0.0 when nothing matches
    :rtype: float
    """
    if not header or not media_type:
        return 0.0

    entries = _resolve_state(state).repopulate(header)
    target = media_type.lower()
    prefix = type_wildcard(target)
    wildcard_quality: Optional[float] = None
    prefix_quality: Optional[float] = None

    for entry in entries:
        if entry.type == target:
            return entry.quality
        if entry.type == WILDCARD:
            wildcard_quality = entry.quality
        elif prefix and entry.type == prefix:
            prefix_quality = entry.quality

    if prefix_quality is not None:
        return prefix_quality
    if wildcard_quality is not None:
        return wildcard_quality
    return 0.0


def accepts(
    header: Optional[str],
    media_type: Optional[str],
    state: Optional[NegotiationState] = None,
) -> bool:
    """Check whether an Accept header gives a media type positive quality."""
    return quality(header, media_type, state) > 0.0


STRATEGIES: Dict[str, Callable[..., Union[str, float, bool]]] = {
    "canonicalize": lambda header, _arg, state: canonicalize(header, state),
    "filter": filter_accept,
    "best_match": best_match,
    "prefer": prefer,
    "quality": quality,
    "accepts": accepts,
}


def negotiate(
    strategy: str,
    header: Optional[str],
    argument: Optional[str] = None,
    state: Optional[NegotiationState] = None,
) -> Union[str, float, bool]:
    """Run a strategy by name.

    ``argument`` is the preference list for the list-based strategies and
    the media type for ``quality`` and ``accepts``; ``canonicalize``
    ignores it.

    :raises UnknownStrategyError: If ``strategy`` is not a known name
    """
    func = STRATEGIES.get((strategy or "").strip().lower())
    if func is None:
        raise UnknownStrategyError(strategy, STRATEGIES)
    return func(header, argument, state)


class AcceptNegotiator:
    """Negotiation facade bound to one :class:`NegotiationState`.

    Use one instance per request. The instance is not safe to share
    between threads, and the :class:`EntryList` returned by :meth:`parse`
    is overwritten by every later call on the same instance.

    :param state: State to reuse; a new one is created when omitted
    :type state: Optional[NegotiationState]
    :param max_entries: Capacity for a newly created state
    :type max_entries: Optional[int]
    """

    def __init__(
        self,
        state: Optional[NegotiationState] = None,
        max_entries: Optional[int] = None,
    ):
        if state is None:
            state = (
                NegotiationState(max_entries)
                if max_entries
                else get_negotiation_state()
            )
        self.state = state

    def parse(self, header: Optional[str]) -> EntryList:
        """Parse into the shared buffer, in header order."""
        return self.state.repopulate(header)

    def preferences(self, preferred: Optional[str]) -> PreferenceList:
        return parse_preferred_types(preferred, self.state.max_entries)

    def canonicalize(self, header: Optional[str]) -> str:
        return canonicalize(header, self.state)

    def filter(self, header: Optional[str], preferred: Optional[str]) -> str:
        return filter_accept(header, preferred, self.state)

    def best_match(self, header: Optional[str], preferred: Optional[str]) -> str:
        return best_match(header, preferred, self.state)

    def prefer(self, header: Optional[str], preferred: Optional[str]) -> str:
        return prefer(header, preferred, self.state)

    def quality(self, header: Optional[str], media_type: Optional[str]) -> float:
        return quality(header, media_type, self.state)

    def accepts(self, header: Optional[str], media_type: Optional[str]) -> bool:
        return accepts(header, media_type, self.state)

    def negotiate(
        self, strategy: str, header: Optional[str], argument: Optional[str] = None
    ) -> Union[str, float, bool]:
        return negotiate(strategy, header, argument, self.state)


__all__ = [
    "canonicalize",
    "filter_accept",
    "best_match",
    "prefer",
    "quality",
    "accepts",
    "negotiate",
    "STRATEGIES",
    "AcceptNegotiator",
]
