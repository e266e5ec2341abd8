"""Accept header negotiation public API (re-exports)."""

from .canonical import render_entries, sort_entries
from .matching import media_type_matches
from .negotiator import (
    STRATEGIES,
    AcceptNegotiator,
    accepts,
    best_match,
    canonicalize,
    filter_accept,
    negotiate,
    prefer,
    quality,
)
from .parser import parse_accept_header, parse_preferred_types
from .state import NegotiationState, get_negotiation_state, negotiation_scope
from .types import MAX_MEDIA_TYPES, EntryList, MediaTypeEntry, PreferenceList

__all__ = [
    "MAX_MEDIA_TYPES",
    "MediaTypeEntry",
    "EntryList",
    "PreferenceList",
    "parse_accept_header",
    "parse_preferred_types",
    "media_type_matches",
    "sort_entries",
    "render_entries",
    "NegotiationState",
    "get_negotiation_state",
    "negotiation_scope",
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
