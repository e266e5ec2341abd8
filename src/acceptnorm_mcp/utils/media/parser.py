"""Accept header and preference list parsing.

The header parser walks the text with a cursor rather than splitting it,
because its stop conditions depend on position:

- an item whose media type is empty ends parsing, keeping what was
  already collected (``text/html,,text/plain`` yields one entry);
- a ``q`` value is read as far as it looks numeric and the cursor stays
  right after the number, so trailing garbage is read as the next item
  (hex floats are not numeric here: ``q=0x1`` reads ``0`` then an item ``x1``);
- parsing stops once the target list is full.

Nothing here raises for malformed input. Every oddity degrades to a
shorter list or a quality of 0.0.
"""

import logging
import math
import re
from typing import Optional, Tuple

from .types import MAX_MEDIA_TYPES, EntryList, MediaTypeEntry, PreferenceList

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\v\f\r"

_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _skip_ws(text: str, pos: int) -> int:
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan_until(text: str, pos: int, stops: str) -> int:
    end = len(text)
    while pos < end and text[pos] not in stops:
        pos += 1
    return pos


def parse_quality(text: str, pos: int = 0) -> Tuple[float, int]:
    """Read the longest numeric prefix of ``text`` starting at ``pos``.

    Returns the clamped quality and the cursor just past the number. When
    no numeric prefix exists the quality is 0.0 and the cursor is unchanged.

    :param text: Source text
    :type text: str
    :param pos: Start offset of the value
    :type pos: int
    :return: Tuple of (quality, new cursor position)
    :rtype: Tuple[float, int]
    """
    match = _NUMERIC_PREFIX.match(text, pos)
    if not match:
        return 0.0, pos
    value = float(match.group(0))
    if math.isnan(value) or value <= 0.0:
        # also folds -0.0, which would render as "q=-0.0"
        value = 0.0
    elif value > 1.0:
        value = 1.0
    return value, match.end()


def _parse_media_range(text: str, pos: int) -> Tuple[Optional[MediaTypeEntry], int]:
    """Parse one media range starting at ``pos``.

    Returns ``(None, pos)`` when the item is empty, which ends parsing.
    """
    end = len(text)
    pos = _skip_ws(text, pos)
    if pos >= end:
        return None, pos

    start = pos
    pos = _scan_until(text, pos, ";,")
    media_type = text[start:pos].rstrip(_WHITESPACE)
    if not media_type:
        return None, pos
    quality = 1.0

    while pos < end and text[pos] == ";":
        pos = _skip_ws(text, pos + 1)
        name_start = pos
        pos = _scan_until(text, pos, "=;,")
        has_value = pos < end and text[pos] == "="
        if has_value and pos - name_start == 1 and text[name_start] in "qQ":
            pos = _skip_ws(text, pos + 1)
            quality, pos = parse_quality(text, pos)
        elif has_value:
            pos = _scan_until(text, pos + 1, ";,")

    pos = _skip_ws(text, pos)
    if pos < end and text[pos] == ",":
        pos += 1
    return MediaTypeEntry(media_type.lower(), quality), pos


def parse_accept_header(
    header: Optional[str],
    entries: Optional[EntryList] = None,
    max_entries: int = MAX_MEDIA_TYPES,
) -> EntryList:
    """Parse an Accept header into an entry list in encounter order.

    :param header: Raw header text, may be ``None`` or empty
    :type header: Optional[str]
    :param entries: List to clear and refill; a new one is created when omitted
    :type entries: Optional[EntryList]
    :param max_entries: Capacity of a newly created list
    :type max_entries: int
    :return: The populated entry list
    :rtype: EntryList
    """
    if entries is None:
        entries = EntryList(max_entries)
    else:
        entries.clear()
    if not header:
        return entries

    pos = 0
    end = len(header)
    while pos < end and not entries.full:
        entry, pos = _parse_media_range(header, pos)
        if entry is None:
            if pos < end:
                logger.debug("Discarding unparsable Accept tail at offset %d", pos)
            break
        entries.append(entry)
    else:
        if _skip_ws(header, pos) < end:
            entries.truncated = True
            logger.debug(
                "Accept header truncated at %d media ranges", entries.capacity
            )
    return entries


def parse_preferred_types(
    preferred: Optional[str], max_entries: int = MAX_MEDIA_TYPES
) -> PreferenceList:
    """Parse a comma-separated list of preferred media types.

    Items are trimmed and lowercased; empty items are skipped. Only the
    first ``max_entries`` items are kept.

    :param preferred: Comma-separated media types, may be ``None``
    :type preferred: Optional[str]
    :param max_entries: Maximum number of preferences to keep
    :type max_entries: int
    :return: Preferences in caller order
    :rtype: PreferenceList
    """
    prefs = PreferenceList(capacity=max_entries)
    if not preferred:
        return prefs
    for item in preferred.split(","):
        if len(prefs) >= prefs.capacity:
            logger.debug("Preference list truncated at %d entries", prefs.capacity)
            break
        item = item.strip(_WHITESPACE)
        if item:
            prefs.append(item.lower())
    return prefs


__all__ = [
    "parse_accept_header",
    "parse_preferred_types",
    "parse_quality",
]
