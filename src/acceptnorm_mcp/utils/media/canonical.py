"""Canonical ordering and rendering of parsed Accept entries.

The canonical form sorts by quality (highest first) then by media type
and writes ``q`` with a single decimal digit, omitting it at 1.0. The
rounding only affects the rendered text; comparisons always use the
parsed value. Re-parsing a rendered header therefore yields coarser
qualities unless the input already had one-decimal precision.
"""

from typing import Iterable

from .types import EntryList, MediaTypeEntry

SEPARATOR = ", "


def sort_entries(entries: EntryList) -> EntryList:
    """Sort entries in place by ``(-quality, type)`` and return them."""
    if len(entries) > 1:
        entries.sort()
    return entries


def format_entry(entry: MediaTypeEntry) -> str:
    if entry.quality < 1.0:
        return f"{entry.type};q={entry.quality:.1f}"
    return entry.type


def render_entries(entries: Iterable[MediaTypeEntry]) -> str:
    """Render entries in their current order as Accept header text.

    :param entries: Entries to render, usually sorted first
    :type entries: Iterable[MediaTypeEntry]
    :return: Header text, ``""`` when there are no entries
    :rtype: str
    """
    return SEPARATOR.join(format_entry(entry) for entry in entries)


__all__ = ["sort_entries", "render_entries", "format_entry"]
