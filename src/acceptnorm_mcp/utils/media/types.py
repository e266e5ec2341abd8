"""Media type entries and bounded entry lists.

This module defines the value types shared by the parser, the sorter,
the serializer and the negotiation strategies. Entry lists are bounded:
once a list reaches its capacity further appends are refused silently,
so adversarial headers with thousands of media ranges cost no more than
a header with exactly ``capacity`` of them.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

MAX_MEDIA_TYPES = 64
"""Default capacity of an :class:`EntryList` and a preference list."""


@dataclass
class MediaTypeEntry:
    """A parsed media range with its quality value.

    :param type: Lowercased media range, e.g. ``text/html`` or ``image/*``
    :type type: str
    :param quality: Preference weight in [0.0, 1.0]
    :type quality: float
    """

    type: str
    quality: float = 1.0

    def sort_key(self):
        return (-self.quality, self.type)


class EntryList:
    """Ordered, capacity-bounded sequence of :class:`MediaTypeEntry`.

    Before sorting the order is the encounter order in the source text.
    Appending to a full list is a no-op that returns ``False``; the parser
    sets ``truncated`` when it stops early because the list is full.
    """

    def __init__(self, capacity: int = MAX_MEDIA_TYPES) -> None:
        if capacity < 1:
            raise ValueError(f"EntryList capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: List[MediaTypeEntry] = []
        self.truncated = False

    @property
    def full(self) -> bool:
        return len(self._entries) >= self.capacity

    def append(self, entry: MediaTypeEntry) -> bool:
        if self.full:
            return False
        self._entries.append(entry)
        return True

    def clear(self) -> None:
        self._entries.clear()
        self.truncated = False

    def sort(self) -> "EntryList":
        # duplicates compare equal; their relative order is irrelevant
        self._entries.sort(key=MediaTypeEntry.sort_key)
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MediaTypeEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> MediaTypeEntry:
        return self._entries[index]

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"EntryList({self._entries!r}, capacity={self.capacity})"


class PreferenceList(list):
    """Caller-supplied media types, trimmed and lowercased, in caller order."""

    def __init__(self, items=(), capacity: int = MAX_MEDIA_TYPES) -> None:
        super().__init__(items)
        self.capacity = capacity

    @property
    def first(self) -> Optional[str]:
        return self[0] if self else None


__all__ = [
    "MAX_MEDIA_TYPES",
    "MediaTypeEntry",
    "EntryList",
    "PreferenceList",
]
