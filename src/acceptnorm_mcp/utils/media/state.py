"""Reusable per-request negotiation state.

A :class:`NegotiationState` owns one bounded :class:`EntryList` that every
strategy call re-parses into, so repeated negotiations within a request
reuse the same buffer instead of allocating a new list each time.

A state has a single owner. It must not be shared between concurrent
requests or threads, and an :class:`EntryList` returned by
:meth:`NegotiationState.repopulate` is only valid until the next call
that repopulates the same state.

:func:`negotiation_scope` binds a fresh state to the current context for
the duration of one logical request, which keeps states from leaking
across asyncio tasks or threads.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from ...config.settings import settings
from .parser import parse_accept_header
from .types import MAX_MEDIA_TYPES, EntryList

logger = logging.getLogger(__name__)

_STATE_VAR: ContextVar[Optional["NegotiationState"]] = ContextVar(
    "acceptnorm_negotiation_state", default=None
)


class NegotiationState:
    """Holder of the entry buffer reused across negotiation calls.

    :param max_entries: Capacity of the entry buffer
    :type max_entries: int
    """

    def __init__(self, max_entries: int = MAX_MEDIA_TYPES) -> None:
        self.entries = EntryList(max_entries)

    @property
    def max_entries(self) -> int:
        return self.entries.capacity

    def repopulate(self, header: Optional[str]) -> EntryList:
        """Clear the buffer and parse ``header`` into it."""
        return parse_accept_header(header, self.entries)

    def clear(self) -> None:
        self.entries.clear()


def get_negotiation_state(max_entries: Optional[int] = None) -> NegotiationState:
    """Return the state bound to the current context, or a new unbound one.

    :param max_entries: Capacity for a newly created state, defaults to
        ``settings.max_media_types``
    :type max_entries: Optional[int]
    :return: Negotiation state for the caller
    :rtype: NegotiationState
    """
    state = _STATE_VAR.get()
    if state is not None:
        return state
    return NegotiationState(max_entries or settings.max_media_types)


@contextmanager
def negotiation_scope(max_entries: Optional[int] = None) -> Iterator[NegotiationState]:
    """Bind a fresh :class:`NegotiationState` to the current context.

    Nested scopes get their own state; the outer binding is restored on
    exit and the inner buffer is cleared. The capacity defaults to
    ``settings.max_media_types``.

    Examples
    --------
    .. code-block:: python

        with negotiation_scope() as state:
            best_match(accept, "application/json,text/html", state=state)
    """
    state = NegotiationState(max_entries or settings.max_media_types)
    token = _STATE_VAR.set(state)
    logger.debug("Entered negotiation scope (capacity=%d)", state.max_entries)
    try:
        yield state
    finally:
        _STATE_VAR.reset(token)
        state.clear()


__all__ = ["NegotiationState", "get_negotiation_state", "negotiation_scope"]
