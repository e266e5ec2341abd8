"""HTTP client that normalizes outgoing Accept headers.

Semantically equal Accept headers written in different orders or with
different spacing fragment shared caches. This client rewrites the
``Accept`` header of every request it sends into one normalized form
before it leaves the process.

Examples:
    >>> async with AcceptNormalizingClient(
    ...     strategy="filter", preferred="application/json,text/csv"
    ... ) as client:
    ...     await client.get(url, headers={"Accept": "text/csv;q=0.5, */*"})
"""

import logging
from typing import Optional

import httpx

from ..config.settings import Settings
from ..exceptions import ConfigurationError
from .media import AcceptNegotiator, negotiation_scope

logger = logging.getLogger(__name__)

CLIENT_STRATEGIES = ("canonicalize", "filter", "best_match")


class AcceptNormalizingClient(httpx.AsyncClient):
    """``httpx.AsyncClient`` that rewrites the Accept header once per request.

    Strategies:

    - ``canonicalize``: sort ranges by quality, then by media type;
    - ``filter``: keep only the preferred types the header accepts;
    - ``best_match``: send the single preferred type rated highest.

    A request without an Accept header gets the first preferred type when
    preferences are configured and is otherwise left alone. A rewrite
    that would produce an empty header keeps the original value.

    :param strategy: Normalization strategy, defaults to settings
    :type strategy: Optional[str]
    :param preferred: Comma-separated preferred media types, defaults to settings
    :type preferred: Optional[str]
    :param max_entries: Per-call entry capacity, defaults to settings
    :type max_entries: Optional[int]
    :raises ConfigurationError: If the strategy is not supported
    """

    def __init__(
        self,
        *args,
        strategy: Optional[str] = None,
        preferred: Optional[str] = None,
        max_entries: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        config = Settings()
        self.strategy = strategy or config.accept_strategy
        if self.strategy not in CLIENT_STRATEGIES:
            raise ConfigurationError(
                f"Unsupported Accept strategy {self.strategy!r}; "
                f"expected one of {', '.join(CLIENT_STRATEGIES)}",
                setting="accept_strategy",
            )
        self.preferred = preferred if preferred is not None else config.preferred_types
        self.max_entries = max_entries or config.max_media_types

    def normalize_accept(self, accept: Optional[str]) -> Optional[str]:
        """Return the Accept value to send for an original value.

        :param accept: Accept header of the outgoing request, if any
        :type accept: Optional[str]
        :return: Header value to send, or None to send no Accept header
        :rtype: Optional[str]
        """
        with negotiation_scope(self.max_entries) as state:
            negotiator = AcceptNegotiator(state)
            if accept is None:
                return negotiator.preferences(self.preferred).first
            if self.strategy == "filter":
                normalized = negotiator.filter(accept, self.preferred)
            elif self.strategy == "best_match":
                normalized = negotiator.best_match(accept, self.preferred)
            else:
                normalized = negotiator.canonicalize(accept)

        if not normalized:
            return accept or None
        return normalized

    async def send(self, request: httpx.Request, **kwargs) -> httpx.Response:
        """Normalize the Accept header, then send the request.

        :param request: The HTTP request to send
        :type request: httpx.Request
        :return: The HTTP response
        :rtype: httpx.Response
        """
        if request.extensions.get("accept_normalized"):
            return await super().send(request, **kwargs)
        request.extensions["accept_normalized"] = True

        original = request.headers.get("Accept")
        normalized = self.normalize_accept(original)
        if normalized is not None and normalized != original:
            request.headers["Accept"] = normalized
            logger.debug(
                "Accept for %s %s: %r -> %r",
                request.method,
                request.url,
                original,
                normalized,
            )

        return await super().send(request, **kwargs)
