"""Accept header negotiation tools for the MCP server.

Each tool call runs in its own negotiation scope, so concurrent tool
calls never share an entry buffer.

Examples
--------
.. code-block:: python

   import asyncio
   from acceptnorm_mcp.tools.negotiation import best_match_tool

   async def main():
       res = await best_match_tool(
           "text/html;q=0.8, application/json;q=0.9",
           "text/html,application/json",
       )
       print(res.result)  # "application/json"

   asyncio.run(main())
"""

import logging
from typing import Optional

from ..config.settings import settings
from ..models import MediaRange, NegotiationResult, ParsedAccept, QualityResult
from ..utils.media import (
    AcceptNegotiator,
    negotiation_scope,
    render_entries,
    sort_entries,
)

logger = logging.getLogger(__name__)


async def parse_accept_tool(header: str) -> ParsedAccept:
    """Parse an Accept header into ranges in header order.

    :param header: Raw Accept header
    :return: Parsed ranges, canonical form and truncation flag
    """
    with negotiation_scope(settings.max_media_types) as state:
        entries = AcceptNegotiator(state).parse(header)
        ranges = [MediaRange(type=e.type, quality=e.quality) for e in entries]
        truncated = entries.truncated
        canonical = render_entries(sort_entries(entries))
    return ParsedAccept(
        header=header or "",
        ranges=ranges,
        canonical=canonical,
        truncated=truncated,
    )


async def canonicalize_tool(header: str) -> NegotiationResult:
    """Return the canonical form of an Accept header."""
    with negotiation_scope(settings.max_media_types) as state:
        result = AcceptNegotiator(state).canonicalize(header)
    return NegotiationResult(strategy="canonicalize", header=header or "", result=result)


async def filter_tool(header: str, preferred: str) -> NegotiationResult:
    """Restrict an Accept header to the preferred media types."""
    with negotiation_scope(settings.max_media_types) as state:
        result = AcceptNegotiator(state).filter(header, preferred)
    return NegotiationResult(
        strategy="filter", header=header or "", preferred=preferred, result=result
    )


async def best_match_tool(header: str, preferred: str) -> NegotiationResult:
    """Pick the preferred media type the client rates highest."""
    with negotiation_scope(settings.max_media_types) as state:
        result = AcceptNegotiator(state).best_match(header, preferred)
    return NegotiationResult(
        strategy="best_match", header=header or "", preferred=preferred, result=result
    )


async def prefer_tool(header: str, preferred: str) -> NegotiationResult:
    """Pick the first preferred media type the client accepts."""
    with negotiation_scope(settings.max_media_types) as state:
        result = AcceptNegotiator(state).prefer(header, preferred)
    return NegotiationResult(
        strategy="prefer", header=header or "", preferred=preferred, result=result
    )


async def quality_tool(header: str, media_type: str) -> QualityResult:
    """Look up the quality of one media type."""
    with negotiation_scope(settings.max_media_types) as state:
        value = AcceptNegotiator(state).quality(header, media_type)
    return QualityResult(
        header=header or "",
        media_type=media_type or "",
        quality=value,
        accepted=value > 0.0,
    )


async def negotiate_tool(
    strategy: str, header: str, argument: Optional[str] = None
) -> dict:
    """Run any strategy by name.

    :raises UnknownStrategyError: If the strategy name is unknown
    """
    with negotiation_scope(settings.max_media_types) as state:
        result = AcceptNegotiator(state).negotiate(strategy, header, argument)
    logger.debug("negotiate(%s) -> %r", strategy, result)
    return {"strategy": strategy, "header": header or "", "result": result}
