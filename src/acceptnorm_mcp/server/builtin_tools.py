"""Register built-in tools for the MCP server.

Handle registration of the Accept header negotiation tools.

Examples
--------
.. code-block:: python

   import asyncio
   from fastmcp import FastMCP
   from acceptnorm_mcp.server.builtin_tools import register_all_builtin_tools

   async def main():
       server = FastMCP("acceptnorm")
       await register_all_builtin_tools(server)

   asyncio.run(main())
"""

import logging
from typing import Optional

from fastmcp import Context, FastMCP

from ..tools import negotiation

logger = logging.getLogger(__name__)


async def register_header_tools(server: FastMCP):
    """Register tools that work on the Accept header alone.

    :param server: FastMCP server instance.
    """

    @server.tool(
        name="parse_accept",
        description="Parse an Accept header into media ranges with quality values",
    )
    async def parse_accept_tool(ctx: Context, header: str):
        """Parse an Accept header."""
        return await negotiation.parse_accept_tool(header)

    @server.tool(
        name="canonicalize_accept",
        description="Sort an Accept header by quality and media type into canonical form",
    )
    async def canonicalize_accept_tool(ctx: Context, header: str):
        """Canonicalize an Accept header."""
        return await negotiation.canonicalize_tool(header)


async def register_preference_tools(server: FastMCP):
    """Register tools that negotiate against a preference list.

    :param server: FastMCP server instance.
    """

    @server.tool(
        name="filter_accept",
        description="Restrict an Accept header to a comma-separated list of preferred media types",
    )
    async def filter_accept_tool(ctx: Context, header: str, preferred: str):
        """Filter an Accept header by preferences."""
        return await negotiation.filter_tool(header, preferred)

    @server.tool(
        name="best_match",
        description="Return the preferred media type the Accept header rates highest",
    )
    async def best_match_tool(ctx: Context, header: str, preferred: str):
        """Find the best preferred media type."""
        return await negotiation.best_match_tool(header, preferred)

    @server.tool(
        name="prefer",
        description="Return the first preferred media type the Accept header accepts, or the header itself",
    )
    async def prefer_tool(ctx: Context, header: str, preferred: str):
        """Find the first accepted preferred media type."""
        return await negotiation.prefer_tool(header, preferred)


async def register_lookup_tools(server: FastMCP):
    """Register single media type lookup tools.

    :param server: FastMCP server instance.
    """

    @server.tool(
        name="quality",
        description="Get the quality an Accept header assigns to a media type",
    )
    async def quality_tool(ctx: Context, header: str, media_type: str):
        """Look up a media type's quality."""
        return await negotiation.quality_tool(header, media_type)

    @server.tool(
        name="accepts",
        description="Check whether an Accept header accepts a media type",
    )
    async def accepts_tool(ctx: Context, header: str, media_type: str):
        """Check whether a media type is accepted."""
        res = await negotiation.quality_tool(header, media_type)
        return {"media_type": res.media_type, "accepted": res.accepted}

    @server.tool(
        name="negotiate",
        description="Run a negotiation strategy by name (canonicalize, filter, best_match, prefer, quality, accepts)",
    )
    async def negotiate_tool(
        ctx: Context,
        strategy: str,
        header: str,
        argument: Optional[str] = None,
    ):
        """Run a strategy by name."""
        return await negotiation.negotiate_tool(strategy, header, argument)


async def register_all_builtin_tools(server: FastMCP):
    """Register all built-in tools.

    :param server: FastMCP server instance.
    """
    await register_header_tools(server)
    await register_preference_tools(server)
    await register_lookup_tools(server)
    logger.info("Registered negotiation tools")
