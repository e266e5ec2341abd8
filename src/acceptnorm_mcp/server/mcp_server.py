#!/usr/bin/env python3
"""acceptnorm MCP server entry point.

Exposes the Accept header negotiation strategies as MCP tools over
stdio or HTTP.
"""

import argparse
import asyncio
import logging
import os
from typing import Any, List, Optional

from dotenv import load_dotenv

from ..config.settings import settings
from ..utils.logging_setup import setup_logging
from .server_builder import ServerBuilder

logger = logging.getLogger(__name__)


async def create_acceptnorm_server() -> Any:
    """Create and configure the acceptnorm MCP server.

    :return: Configured FastMCP server instance

    Examples
    --------
    .. code-block:: python

        server = await create_acceptnorm_server()
        server.run()
    """
    builder = ServerBuilder()
    server = await builder.build()
    logger.info("MCP server setup complete")
    return server


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="acceptnorm MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "streamable-http"],
        default="stdio",
    )
    parser.add_argument("--host", default=settings.mcp_server_host)
    parser.add_argument("--port", type=int, default=settings.mcp_server_port)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Run the acceptnorm MCP server.

    Examples
    --------
    .. code-block:: bash

        # Run with HTTP transport
        acceptnorm-mcp --transport http --port 9080

        # Run with stdio transport
        acceptnorm-mcp --transport stdio
    """
    load_dotenv()
    setup_logging(level=os.environ.get("LOG_LEVEL", settings.log_level))

    args = build_arg_parser().parse_args(argv)

    logger.info("Creating acceptnorm MCP server...")
    mcp = asyncio.run(create_acceptnorm_server())

    try:
        if args.transport in ("http", "streamable-http"):
            logger.info(
                "Starting %s server on %s:%d", args.transport, args.host, args.port
            )
            mcp.run(transport=args.transport, host=args.host, port=args.port)
        else:
            logger.info("Running in stdio mode")
            mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
