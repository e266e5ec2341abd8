"""Server builder module for creating configured MCP servers."""

import logging
from typing import Optional

from fastmcp import FastMCP

from .. import __version__
from ..config.settings import settings
from .builtin_tools import register_all_builtin_tools

logger = logging.getLogger(__name__)


class ServerBuilder:
    """Builder class for creating configured MCP servers.

    :param name: Server name, defaults to the configured name
    :type name: Optional[str]
    """

    def __init__(self, name: Optional[str] = None):
        """Initialize the server builder."""
        self.name = name or settings.mcp_server_name
        self.server: Optional[FastMCP] = None

    async def build(self) -> FastMCP:
        """Build and configure the MCP server.

        :return: Configured FastMCP server instance
        :rtype: FastMCP
        """
        self.server = await self._create_main_server()
        await self._setup_builtin_tools()
        return self.server

    async def _create_main_server(self) -> FastMCP:
        server = FastMCP(self.name, version=__version__)
        logger.debug(
            "Created server %s (max %d media types per call)",
            self.name,
            settings.max_media_types,
        )
        return server

    async def _setup_builtin_tools(self):
        await register_all_builtin_tools(self.server)
