"""Accept header normalization and content negotiation.

This package parses HTTP ``Accept`` headers into quality-ranked media
ranges and negotiates them against the media types a server can produce.
It also ships an httpx client that normalizes outgoing ``Accept`` headers
and a Model Context Protocol (MCP) server exposing the strategies as tools.

:var __version__: Current package version
:type __version__: str
"""

__version__ = "0.1.0"

from .utils.http_client import AcceptNormalizingClient  # noqa: E402

__all__ = ["AcceptNormalizingClient", "__version__"]
