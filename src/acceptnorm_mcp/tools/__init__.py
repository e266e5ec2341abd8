"""Tools module for acceptnorm.

This module provides the MCP tools wrapping the Accept header
negotiation strategies.
"""

from .negotiation import (
    best_match_tool,
    canonicalize_tool,
    filter_tool,
    negotiate_tool,
    parse_accept_tool,
    prefer_tool,
    quality_tool,
)

__all__ = [
    "parse_accept_tool",
    "canonicalize_tool",
    "filter_tool",
    "best_match_tool",
    "prefer_tool",
    "quality_tool",
    "negotiate_tool",
]
