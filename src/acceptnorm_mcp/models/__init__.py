"""acceptnorm models package.

Pydantic models returned by the MCP negotiation tools.
"""

from .negotiation import MediaRange, NegotiationResult, ParsedAccept, QualityResult

__all__ = [
    "MediaRange",
    "ParsedAccept",
    "NegotiationResult",
    "QualityResult",
]
