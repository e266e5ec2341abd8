"""Pydantic models returned by the negotiation tools.

The models provide a typed, JSON-serializable view of:
- Parsed Accept headers and their media ranges
- String results of the header and preference strategies
- Quality lookups for a single media type
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class MediaRange(BaseModel):
    """One media range of a parsed Accept header.

    :param type: Lowercased media range, e.g. ``text/*``
    :type type: str
    :param quality: Quality value in [0.0, 1.0]
    :type quality: float
    """

    type: str
    quality: float = Field(1.0, ge=0.0, le=1.0)


class ParsedAccept(BaseModel):
    """Result of parsing an Accept header.

    :param header: The header as received
    :type header: str
    :param ranges: Media ranges in header order
    :type ranges: List[MediaRange]
    :param canonical: Canonical rendering of the header
    :type canonical: str
    :param truncated: Whether parsing stopped at the entry capacity
    :type truncated: bool
    """

    header: str
    ranges: List[MediaRange] = Field(default_factory=list)
    canonical: str = ""
    truncated: bool = False


class NegotiationResult(BaseModel):
    """Result of a string-valued negotiation strategy.

    :param strategy: Strategy that produced the result
    :type strategy: str
    :param header: Accept header the strategy ran against
    :type header: str
    :param preferred: Preference list, when the strategy takes one
    :type preferred: Optional[str]
    :param result: Negotiated header text or media type
    :type result: str
    """

    strategy: str
    header: str
    preferred: Optional[str] = None
    result: str


class QualityResult(BaseModel):
    """Quality an Accept header assigns to one media type."""

    header: str
    media_type: str
    quality: float = Field(..., ge=0.0, le=1.0)
    accepted: bool
