"""Media range matching."""

WILDCARD = "*/*"


def media_type_matches(pattern: str, media_type: str) -> bool:
    """Check whether a media range matches a concrete media type.

    ``*/*`` matches everything and ``text/*`` matches any ``text/...``
    type. Anything else, including strings without a ``/``, needs exact
    equality. Both arguments are expected to be lowercased already.

    :param pattern: Media range from an Accept header
    :type pattern: str
    :param media_type: Concrete media type to test
    :type media_type: str
    :return: True if the range covers the type
    :rtype: bool
    """
    if pattern == WILDCARD:
        return True

    p_top, p_slash, p_sub = pattern.partition("/")
    t_top, t_slash, _ = media_type.partition("/")
    if not p_slash or not t_slash:
        return pattern == media_type

    if p_sub == "*":
        return p_top == t_top
    return pattern == media_type


def type_wildcard(media_type: str) -> str:
    """Return the ``top/*`` range for a media type, or ``""`` without a ``/``."""
    top, slash, _ = media_type.partition("/")
    if not slash:
        return ""
    return f"{top}/*"


__all__ = ["WILDCARD", "media_type_matches", "type_wildcard"]
