"""Path parameter extraction.

Plain ``:name`` segments capture the whole segment. The compound
``(slug~)?:name`` segment captures the identifier trailing an optional
cosmetic slug.
"""

from collections.abc import Sequence
from urllib.parse import unquote


def decode_param(value: str) -> str:
    """Percent-decode a captured segment."""
    return unquote(value)


def extract_delimited(segment: str, delimiter: str = "~") -> str | None:
    """Return the identifier at the end of *segment*.

    The identifier is everything after the last *delimiter*; a segment
    without a delimiter is all identifier. The slug may itself contain the
    delimiter, and may be empty::

        "id-123-id"                  -> "id-123-id"
        "custom-slug~id-123-id"      -> "id-123-id"
        "~id-123-id"                 -> "id-123-id"
        "some~custom~slug~id-123-id" -> "id-123-id"

    Returns ``None`` when nothing follows the last delimiter.
    """
    _, _, identifier = segment.rpartition(delimiter)
    return identifier or None


def extract_delimited_tail(parts: Sequence[str], delimiter: str = "~") -> tuple[str, int] | None:
    """Find the identifier in the trailing path segments *parts*.

    The slug may span several segments, so the segment holding the last
    *delimiter* carries the identifier. Without any delimiter the first
    segment is the identifier::

        ["id-123-id"]                  -> ("id-123-id", 1)
        ["a", "slug~id-123-id"]        -> ("id-123-id", 2)
        ["slug~id-123-id", "replies"]  -> ("id-123-id", 1)

    Returns the identifier and how many segments it consumed, or ``None``
    when *parts* is empty or nothing follows the last delimiter.
    """
    for index in range(len(parts) - 1, -1, -1):
        if delimiter in parts[index]:
            identifier = extract_delimited(parts[index], delimiter)
            if identifier is None:
                return None
            return identifier, index + 1
    if not parts:
        return None
    return parts[0], 1
