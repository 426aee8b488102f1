"""URL slug utilities.

Title-to-slug transform and sibling-scoped uniqueness used by the local
platform, plus the numeric check the repair handlers rely on.
"""

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from slugify import slugify

from slug_guard.constants import SLUG_FIRST_SUFFIX, SLUG_MAX_LENGTH

# Optional sign, digits with optional fraction, optional exponent; surrounding blanks allowed
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def sanitize_title(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Generate a URL-safe slug from a title.

    Args:
        text: Input text (e.g., record title)
        max_length: Maximum slug length

    Returns:
        URL-safe slug, empty when nothing in the title survives

    Examples:
        >>> sanitize_title("Summer Fair")
        'summer-fair'
        >>> sanitize_title("!!!")
        ''
    """
    return slugify(text or "", max_length=max_length, word_boundary=True, separator="-")


def is_numeric_slug(slug: str) -> bool:
    """Check whether a slug is a number rendered as text."""
    return bool(slug) and _NUMERIC_RE.match(slug) is not None


def slug_matches_id(slug: str, record_id: int) -> bool:
    """
    Check whether a numeric slug is the record ID, truncated toward zero.

    The comparison stays in ``Decimal`` so exponent forms like ``"1e99999999"``
    are never expanded into a full integer.

    Args:
        slug: Slug to inspect
        record_id: Record ID to compare with

    Returns:
        True if the slug is numeric and its integer part equals the ID

    Examples:
        >>> slug_matches_id("42", 42)
        True
        >>> slug_matches_id("42.9", 42)
        True
        >>> slug_matches_id("summer-fair", 42)
        False
    """
    if not is_numeric_slug(slug):
        return False

    try:
        value = Decimal(slug.strip()).to_integral_value(rounding=ROUND_DOWN)
    except InvalidOperation:
        # Exponent outside the decimal range, so no ID can match
        return False

    return value.is_finite() and value == record_id


def unique_slug(slug: str, taken: set[str], max_length: int = SLUG_MAX_LENGTH) -> str:
    """
    Make a slug unique by appending a counter if needed.

    Purely numeric slugs always count as taken so the result is never a bare
    number.

    Args:
        slug: Candidate slug
        taken: Slugs already used by sibling records
        max_length: Maximum slug length, counter included; longer candidates are cut

    Returns:
        Unique slug

    Examples:
        >>> unique_slug("summer-fair", set())
        'summer-fair'
        >>> unique_slug("summer-fair", {"summer-fair"})
        'summer-fair-2'
        >>> unique_slug("2024", set())
        '2024-2'
    """
    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    if slug not in taken and not is_numeric_slug(slug):
        return slug

    # Append counter to make unique
    counter = SLUG_FIRST_SUFFIX
    while True:
        suffix = f"-{counter}"
        candidate = f"{slug[: max_length - len(suffix)].rstrip('-')}{suffix}"
        if candidate not in taken:
            return candidate
        counter += 1
