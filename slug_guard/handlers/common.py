"""Repair decision and slug derivation shared by both handlers."""

from slug_guard.constants import LOG_TAG
from slug_guard.platform import Platform
from slug_guard.utils.slug import slug_matches_id


def needs_fix(slug: str | None, record_id: int | None) -> bool:
    """
    Check whether a slug is missing or self-referential.

    Args:
        slug: Current slug
        record_id: Record ID, treated as 0 when absent

    Returns:
        True if the slug is empty or is the record ID rendered as a number

    Examples:
        >>> needs_fix("", 42)
        True
        >>> needs_fix("42", 42)
        True
        >>> needs_fix("summer-fair", 42)
        False
    """
    if not slug:
        return True
    return slug_matches_id(slug, record_id or 0)


def candidate_slug(platform: Platform, title: str, post_type: str, record_id: int) -> str:
    """
    Derive a slug candidate from a title.

    Falls back to ``<type>-<id>`` when the title has nothing slug-worthy.
    """
    slug = platform.sanitize_title(title)
    if not slug:
        slug = f"{post_type}-{record_id}"
    return slug


def regenerate_slug(
    platform: Platform,
    *,
    title: str,
    record_id: int,
    status: str,
    post_type: str,
    parent_id: int,
) -> str:
    """
    Produce a unique replacement slug for a record.

    Errors from the platform's transform or uniqueness service propagate.

    Returns:
        Slug returned by the platform's uniqueness service
    """
    candidate = candidate_slug(platform, title, post_type, record_id)
    return platform.unique_post_slug(candidate, record_id, status, post_type, parent_id)


def repair_message(post_type: str, record_id: int, slug: str, *, loaded: bool = False) -> str:
    """Debug line describing a repair."""
    where = " in loaded records" if loaded else ""
    return f'{LOG_TAG} Fixed empty slug{where} for {post_type} ID {record_id}: "" → "{slug}"'
