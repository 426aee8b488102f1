"""Post-load repair: fix slugs on a freshly loaded batch and write them back."""

from typing import Any

from slug_guard.classifier import is_managed_type
from slug_guard.handlers.common import needs_fix, regenerate_slug, repair_message
from slug_guard.models.context import HookContext
from slug_guard.platform import Platform
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


def fix_loaded_records(
    records: Any,
    query: Any = None,
    *,
    platform: Platform,
    types: frozenset[str] | None = None,
    context: HookContext | None = None,
) -> Any:
    """
    Replace empty or self-referential slugs on loaded records.

    Each repaired record is mutated in place, its slug column is updated in
    storage and its cache entry is invalidated, so other holders of the same
    objects and later reads both see the new slug. Records are handled
    independently in input order.

    Args:
        records: Loaded records (list or tuple); anything else passes through
        query: Query context of the load, unused
        platform: Host platform services
        types: Managed-type set
        context: Debug flag for this dispatch

    Returns:
        The same collection object
    """
    if not records or not isinstance(records, (list, tuple)):
        return records

    context = context if context is not None else HookContext()

    for record in records:
        if not is_managed_type(getattr(record, "type", None), types):
            continue

        if not needs_fix(record.slug, record.id) or not record.title:
            continue

        slug = regenerate_slug(
            platform,
            title=record.title,
            record_id=record.id,
            status=record.status,
            post_type=record.type,
            parent_id=record.parent_id,
        )
        record.slug = slug

        platform.update_slug(record.id, slug)
        platform.clean_post_cache(record.id)

        if context.debug:
            logger.bind(
                post_type=record.type, post_id=record.id, old_slug="", new_slug=slug
            ).info(repair_message(record.type, record.id, slug, loaded=True))

    return records
