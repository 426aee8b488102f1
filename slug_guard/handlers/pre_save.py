"""Pre-save repair: fix the slug on a sanitized draft before it is written."""

from slug_guard.classifier import is_managed_type
from slug_guard.handlers.common import needs_fix, regenerate_slug, repair_message
from slug_guard.models.context import HookContext
from slug_guard.models.records import PostDraft, RawPostInput
from slug_guard.platform import Platform
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


def fix_empty_slug_before_save(
    draft: PostDraft,
    raw: RawPostInput,
    *,
    platform: Platform,
    types: frozenset[str] | None = None,
    context: HookContext | None = None,
) -> PostDraft:
    """
    Replace an empty or self-referential slug on a draft.

    Runs after the platform sanitizes the draft and before the calendar
    plugin's own save-time subscriber reads the slug. Autosaves, revisions
    and unmanaged types pass through untouched, as do drafts without a title.
    The draft is persisted by the caller once the filter returns.

    Args:
        draft: Sanitized record data, mutated in place
        raw: Unsanitized save request
        platform: Host platform services
        types: Managed-type set
        context: Autosave/debug flags for this dispatch

    Returns:
        The same draft object
    """
    context = context if context is not None else HookContext()

    if context.doing_autosave:
        return draft

    if platform.is_revision(raw.record_id):
        return draft

    if not is_managed_type(draft.type, types):
        return draft

    record_id = raw.record_id
    if not needs_fix(draft.slug, record_id) or not draft.title:
        return draft

    slug = regenerate_slug(
        platform,
        title=draft.title,
        record_id=record_id,
        status=draft.status,
        post_type=draft.type,
        parent_id=draft.parent_id,
    )
    draft.slug = slug

    if context.debug:
        logger.bind(
            post_type=draft.type, post_id=record_id, old_slug="", new_slug=slug
        ).info(repair_message(draft.type, record_id, slug))

    return draft
