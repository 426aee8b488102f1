"""Batch repair: run every stored record through the post-load handler."""

from slug_guard.guard import SlugGuard
from slug_guard.models.config import GuardConfig
from slug_guard.models.context import HookContext
from slug_guard.models.records import PostQuery, RepairResult
from slug_guard.platform import LocalPlatform
from slug_guard.storage import PostStore
from slug_guard.utils.cache import PostCache
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


def run_repair(
    store: PostStore,
    config: GuardConfig | None = None,
    cache: PostCache | None = None,
    context: HookContext | None = None,
    post_type: str | None = None,
    dry_run: bool = False,
) -> RepairResult:
    """
    Load every record through the platform so the post-load filter repairs it.

    This step:
    1. Builds a local platform around the store and subscribes the guard
    2. Loads all records (optionally one type) through the post-load hook
    3. Reports the records the handler wrote a new slug for
    4. Writes a file-backed store back unless this is a dry run

    Args:
        store: Record store to repair
        config: Guard configuration
        cache: Object cache to read through and invalidate
        context: Debug flag for the dispatch
        post_type: Only load records of this type
        dry_run: Leave the record file untouched

    Returns:
        RepairResult with scan statistics
    """
    config = config if config is not None else GuardConfig()
    logger.info("Starting slug repair", records=len(store), dry_run=dry_run)

    platform = LocalPlatform(store, cache=cache)
    SlugGuard(platform, config, context).init(platform.hooks)

    try:
        posts = platform.get_posts(PostQuery(post_type=post_type))
    except Exception as e:
        logger.error("Slug repair failed", error=str(e))
        return RepairResult(
            success=False,
            records_scanned=0,
            records_fixed=0,
            dry_run=dry_run,
            errors=[str(e)],
        )

    fixed_ids = list(dict.fromkeys(platform.updated_ids))

    if fixed_ids and not dry_run and store.path is not None:
        store.save()

    logger.info(
        "Slug repair complete",
        scanned=len(posts),
        fixed=len(fixed_ids),
        dry_run=dry_run,
    )

    return RepairResult(
        success=True,
        records_scanned=len(posts),
        records_fixed=len(fixed_ids),
        fixed_ids=fixed_ids,
        dry_run=dry_run,
    )
