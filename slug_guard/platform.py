"""Host platform services the repair handlers call into.

``Platform`` is the seam to the content-management system: slug transform,
uniqueness, revision lookup, persistence and cache invalidation. The handlers
only decide when to call these.

``LocalPlatform`` is a small self-contained host built on ``PostStore`` and
``PostCache``. It runs the save and load pipelines through a ``HookRegistry``
so the handlers can be exercised end to end and by the CLI.
"""

from typing import Protocol, runtime_checkable

from slug_guard.constants import POST_LOAD_HOOK, PRE_SAVE_HOOK, REVISION_TYPE
from slug_guard.hooks import HookRegistry
from slug_guard.models.records import PostDraft, PostQuery, PostRecord, RawPostInput
from slug_guard.storage import PostStore
from slug_guard.utils.cache import PostCache
from slug_guard.utils.logging import get_logger
from slug_guard.utils.slug import sanitize_title, unique_slug

logger = get_logger(__name__)


@runtime_checkable
class Platform(Protocol):
    """Services provided by the host content-management platform."""

    def sanitize_title(self, title: str) -> str: ...

    def unique_post_slug(
        self, slug: str, post_id: int, status: str, post_type: str, parent_id: int
    ) -> str: ...

    def is_revision(self, post_id: int) -> bool: ...

    def update_slug(self, post_id: int, slug: str) -> int: ...

    def clean_post_cache(self, post_id: int) -> None: ...


class LocalPlatform:
    """Platform implementation backed by a JSON record store."""

    def __init__(
        self,
        store: PostStore,
        cache: PostCache | None = None,
        hooks: HookRegistry | None = None,
    ) -> None:
        self.store = store
        self.cache = cache
        self.hooks = hooks if hooks is not None else HookRegistry()
        self.updated_ids: list[int] = []  # Slug updates written, in call order

    # Services

    def sanitize_title(self, title: str) -> str:
        return sanitize_title(title)

    def unique_post_slug(
        self, slug: str, post_id: int, status: str, post_type: str, parent_id: int
    ) -> str:
        """
        Make a slug unique among records with the same type and parent.

        Args:
            slug: Candidate slug
            post_id: Record being slugged (excluded from the sibling set)
            status: Record status (all statuses share one namespace here)
            post_type: Content type tag
            parent_id: Parent record ID

        Returns:
            Unique slug
        """
        taken = self.store.siblings(post_type, parent_id, exclude_id=post_id)
        result = unique_slug(slug, taken)
        if result != slug:
            logger.debug("Slug disambiguated", candidate=slug, slug=result, post_type=post_type)
        return result

    def is_revision(self, post_id: int) -> bool:
        if not post_id:
            return False
        row = self.store.get(post_id)
        return row is not None and row.type == REVISION_TYPE

    def update_slug(self, post_id: int, slug: str) -> int:
        self.updated_ids.append(post_id)
        return self.store.update_slug(post_id, slug)

    def clean_post_cache(self, post_id: int) -> None:
        if self.cache is not None:
            self.cache.delete(post_id)

    # Pipelines

    def insert_post(self, draft: PostDraft, raw: RawPostInput | None = None) -> PostRecord:
        """
        Save a draft through the pre-save filter and write it to the store.

        Args:
            draft: Sanitized record data
            raw: Unsanitized request, defaults to one carrying the draft's ID

        Returns:
            The stored record
        """
        raw = raw if raw is not None else RawPostInput(id=draft.id)
        data = self.hooks.apply_filters(PRE_SAVE_HOOK, draft, raw)

        post_id = raw.record_id or self.store.next_id()
        record = PostRecord(
            id=post_id,
            type=data.type,
            title=data.title,
            slug=data.slug,
            status=data.status,
            parent_id=data.parent_id,
        )
        self.store.insert(record)
        self.clean_post_cache(post_id)
        logger.debug("Record saved", post_id=post_id, post_type=record.type)
        return record

    def get_posts(self, query: PostQuery | None = None) -> list[PostRecord]:
        """
        Load records through the object cache and the post-load filter.

        Args:
            query: Optional type/ID filter

        Returns:
            Loaded records after every post-load subscriber has run
        """
        query = query if query is not None else PostQuery()
        ids = query.ids if query.ids is not None else self.store.ids(query.post_type)

        posts: list[PostRecord] = []
        for post_id in ids:
            record = self._load_one(post_id)
            if record is None:
                continue
            if query.post_type is not None and record.type != query.post_type:
                continue
            posts.append(record)

        return self.hooks.apply_filters(POST_LOAD_HOOK, posts, query)

    def _load_one(self, post_id: int) -> PostRecord | None:
        if self.cache is not None:
            cached = self.cache.load(post_id)
            if cached is not None:
                return cached

        record = self.store.get(post_id)
        if record is not None and self.cache is not None:
            self.cache.save(record)
        return record
