"""Subscribes the slug repair handlers to the host platform's filters."""

from slug_guard.classifier import managed_types
from slug_guard.constants import POST_LOAD_HOOK, PRE_SAVE_HOOK
from slug_guard.handlers.post_load import fix_loaded_records
from slug_guard.handlers.pre_save import fix_empty_slug_before_save
from slug_guard.hooks import HookRegistry
from slug_guard.models.config import GuardConfig
from slug_guard.models.context import HookContext
from slug_guard.models.records import PostDraft, RawPostInput
from slug_guard.platform import Platform
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


class SlugGuard:
    """Both repair handlers bound to one platform, configuration and context.

    The managed-type set is resolved once here; the calendar plugin's optional
    type tags are known by the time the guard is built.
    """

    def __init__(
        self,
        platform: Platform,
        config: GuardConfig | None = None,
        context: HookContext | None = None,
    ) -> None:
        self.platform = platform
        self.config = config if config is not None else GuardConfig()
        self.context = context if context is not None else HookContext(debug=self.config.debug)
        self.types = managed_types(self.config.managed_types)

    def fix_empty_slug_before_save(self, draft: PostDraft, raw: RawPostInput) -> PostDraft:
        """Pre-save filter callback."""
        return fix_empty_slug_before_save(
            draft, raw, platform=self.platform, types=self.types, context=self.context
        )

    def fix_loaded_records(self, records, query=None):
        """Post-load filter callback."""
        return fix_loaded_records(
            records, query, platform=self.platform, types=self.types, context=self.context
        )

    def init(self, registry: HookRegistry) -> None:
        """
        Subscribe both callbacks to their hooks.

        Calling this again on the same registry does nothing.

        Args:
            registry: Filter registry to subscribe to
        """
        priorities = self.config.priorities

        if not registry.has_filter(PRE_SAVE_HOOK, self.fix_empty_slug_before_save):
            registry.add_filter(PRE_SAVE_HOOK, self.fix_empty_slug_before_save, priorities.pre_save)

        if not registry.has_filter(POST_LOAD_HOOK, self.fix_loaded_records):
            registry.add_filter(POST_LOAD_HOOK, self.fix_loaded_records, priorities.post_load)

        logger.debug(
            "Slug guard registered",
            pre_save=priorities.pre_save,
            post_load=priorities.post_load,
            types=sorted(self.types),
        )
