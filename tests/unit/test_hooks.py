"""Unit tests for the filter registry and the guard registration."""

from unittest.mock import MagicMock

from slug_guard.constants import POST_LOAD_HOOK, PRE_SAVE_HOOK
from slug_guard.guard import SlugGuard
from slug_guard.hooks import HookRegistry
from slug_guard.models.config import GuardConfig, HookPriorities, ManagedTypesConfig
from slug_guard.models.context import HookContext
from slug_guard.models.records import PostDraft, PostRecord, RawPostInput


class TestHookRegistry:
    """Test HookRegistry class."""

    def test_no_subscribers_returns_value(self) -> None:
        """Test filtering an unknown hook is the identity."""
        assert HookRegistry().apply_filters("anything", 5) == 5

    def test_priority_order(self) -> None:
        """Test lower priorities run first."""
        registry = HookRegistry()
        registry.add_filter("h", lambda v: v + ["late"], 100)
        registry.add_filter("h", lambda v: v + ["early"], 1)
        registry.add_filter("h", lambda v: v + ["default"])

        assert registry.apply_filters("h", []) == ["early", "default", "late"]

    def test_equal_priority_keeps_registration_order(self) -> None:
        """Test ties are broken by registration order."""
        registry = HookRegistry()
        registry.add_filter("h", lambda v: v + "a", 10)
        registry.add_filter("h", lambda v: v + "b", 10)

        assert registry.apply_filters("h", "") == "ab"

    def test_extra_args_passed_through(self) -> None:
        """Test every subscriber sees the extra arguments."""
        registry = HookRegistry()
        callback = MagicMock(side_effect=lambda value, extra: value)
        registry.add_filter("h", callback)

        registry.apply_filters("h", "value", "extra")

        callback.assert_called_once_with("value", "extra")

    def test_remove_and_has_filter(self) -> None:
        """Test unsubscribing."""
        registry = HookRegistry()
        callback = MagicMock(side_effect=lambda v: v)
        registry.add_filter("h", callback, 5)

        assert registry.has_filter("h")
        assert registry.has_filter("h", callback)
        assert registry.priority_of("h", callback) == 5
        assert registry.remove_filter("h", callback)
        assert not registry.has_filter("h")
        assert not registry.remove_filter("h", callback)
        assert registry.priority_of("h", callback) is None


class TestSlugGuard:
    """Test SlugGuard registration."""

    def test_init_subscribes_at_configured_priorities(self, mock_platform: MagicMock) -> None:
        """Test both callbacks are registered at their default priorities."""
        registry = HookRegistry()
        guard = SlugGuard(mock_platform)

        guard.init(registry)

        assert registry.priority_of(PRE_SAVE_HOOK, guard.fix_empty_slug_before_save) == 50
        assert registry.priority_of(POST_LOAD_HOOK, guard.fix_loaded_records) == 1

    def test_init_is_idempotent(self, mock_platform: MagicMock) -> None:
        """Test a second init does not double-register."""
        registry = HookRegistry()
        guard = SlugGuard(mock_platform)

        guard.init(registry)
        guard.init(registry)

        record = PostRecord(id=42, type="post", title="Summer Fair", slug="")
        registry.apply_filters(POST_LOAD_HOOK, [record], None)
        mock_platform.update_slug.assert_called_once_with(42, "summer-fair")

    def test_custom_priorities(self, mock_platform: MagicMock) -> None:
        """Test priorities come from configuration."""
        registry = HookRegistry()
        config = GuardConfig(priorities=HookPriorities(pre_save=20, post_load=0))
        guard = SlugGuard(mock_platform, config)

        guard.init(registry)

        assert registry.priority_of(PRE_SAVE_HOOK, guard.fix_empty_slug_before_save) == 20
        assert registry.priority_of(POST_LOAD_HOOK, guard.fix_loaded_records) == 0

    def test_runs_before_calendar_plugin(self, mock_platform: MagicMock) -> None:
        """Test the calendar plugin's save subscriber sees the repaired slug."""
        registry = HookRegistry()
        seen: list[str] = []

        def calendar_plugin(data: PostDraft, raw: RawPostInput) -> PostDraft:
            seen.append(data.slug)
            return data

        registry.add_filter(PRE_SAVE_HOOK, calendar_plugin, 100)
        config = GuardConfig(managed_types=ManagedTypesConfig(event_type="event"))
        SlugGuard(mock_platform, config).init(registry)

        draft = PostDraft(id=42, type="event", title="Summer Fair", slug="")
        registry.apply_filters(PRE_SAVE_HOOK, draft, RawPostInput(id=42))

        assert seen == ["summer-fair"]

    def test_types_resolved_from_config(self, mock_platform: MagicMock) -> None:
        """Test the managed set is built once from configuration."""
        config = GuardConfig(managed_types=ManagedTypesConfig(event_type="event"))
        guard = SlugGuard(mock_platform, config)

        assert "event" in guard.types
        assert "location" not in guard.types

    def test_context_defaults_to_config_debug(self, mock_platform: MagicMock) -> None:
        """Test the debug flag falls back to configuration."""
        assert SlugGuard(mock_platform, GuardConfig(debug=True)).context.debug
        guard = SlugGuard(mock_platform, GuardConfig(debug=True), HookContext(debug=False))
        assert not guard.context.debug
