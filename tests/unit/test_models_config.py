"""Unit tests for configuration and context models."""

import pytest
from pydantic import ValidationError

from slug_guard.models.config import GuardConfig, LoggingConfig, ManagedTypesConfig
from slug_guard.models.context import HookContext
from slug_guard.models.records import PostDraft, PostRecord, RawPostInput


class TestGuardConfig:
    """Test GuardConfig model."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = GuardConfig()
        assert config.managed_types.event_type is None
        assert config.managed_types.include_generic_types
        assert config.priorities.pre_save == 50
        assert config.priorities.post_load == 1
        assert not config.debug

    def test_invalid_log_level(self) -> None:
        """Test log levels are validated."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_env_overrides_fill_missing_tags(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test calendar tags are read from the environment."""
        monkeypatch.setenv("EM_POST_TYPE_EVENT", "event")
        monkeypatch.setenv("EM_POST_TYPE_LOCATION", "location")

        config = GuardConfig().with_env_overrides()

        assert config.managed_types.event_type == "event"
        assert config.managed_types.location_type == "location"

    def test_explicit_tags_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configured tags are not replaced by the environment."""
        monkeypatch.setenv("EM_POST_TYPE_EVENT", "event")

        config = GuardConfig(managed_types=ManagedTypesConfig(event_type="tribe_events"))

        assert config.with_env_overrides().managed_types.event_type == "tribe_events"

    def test_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test missing environment variables leave the tags unset."""
        monkeypatch.delenv("EM_POST_TYPE_EVENT", raising=False)
        monkeypatch.setenv("EM_POST_TYPE_LOCATION", "")

        config = GuardConfig().with_env_overrides()

        assert config.managed_types.event_type is None
        assert config.managed_types.location_type is None


class TestHookContext:
    """Test HookContext model."""

    def test_defaults(self) -> None:
        """Test flags default to off."""
        context = HookContext()
        assert not context.doing_autosave
        assert not context.debug

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_from_env_truthy(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Test truthy environment values."""
        monkeypatch.setenv("SLUG_GUARD_DOING_AUTOSAVE", value)
        monkeypatch.setenv("SLUG_GUARD_DEBUG", value)

        context = HookContext.from_env()

        assert context.doing_autosave
        assert context.debug

    def test_from_env_falsy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unset and falsy environment values."""
        monkeypatch.delenv("SLUG_GUARD_DOING_AUTOSAVE", raising=False)
        monkeypatch.setenv("SLUG_GUARD_DEBUG", "0")

        context = HookContext.from_env()

        assert not context.doing_autosave
        assert not context.debug


class TestRecords:
    """Test record models."""

    def test_raw_input_id_defaults_to_zero(self) -> None:
        """Test the raw request's ID fallback."""
        assert RawPostInput().record_id == 0
        assert RawPostInput(id=42).record_id == 42

    def test_raw_input_keeps_extra_fields(self) -> None:
        """Test unknown request keys are tolerated."""
        raw = RawPostInput.model_validate({"id": 42, "post_title": "Summer Fair"})
        assert raw.record_id == 42

    def test_draft_defaults(self) -> None:
        """Test a new draft has no ID and no parent."""
        draft = PostDraft(type="event", title="Summer Fair")
        assert draft.id is None
        assert draft.parent_id == 0
        assert draft.slug == ""

    def test_record_requires_positive_id(self) -> None:
        """Test persisted records need a real ID."""
        with pytest.raises(ValidationError):
            PostRecord(id=0, type="event")

    def test_records_are_mutable(self) -> None:
        """Test slugs can be assigned in place."""
        record = PostRecord(id=1, type="event")
        record.slug = "summer-fair"
        assert record.slug == "summer-fair"
