"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger

from slug_guard.classifier import managed_types
from slug_guard.models.config import ManagedTypesConfig
from slug_guard.models.records import PostRecord
from slug_guard.platform import LocalPlatform
from slug_guard.storage import PostStore
from slug_guard.utils.cache import PostCache
from slug_guard.utils.slug import sanitize_title


@pytest.fixture
def types() -> frozenset[str]:
    """Managed-type set with the calendar plugin's tags defined."""
    return managed_types(ManagedTypesConfig(event_type="event", location_type="location"))


@pytest.fixture
def sample_records() -> list[PostRecord]:
    """Create a mix of healthy and broken records."""
    return [
        PostRecord(id=42, type="event", title="Summer Fair", slug="", status="publish"),
        PostRecord(id=43, type="event", title="Autumn Market", slug="43", status="publish"),
        PostRecord(id=44, type="event", title="Winter Gala", slug="winter-gala", status="publish"),
        PostRecord(id=45, type="product", title="Blue Mug", slug="", status="publish"),
        PostRecord(id=46, type="location", title="", slug="", status="publish"),
    ]


@pytest.fixture
def store(sample_records: list[PostRecord]) -> PostStore:
    """In-memory record store."""
    return PostStore(sample_records)


@pytest.fixture
def mock_cache_dir(tmp_path: Path) -> Path:
    """Create a mock cache directory for tests."""
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    return cache_dir


@pytest.fixture
def post_cache(mock_cache_dir: Path) -> PostCache:
    """File-backed object cache."""
    return PostCache(cache_dir=mock_cache_dir)


@pytest.fixture
def local_platform(store: PostStore, post_cache: PostCache) -> LocalPlatform:
    """Local platform over the sample store."""
    return LocalPlatform(store, cache=post_cache)


@pytest.fixture
def mock_platform() -> MagicMock:
    """Platform double that slugifies for real and never finds collisions."""
    platform = MagicMock()
    platform.sanitize_title.side_effect = sanitize_title
    platform.unique_post_slug.side_effect = lambda slug, *args: slug
    platform.is_revision.return_value = False
    platform.update_slug.return_value = 1
    return platform


@pytest.fixture
def log_messages() -> Iterator[list[dict]]:
    """Capture loguru records as dicts of message and extra fields."""
    captured: list[dict] = []

    def sink(message) -> None:
        record = message.record
        captured.append({"message": record["message"], "level": record["level"].name, **record["extra"]})

    handler_id = logger.add(sink, level="DEBUG")
    yield captured
    logger.remove(handler_id)
