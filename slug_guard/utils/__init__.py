"""Utility functions and helpers."""

from slug_guard.utils.cache import PostCache
from slug_guard.utils.config_loader import load_guard_config
from slug_guard.utils.logging import get_logger, setup_logging
from slug_guard.utils.slug import is_numeric_slug, sanitize_title, slug_matches_id, unique_slug

__all__ = [
    "PostCache",
    "setup_logging",
    "get_logger",
    "sanitize_title",
    "is_numeric_slug",
    "slug_matches_id",
    "unique_slug",
    "load_guard_config",
]
