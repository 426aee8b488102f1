"""Slug repair hook handlers."""

from slug_guard.handlers.common import needs_fix
from slug_guard.handlers.post_load import fix_loaded_records
from slug_guard.handlers.pre_save import fix_empty_slug_before_save

__all__ = [
    "fix_empty_slug_before_save",
    "fix_loaded_records",
    "needs_fix",
]
