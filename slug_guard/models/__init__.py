"""Pydantic data models for slug-guard."""

from slug_guard.models.config import (
    GuardConfig,
    HookPriorities,
    LoggingConfig,
    ManagedTypesConfig,
)
from slug_guard.models.context import HookContext
from slug_guard.models.records import (
    PostDraft,
    PostQuery,
    PostRecord,
    RawPostInput,
    RepairResult,
)

__all__ = [
    # Records
    "PostDraft",
    "PostQuery",
    "PostRecord",
    "RawPostInput",
    "RepairResult",
    # Context
    "HookContext",
    # Config
    "GuardConfig",
    "HookPriorities",
    "LoggingConfig",
    "ManagedTypesConfig",
]
