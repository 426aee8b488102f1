"""Configuration models for slug-guard."""

import os
from typing import Literal

from pydantic import BaseModel, Field

from slug_guard.constants import (
    EVENT_TYPE_ENV,
    LOCATION_TYPE_ENV,
    POST_LOAD_PRIORITY,
    PRE_SAVE_PRIORITY,
)


class ManagedTypesConfig(BaseModel):
    """Type tags the repair handlers are responsible for."""

    event_type: str | None = Field(
        default=None, description="Event type tag contributed by the calendar plugin"
    )
    location_type: str | None = Field(
        default=None, description="Location type tag contributed by the calendar plugin"
    )
    include_generic_types: bool = Field(
        default=True, description="Also repair generic page/post records"
    )


class HookPriorities(BaseModel):
    """Subscription priorities for the two handlers."""

    pre_save: int = Field(default=PRE_SAVE_PRIORITY)
    post_load: int = Field(default=POST_LOAD_PRIORITY)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="30 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class GuardConfig(BaseModel):
    """Complete slug-guard configuration."""

    managed_types: ManagedTypesConfig = Field(default_factory=ManagedTypesConfig)
    priorities: HookPriorities = Field(default_factory=HookPriorities)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = Field(default=False, description="Emit repair log lines")

    def with_env_overrides(self) -> "GuardConfig":
        """
        Fill calendar type tags from the environment where not configured.

        Returns:
            New GuardConfig; explicit values in the file win over the environment
        """
        types = self.managed_types
        resolved = types.model_copy(
            update={
                "event_type": types.event_type or os.getenv(EVENT_TYPE_ENV) or None,
                "location_type": types.location_type or os.getenv(LOCATION_TYPE_ENV) or None,
            }
        )
        return self.model_copy(update={"managed_types": resolved})
