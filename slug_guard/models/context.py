"""Per-dispatch flags that the platform normally keeps in process state."""

import os

from pydantic import BaseModel, Field

from slug_guard.constants import AUTOSAVE_ENV, DEBUG_ENV

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class HookContext(BaseModel):
    """Flags read by the handlers on each dispatch."""

    doing_autosave: bool = Field(default=False, description="Current save is an autosave")
    debug: bool = Field(default=False, description="Emit repair log lines")

    @classmethod
    def from_env(cls) -> "HookContext":
        """
        Build a context from environment variables.

        Returns:
            HookContext with flags from SLUG_GUARD_DOING_AUTOSAVE and SLUG_GUARD_DEBUG
        """
        return cls(doing_autosave=_env_flag(AUTOSAVE_ENV), debug=_env_flag(DEBUG_ENV))
