"""Priority-ordered filter registry.

Mirrors the host platform's filter dispatch: each subscriber receives the
value returned by the previous one, lower priorities run first and equal
priorities keep registration order.
"""

from collections.abc import Callable
from itertools import count
from typing import Any

from slug_guard.constants import DEFAULT_PRIORITY
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)

FilterCallback = Callable[..., Any]


class HookRegistry:
    """Named filter hooks with numeric priorities."""

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, FilterCallback]]] = {}
        self._sequence = count()

    def add_filter(
        self, name: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """
        Subscribe a callback to a filter hook.

        Args:
            name: Hook name
            callback: Called as ``callback(value, *args)``, returns the new value
            priority: Lower runs earlier
        """
        self._filters.setdefault(name, []).append((priority, next(self._sequence), callback))
        logger.debug("Filter added", hook=name, priority=priority)

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        """
        Unsubscribe a callback from a filter hook.

        Returns:
            True if the callback was subscribed
        """
        subscribers = self._filters.get(name, [])
        remaining = [entry for entry in subscribers if entry[2] != callback]
        self._filters[name] = remaining
        return len(remaining) != len(subscribers)

    def has_filter(self, name: str, callback: FilterCallback | None = None) -> bool:
        """Check for any subscriber, or for a specific one."""
        subscribers = self._filters.get(name, [])
        if callback is None:
            return bool(subscribers)
        return any(entry[2] == callback for entry in subscribers)

    def priority_of(self, name: str, callback: FilterCallback) -> int | None:
        """Priority a callback is subscribed with, or None."""
        for priority, _, subscribed in self._filters.get(name, []):
            if subscribed == callback:
                return priority
        return None

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """
        Run a value through every subscriber of a hook.

        Args:
            name: Hook name
            value: Value to filter
            *args: Extra arguments passed unchanged to every subscriber

        Returns:
            Value returned by the last subscriber (or the input if none)
        """
        for _, _, callback in sorted(self._filters.get(name, []), key=lambda e: (e[0], e[1])):
            value = callback(value, *args)
        return value
