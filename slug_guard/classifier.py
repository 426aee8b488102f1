"""Decides which content types the slug repair applies to."""

from typing import Any

from slug_guard.constants import GENERIC_TYPES, RECURRING_EVENT_TYPE
from slug_guard.models.config import ManagedTypesConfig


def managed_types(config: ManagedTypesConfig | None = None) -> frozenset[str]:
    """
    Build the managed-type set.

    The calendar plugin's event and location tags are optional; when they are
    not configured the set simply leaves them out.

    Args:
        config: Managed-type configuration, defaults to no calendar tags

    Returns:
        Frozen set of exact type tags

    Examples:
        >>> sorted(managed_types(ManagedTypesConfig(event_type="event")))
        ['event', 'event-recurring', 'page', 'post']
    """
    config = config if config is not None else ManagedTypesConfig()

    types: set[str] = set()
    if config.event_type:
        types.add(config.event_type)
    if config.location_type:
        types.add(config.location_type)

    types.add(RECURRING_EVENT_TYPE)

    if config.include_generic_types:
        types.update(GENERIC_TYPES)

    return frozenset(types)


def is_managed_type(type_tag: Any, types: frozenset[str] | None = None) -> bool:
    """
    Check whether a record's type tag is managed.

    Matching is exact and case-sensitive; non-string tags never match.

    Args:
        type_tag: Record type tag
        types: Managed-type set, rebuilt from defaults when omitted

    Returns:
        True if the tag is a member of the set
    """
    if not type_tag or not isinstance(type_tag, str):
        return False

    if types is None:
        types = managed_types()

    return type_tag in types
