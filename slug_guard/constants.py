"""Application-wide constants.

Hook names, priorities and the fixed members of the managed-type set live here
so the handlers, the registry and the CLI agree on them.
"""

# Hook Names
PRE_SAVE_HOOK = "insert_post_data"  # Fired after sanitization, before the row is written
POST_LOAD_HOOK = "the_posts"  # Fired on every freshly loaded batch of records

# Hook Priorities (lower runs first)
DEFAULT_PRIORITY = 10
PRE_SAVE_PRIORITY = 50  # Calendar plugin reads the slug at 100
POST_LOAD_PRIORITY = 1
CALENDAR_PLUGIN_PRIORITY = 100

# Managed Types
RECURRING_EVENT_TYPE = "event-recurring"
GENERIC_TYPES = ("page", "post")  # Multilingual duplicates hit these too
REVISION_TYPE = "revision"

# Environment
EVENT_TYPE_ENV = "EM_POST_TYPE_EVENT"
LOCATION_TYPE_ENV = "EM_POST_TYPE_LOCATION"
AUTOSAVE_ENV = "SLUG_GUARD_DOING_AUTOSAVE"
DEBUG_ENV = "SLUG_GUARD_DEBUG"

# Slug Generation
SLUG_MAX_LENGTH = 200  # Width of the slug column
SLUG_FIRST_SUFFIX = 2  # First counter appended on collision

# Logging
LOG_TAG = "[slug-guard]"
