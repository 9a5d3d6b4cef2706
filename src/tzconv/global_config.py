"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared defaults and keywords that many modules can import.
"""

# Core Names
PACKAGE_NAME = "tzconv"

# CLI defaults
DEFAULT_DEST_TZ = "gmt"

# Remainder keyword meaning "the host's local timezone"
LOCAL_KEYWORD = "local"

# Abbreviation collision policy: "last", "first" or "strict"
DEFAULT_COLLISION_POLICY = "last"

# Layout shared by the resolver templates and the date prefix for time-only input
REFERENCE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
