"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 1440

# Attendance policy. These are fixed rules, not configuration.
NOON_MINUTES = 720
MIDNIGHT_WRAP_MINUTES = -720
HALF_DAY_SHORTFALL_MINUTES = 240

DEFAULT_PAGE_SIZE = 10
DEFAULT_HISTORY_LIMIT = 30
RECENT_ACTIVITY_LIMIT = 5
UPCOMING_LEAVES_LIMIT = 3
DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6
