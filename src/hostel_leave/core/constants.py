"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

LEAVE_CACHE_KEY = "leaveRequests"

DEFAULT_FROM_TIME = "00:00"
DEFAULT_TO_TIME = "23:59"

DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 30.0
DEFAULT_LIST_LIMIT = 500
