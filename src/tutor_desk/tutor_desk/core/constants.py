"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_INVOICE_DUE_DAYS = 30
DEFAULT_HOURLY_RATE = 50.0

# "2025-08", used by the invoice month picker
ISO_MONTH_FORMAT = "%Y-%m"
ISO_DATE_FORMAT = "%Y-%m-%d"

LESSON_DATE_CACHE_PREFIX = "lesson_dates"
GRID_KEY_SEPARATOR = "|"
