"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MIN_HOURS_WORKED = Decimal("1")
MAX_HOURS_WORKED = Decimal("200")
MIN_HOURLY_RATE = Decimal("0")
MAX_HOURLY_RATE = Decimal("1000")
MAX_NOTES_LENGTH = 500

DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_MAX_CONTENT_LENGTH = 10 * 1024 * 1024

# monthly_claims stores hours and rate as DECIMAL(10, 2)
DECIMAL_QUANTUM = Decimal("0.01")
