"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

CNIC_PATTERN = r"^[0-9]{5}-[0-9]{7}-[0-9]$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
CLOCK_TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 15
TITLE_MAX_LENGTH = 100
DEPT_NAME_MAX_LENGTH = 100
INSTRUCTOR_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 255
SESSION_TITLE_MAX_LENGTH = 200
LOCATION_MAX_LENGTH = 200
TEXT_MAX_LENGTH = 2000

MIN_RATING = Decimal("1.0")
MAX_RATING = Decimal("5.0")
MONEY_DECIMAL_PLACES = 2
# DECIMAL(12, 2) and signed INT columns
MONEY_MAX = Decimal("9999999999.99")
INT_MAX = 2**31 - 1

DEFAULT_POOL_SIZE = 10
DEFAULT_CONNECTION_TIMEOUT = 10
DEFAULT_LIST_LIMIT = 500

TRANSIENT_ERROR_MESSAGE = "The database is unavailable, please try again."
