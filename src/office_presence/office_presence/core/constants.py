"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REQUIRED_PERCENT = 40
DEFAULT_EMPLOYMENT_FRACTION = 100
DEFAULT_HOLIDAY_REGION = "PL"
DEFAULT_LOCALE = "pl"
DEFAULT_SESSION_DAYS = 7

YEAR_MONTH_FORMAT = "%Y-%m"
MIN_PASSWORD_LENGTH = 6
