"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DURATION_MINUTES = 60

# Column widths in database/schema.sql; both record-store backends enforce them.
MAX_ID_LENGTH = 64
MAX_USERNAME_LENGTH = 128
MAX_TEXT_LENGTH = 255
MAX_PHONE_LENGTH = 64
MAX_YEAR_LENGTH = 32

# MySQL server error for a violated UNIQUE / PRIMARY KEY index.
MYSQL_DUPLICATE_ENTRY_ERRNO = 1062

# Range of the MySQL INT column holding a session duration.
MIN_INT_COLUMN = -(2 ** 31)
MAX_INT_COLUMN = 2 ** 31 - 1
