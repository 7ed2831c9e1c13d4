"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/Chicago"

# Sunday..Saturday reporting week; date.weekday() numbering (Monday=0).
WEEK_END_WEEKDAY = 5
WEEK_LENGTH_DAYS = 7

ISO_DATE_FORMAT = "%Y-%m-%d"

CSV_HEADERS = (
    "Employee Name",
    "Date",
    "Day",
    "Punch In",
    "Punch Out",
    "Lunch Start",
    "Lunch End",
    "Total Hours",
    "Status",
)

REQUIRED_TABLES = ("employees", "punch_records", "time_entries")

# Width of the name columns in database/schema.sql.
MAX_NAME_LENGTH = 100
