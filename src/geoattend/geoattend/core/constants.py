"""Domain constants and the default office settings."""

EARTH_RADIUS_M = 6_371_000
STANDARD_WORKDAY_HOURS = 8
WEEKLY_WINDOW_DAYS = 7
DEFAULT_RECENT_LOG_LIMIT = 5
DEFAULT_HISTORY_LIMIT = 30
MIN_ANOMALY_RECORDS = 5

DEFAULT_CORRECTION_NOTE = "Manual check-out time added by admin."
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

DEFAULT_OFFICE_SETTINGS = {
    "latitude": -6.930917,
    "longitude": 107.534083,
    "radius_m": 50,
    "work_start": "08:00",
    "work_end": "17:00",
    "late_tolerance_minutes": 15,
}
