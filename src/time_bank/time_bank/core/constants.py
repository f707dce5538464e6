"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_BREAK_MINUTES = 60
DAILY_WORK_HOURS = 8
WEEKLY_WORK_HOURS = 40
WARNING_RATIO = 0.8
MINUTES_PER_HOUR = 60
DEFAULT_JOB_TITLE = "Not informed"
