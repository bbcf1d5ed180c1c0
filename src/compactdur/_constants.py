"""Limits and defaults for compact duration parsing."""

INT64_MAX = 2**63 - 1
"""Largest value a single term may carry."""

DEFAULT_MAX_INPUT_LENGTH = 256
"""Maximum duration text length accepted by deserialize()."""

DEFAULT_BACKEND = "timedelta"
"""Name of the backend used when none is given."""

MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
"""Fixed month length; months are not calendar-relative."""

DAYS_PER_YEAR = 365
"""Fixed year length; years are not calendar-relative."""
