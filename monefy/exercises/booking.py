"""Appointment scheduling helpers for a beauty salon."""

from datetime import datetime, timezone

# Dates that fail to parse come back as this moment, the zero time.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_SHORT_LAYOUT = "%m/%d/%Y %H:%M:%S"
_LONG_LAYOUT = "%B %d, %Y %H:%M:%S"
_FULL_LAYOUT = "%A, %B %d, %Y %H:%M:%S"


def _parse(date: str, layout: str) -> datetime:
    try:
        parsed = datetime.strptime(date, layout)
    except ValueError:
        return ZERO_TIME
    return parsed.replace(tzinfo=timezone.utc)


def schedule(date: str) -> datetime:
    """Parse a date such as "7/13/2020 20:32:00" as a UTC datetime."""
    return _parse(date, _SHORT_LAYOUT)


def has_passed(date: str) -> bool:
    """Return whether a date such as "October 3, 2019 20:32:00" lies in the past."""
    return datetime.now(timezone.utc) > _parse(date, _LONG_LAYOUT)


def is_afternoon_appointment(date: str) -> bool:
    """Return whether a date such as "Friday, March 8, 1974 12:02:02" is between 12:00 and 18:00."""
    return 12 <= _parse(date, _FULL_LAYOUT).hour < 18


def description(date: str) -> str:
    """Describe the appointment given as "6/6/2005 10:30:00"."""
    when = schedule(date)
    weekday = _WEEKDAYS[when.weekday()]
    month = _MONTHS[when.month - 1]
    return (
        f"You have an appointment on {weekday}, {month} {when.day}, "
        f"{when.year}, at {when.hour}:{when.minute}."
    )


def anniversary_date() -> datetime:
    """Return this year's salon anniversary, September 15, at midnight UTC."""
    return datetime(datetime.now().year, 9, 15, tzinfo=timezone.utc)