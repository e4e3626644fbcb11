"""Date and time strings for trip requests."""

import re
from datetime import datetime

_REQUEST_DATE = re.compile(r"[0-9]{8}")
_REQUEST_TIME = re.compile(r"[0-9]{4}")


def format_request_datetime(moment: datetime) -> tuple[str, str]:
    """Format a departure moment as the (YYYYMMDD, HHMM) pair the routing API expects."""
    return moment.strftime("%Y%m%d"), moment.strftime("%H%M")


def validate_request_datetime(date: str, time: str) -> None:
    """Check that date is YYYYMMDD and time is HHMM.

    Raises:
        ValueError: If either string is malformed or names an impossible date or time.
    """
    if not _REQUEST_DATE.fullmatch(date):
        raise ValueError(f"Date must be formatted as YYYYMMDD, got {date!r}")
    if not _REQUEST_TIME.fullmatch(time):
        raise ValueError(f"Time must be formatted as HHMM, got {time!r}")
    try:
        datetime.strptime(f"{date}{time}", "%Y%m%d%H%M")
    except ValueError as e:
        raise ValueError(f"Invalid request date/time {date} {time}: {e}") from e
