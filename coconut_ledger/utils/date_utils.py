"""Date manipulation utilities"""

from datetime import date, datetime

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_record_date(value) -> date:
    """
    Parse a stored record date to day granularity.

    Accepts date/datetime objects, ISO dates ("2024-01-05") and ISO
    datetimes as written by the document store ("2024-01-05T00:00:00.000Z").

    Raises:
        ValueError: If the value is not a recognisable date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Not a date: {value!r}")

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def month_start(day: date) -> date:
    """First day of the month containing day"""
    return day.replace(day=1)


def format_month_label(year: int, month: int) -> str:
    """Fixed-locale month label, e.g. 'Jan 2024'"""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"
