"""Filter engine - reduce a record set to a calendar time window"""

from datetime import date
from typing import List, Optional

from coconut_ledger.domain.models import FilterMode, Record


def _in_window(record_date: Optional[date], mode: FilterMode, reference_date: date) -> bool:
    if not isinstance(record_date, date):
        return False
    if record_date.year != reference_date.year:
        return False
    if mode == FilterMode.YEAR:
        return True
    if record_date.month != reference_date.month:
        return False
    if mode == FilterMode.MONTH:
        return True
    return record_date.day == reference_date.day


def filter_records(records: List[Record], mode: FilterMode, reference_date: date) -> List[Record]:
    """
    Keep records falling in the window around reference_date.

    Modes:
    - all:   every record, unchanged
    - day:   same year, month and day
    - month: same calendar month and year
    - year:  same calendar year

    Input order is preserved and the input list is never modified.
    Records without a usable date only survive the 'all' mode.
    """
    mode = FilterMode(mode)
    if mode == FilterMode.ALL:
        return list(records)
    return [r for r in records if _in_window(r.date, mode, reference_date)]


def filter_by_period(
    records: List[Record],
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[Record]:
    """
    Dashboard period filter. None means "All" for that component.

    Year and month are matched independently, so month=3 with no year keeps
    every March regardless of year.
    """
    return [
        r for r in records
        if isinstance(r.date, date)
        and (year is None or r.date.year == year)
        and (month is None or r.date.month == month)
    ]
