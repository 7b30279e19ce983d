"""
Calendar period resolution for reports.

Month tokens look like ``2024-03`` and year tokens like ``2024``. Token shape
is checked at the API boundary; the functions here assume well-formed input.
"""
import re
from datetime import datetime, timedelta
from typing import Callable, NamedTuple

Clock = Callable[[], datetime]

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
YEAR_PATTERN = r"^\d{4}$"

_MONTH_RE = re.compile(MONTH_PATTERN)
_YEAR_RE = re.compile(YEAR_PATTERN)


class DateRange(NamedTuple):
    """Inclusive [start, end] timestamps."""
    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def is_month_token(value: str) -> bool:
    return bool(_MONTH_RE.match(value))


def is_year_token(value: str) -> bool:
    return bool(_YEAR_RE.match(value))


def _end_of_day(day: datetime) -> datetime:
    return day.replace(hour=23, minute=59, second=59, microsecond=999000)


def _month_bounds(year: int, month: int) -> DateRange:
    start = datetime(year, month, 1)
    # Day 0 of the next month is the last day of this one
    if month == 12:
        first_of_next = datetime(year + 1, 1, 1)
    else:
        first_of_next = datetime(year, month + 1, 1)
    last_day = first_of_next - timedelta(days=1)
    return DateRange(start, _end_of_day(last_day))


def month_range(month_token: str) -> DateRange:
    """First instant to last millisecond of the given month."""
    year, month = month_token.split("-")
    return _month_bounds(int(year), int(month))


def year_range(year_token: str) -> DateRange:
    """January 1st 00:00:00.000 to December 31st 23:59:59.999."""
    year = int(year_token)
    return DateRange(datetime(year, 1, 1), _month_bounds(year, 12).end)


def year_months(year_token: str) -> list[str]:
    """The twelve month tokens of a year, in calendar order."""
    return [f"{year_token}-{month:02d}" for month in range(1, 13)]


def year_ranges(year_token: str) -> list[tuple[str, DateRange]]:
    """One (month_token, range) pair per month, 01 through 12."""
    return [(token, month_range(token)) for token in year_months(year_token)]


def month_of(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}"


def current_month_token(clock: Clock = datetime.now) -> str:
    return month_of(clock())


def current_year_token(clock: Clock = datetime.now) -> str:
    return f"{clock().year:04d}"
