"""
Date Range Calculator - calendar-correct dates for time-scoped points queries

All dates are rendered as zero-padded ``YYYY-MM-DD`` strings, the format the
points API expects for ``startDate``/``endDate``.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from dateutil.relativedelta import relativedelta

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range"""
    start_date: str
    end_date: str


def format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string (raises ValueError on anything else)"""
    return datetime.strptime(value, DATE_FORMAT).date()


class DateRangeCalculator:
    """
    Computes today's date and whole-month offsets from it.

    ``clock`` returns the current wall-clock date; it is read on every call,
    nothing is cached.
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        self._clock = clock or date.today

    def _now(self) -> date:
        now = self._clock()
        if isinstance(now, datetime):
            return now.date()
        return now

    def today(self) -> str:
        return format_date(self._now())

    def months_ago(self, months: int) -> str:
        """
        The calendar date ``months`` whole months before today.

        When the day-of-month does not exist in the target month
        (e.g. March 31 minus 1 month) the result rolls back to the last
        day of the target month.
        """
        if months < 0:
            raise ValueError("months must be >= 0")

        return format_date(self._now() - relativedelta(months=months))

    def last_months(self, months: int) -> DateRange:
        """Predefined range ``[months_ago(months), today()]``"""
        return DateRange(start_date=self.months_ago(months), end_date=self.today())


_default_calculator = DateRangeCalculator()


def today() -> str:
    return _default_calculator.today()


def months_ago(months: int) -> str:
    return _default_calculator.months_ago(months)
