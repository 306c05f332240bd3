from .numeric import parse_numeric, round_half_up
from .date_range import DateRange, DateRangeCalculator, today, months_ago, format_date, parse_date

__all__ = [
    "parse_numeric", "round_half_up",
    "DateRange", "DateRangeCalculator", "today", "months_ago", "format_date", "parse_date",
]
