"""Calendar month utilities.

Months are represented as the ``date`` of their first day throughout
ledgerlens, so they sort chronologically and compare by value.
"""

from datetime import date, datetime
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def month_start(year: int, month: int) -> date:
    """Return the first day of the given month.

    Raises:
        ValueError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}: expected a value between 1 and 12")
    return date(year, month, 1)


def to_month(value: date | datetime) -> date:
    """Truncate a date or datetime to the first day of its month."""
    return date(value.year, value.month, 1)


def shift_month(month: date, offset: int) -> date:
    """Move a month forwards (positive offset) or backwards."""
    return to_month(month) + relativedelta(months=offset)


def previous_month(month: date) -> date:
    return shift_month(month, -1)


def is_in_month(value: date, month: date) -> bool:
    return value.year == month.year and value.month == month.month


def parse_month(month_str: str) -> date:
    """Parse a month string into the first day of that month.

    Supports:
    - "2024-03", "2024/03", "March 2024" and any full date
    - Relative months: "this month", "last month", "next month"

    Args:
        month_str: Month string in various formats

    Returns:
        First day of the month

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    today = date.today()

    relative_months = {
        "this month": 0,
        "current": 0,
        "last month": -1,
        "previous month": -1,
        "next month": 1,
    }
    if month_str in relative_months:
        return shift_month(today, relative_months[month_str])

    # "YYYY-MM" would otherwise be read by dateutil as today's day of that month
    parts = month_str.replace("/", "-").split("-")
    if len(parts) == 2 and all(part.isdigit() for part in parts):
        year, month = int(parts[0]), int(parts[1])
        return month_start(year, month)

    try:
        dt = date_parser.parse(month_str, default=datetime(today.year, 1, 1))
        return to_month(dt)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
