"""Date helpers for ISO (YYYY-MM-DD) keyed meal plans.

Weeks start on Monday. Imported plans number weekdays Sunday=0..Saturday=6,
so ``js_weekday`` converts a date into that numbering.
"""
from datetime import date, datetime, timedelta
from typing import Optional, Union

from mealplan.utilities.constants import ISO_DATE_FORMAT

DateLike = Union[date, str]


def parse_iso(value: DateLike) -> Optional[date]:
    """Return a date for an ISO string (or date), or None if it cannot be parsed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def format_iso(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def add_days(value: DateLike, days: int) -> Optional[str]:
    """Shift an ISO date by a number of days; None for unparseable input."""
    d = parse_iso(value)
    if d is None:
        return None
    return format_iso(d + timedelta(days=days))


def previous_day(value: DateLike) -> Optional[str]:
    return add_days(value, -1)


def week_start(value: Optional[DateLike] = None, week_offset: int = 0) -> date:
    """Monday of the week containing ``value`` (today by default), shifted by whole weeks."""
    d = parse_iso(value) if value is not None else date.today()
    if d is None:
        d = date.today()
    monday = d - timedelta(days=d.weekday())
    return monday + timedelta(weeks=week_offset)


def week_dates(start: DateLike, days: int = 7) -> list[str]:
    d = parse_iso(start)
    if d is None:
        return []
    return [format_iso(d + timedelta(days=i)) for i in range(days)]


def js_weekday(value: date) -> int:
    """Weekday with Sunday=0 .. Saturday=6."""
    return (value.weekday() + 1) % 7


def day_name(value: date, short: bool = False) -> str:
    return value.strftime("%a" if short else "%A")
