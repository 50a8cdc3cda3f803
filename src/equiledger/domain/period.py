"""Calendar-month periods and the month filter."""

import calendar
import re
from datetime import date, datetime, UTC
from typing import Callable, Iterable, TypeVar, Union

from equiledger.domain.errors import ValidationError, invalid_month_key

T = TypeVar("T")

MONTH_KEY_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def parse_month_key(month_key: str) -> tuple[int, int]:
    """Parse a "YYYY-MM" key into (year, month) with month in 1..12.

    Raises:
        ValidationError: If the key is not YYYY-MM shaped or the month is out of range
    """
    match = MONTH_KEY_RE.match(month_key or "")
    if match is None:
        raise ValidationError(invalid_month_key(month_key))
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(invalid_month_key(month_key))
    return year, month


def month_key_for(value: Union[date, datetime]) -> str:
    """Return the YYYY-MM key a date or datetime falls in."""
    value = to_local(value)
    return f"{value.year:04d}-{value.month:02d}"


def current_month_key() -> str:
    """Return the month key for today."""
    return month_key_for(date.today())


def month_label(month_key: str) -> str:
    """Human-readable label, e.g. "01/2024"."""
    year, month = parse_month_key(month_key)
    return f"{month:02d}/{year:04d}"


def days_in_month(month_key: str) -> int:
    """Number of days in the month."""
    year, month = parse_month_key(month_key)
    return calendar.monthrange(year, month)[1]


def to_local(value: Union[date, datetime]) -> Union[date, datetime]:
    # Aware datetimes are decomposed in local time; naive values are taken as-is.
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone()
    return value


def to_utc(value: datetime) -> datetime:
    """Return the UTC instant of a datetime; naive values are read as local time."""
    return value.astimezone(UTC)


def filter_by_month(
    entries: Iterable[T],
    month_key: str,
    date_selector: Callable[[T], Union[date, datetime]],
) -> list[T]:
    """Return the entries whose selected date falls in the calendar month.

    Args:
        entries: Ledger entries (sales, expenses, ...)
        month_key: Month as "YYYY-MM"
        date_selector: Function returning the date used for filtering

    Returns:
        New list in the original relative order
    """
    year, month = parse_month_key(month_key)
    result = []
    for entry in entries:
        value = to_local(date_selector(entry))
        if value.year == year and value.month == month:
            result.append(entry)
    return result


def filter_by_year(
    entries: Iterable[T],
    year: int,
    date_selector: Callable[[T], Union[date, datetime]],
) -> list[T]:
    """Return the entries whose selected date falls in the given year."""
    return [entry for entry in entries if to_local(date_selector(entry)).year == year]


def sale_date(sale) -> datetime:
    """Sales are filtered on their creation timestamp."""
    return sale.created_at


def expense_date(expense) -> date:
    """Expenses are filtered on the user-chosen expense date."""
    return expense.expense_date
