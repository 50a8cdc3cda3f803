"""Date and month parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from equiledger.domain.period import month_key_for, parse_month_key

MONTH_KEY_RE = re.compile(r"^\d{4}-\d{1,2}$")
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15/01/2024" (day first), "January 15, 2024"
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        # Day-first only applies to non-ISO input; YYYY-MM-DD is never reordered
        if ISO_DATE_RE.match(date_str):
            return date_parser.isoparse(date_str).date()
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> str:
    """Parse a month argument into a "YYYY-MM" key.

    Accepts "2024-01", "this month", "last month", "next month" (with a
    space or a dash) or any date parse_date understands.

    Raises:
        ValueError: If the month cannot be parsed
    """
    text = month_str.strip().lower().replace("-", " ") if month_str else ""
    today = date.today()

    if MONTH_KEY_RE.match(month_str.strip() if month_str else ""):
        year, month = parse_month_key(month_str.strip())
        return f"{year:04d}-{month:02d}"

    relative_months = {
        "this month": today,
        "last month": today - relativedelta(months=1),
        "next month": today + relativedelta(months=1),
    }
    if text in relative_months:
        return month_key_for(relative_months[text])

    return month_key_for(parse_date(month_str))
