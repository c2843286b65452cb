"""Date parsing utilities."""

from datetime import date, datetime
from typing import Union

from dateutil import parser as date_parser


def parse_date(value: Union[str, date], day_first: bool = False) -> date:
    """Parse a statement date into a date object.

    Accepts ISO dates ("2024-01-15"), numeric dates in either day or month
    first order ("15/01/2024", "1/15/24") and written dates
    ("Jan 15, 2024").

    Args:
        value: Date string, or an already parsed date
        day_first: Read ambiguous numeric dates as day/month/year

    Returns:
        Date object

    Raises:
        ValueError: If the date cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    if not text:
        raise ValueError("Empty date string")
    try:
        return date_parser.parse(text, dayfirst=day_first).date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{text}': {e}")
