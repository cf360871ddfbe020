# apps/goals/domain/dates.py
import re
from datetime import date, datetime, timedelta

from dateutil import parser as date_parser

from apps.goals.domain.exceptions import InvalidInput

# Format kanoniczny: zawsze z zerami (2025-01-05), nigdy "2025-1-5"
DAY_FORMAT = "%Y-%m-%d"

# Date picker zwraca "YYYY-M-D" (bez zer), akceptujemy oba warianty
_DAY_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")

DEFAULT_DAY = date(2025, 1, 1)


def parse_day(value) -> date:
    """Zamienia date/datetime/tekst 'YYYY-M-D' na obiekt date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _DAY_RE.match(value.strip()):
        try:
            return date_parser.parse(value.strip(), yearfirst=True, dayfirst=False).date()
        except (ValueError, OverflowError):
            pass
    raise InvalidInput(f"Invalid calendar date: {value!r}")


def format_day(value) -> str:
    return parse_day(value).strftime(DAY_FORMAT)


def days_back(today, offset: int) -> date:
    return parse_day(today) - timedelta(days=offset)
