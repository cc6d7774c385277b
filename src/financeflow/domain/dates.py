import re
from collections.abc import Callable
from datetime import date, timedelta

from financeflow.domain.text import normalize

_FULL_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_DAY_MONTH = re.compile(r"(\d{1,2})/(\d{1,2})")

_RELATIVE_DAYS = {
    "hoje": 0,
    "ontem": -1,
    "amanha": 1,
}


def _calendar_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        # 31/02, 00/05, 10/13 ... are not dates
        return None


def _parse_full(token: str, today: date) -> date | None:
    match = _FULL_DATE.fullmatch(token)
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    return _calendar_date(year, month, day)


def _parse_day_month(token: str, today: date) -> date | None:
    match = _DAY_MONTH.fullmatch(token)
    if not match:
        return None
    day, month = (int(part) for part in match.groups())
    return _calendar_date(today.year, month, day)


def _parse_relative(token: str, today: date) -> date | None:
    offset = _RELATIVE_DAYS.get(token)
    if offset is None:
        return None
    return today + timedelta(days=offset)


# Tried in order, first hit wins
DATE_PARSERS: tuple[Callable[[str, date], date | None], ...] = (
    _parse_full,
    _parse_day_month,
    _parse_relative,
)


def parse_date_token(token: str | None, today: date) -> date | None:
    """
    Parse a single token as a date: ``DD/MM/YYYY``, ``DD/MM`` (year of
    ``today``), ``hoje``, ``ontem`` or ``amanha``.

    The whole token must match. Returns ``None`` for anything else,
    including numerically malformed dates.
    """
    normalized = normalize(token).strip()
    if not normalized:
        return None
    for parser in DATE_PARSERS:
        parsed = parser(normalized, today)
        if parsed is not None:
            return parsed
    return None


def parse_display_date(value: str | None) -> date | None:
    """Parse a complete ``DD/MM/YYYY`` string, as sent by the chat bot."""
    if not value:
        return None
    match = _FULL_DATE.fullmatch(value.strip())
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    return _calendar_date(year, month, day)
