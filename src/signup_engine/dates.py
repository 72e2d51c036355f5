# signup_engine/dates.py
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from signup_engine.errors import ParseError

CENTURY = 2000


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(
        f"Expected datetime.date or datetime.datetime, got {type(value)!r}"
    )


def parse_date(text: str) -> date:
    """
    Parse an "M/D/YY" token. YY is read as 2000 + YY.

    Raises ParseError on the wrong number of parts, non-numeric parts or
    impossible calendar values.
    """
    if not isinstance(text, str):
        raise ParseError(f"Date token must be text, got {type(text).__name__}")
    token = text.strip()
    parts = token.split("/")
    if len(parts) != 3:
        raise ParseError(f"Expected M/D/YY, got {text!r}", token=token)

    month_s, day_s, year_s = parts
    if not all(p.isdigit() and p.isascii() for p in parts):
        raise ParseError(f"Non-numeric date part in {text!r}", token=token)
    if not (1 <= len(month_s) <= 2 and 1 <= len(day_s) <= 2) or len(year_s) != 2:
        raise ParseError(f"Expected M/D/YY, got {text!r}", token=token)

    try:
        return date(CENTURY + int(year_s), int(month_s), int(day_s))
    except ValueError as exc:
        raise ParseError(f"Impossible calendar date {text!r}", token=token) from exc


def format_date(value: date | datetime) -> str:
    """Render "M/D" (no year, no zero padding)."""
    d = as_date(value)
    return f"{d.month}/{d.day}"


def same_date(a: date | datetime, b: date | datetime) -> bool:
    """Calendar-date equality, ignoring any time-of-day component."""
    return as_date(a) == as_date(b)


def parse_date_list(text: str) -> list[date]:
    """
    Parse a comma-separated availability field in listed order.
    Duplicates are kept; blank tokens (e.g. a trailing comma) are skipped.
    """
    if text is None:
        return []
    return [parse_date(tok.strip()) for tok in str(text).split(",") if tok.strip()]


def format_date_list(dates: Iterable[date | datetime]) -> str:
    return ", ".join(format_date(d) for d in dates)
