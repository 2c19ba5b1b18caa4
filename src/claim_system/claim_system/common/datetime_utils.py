from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def first_of_month(value: date) -> date:
    return date(value.year, value.month, 1)


def normalize_claim_month(value: Optional[Union[date, str]], *, today: date) -> date:
    """Return the first day of the claimed month.

    Accepts a date/datetime or a ``YYYY-MM`` / ``YYYY-MM-DD`` string. Missing,
    unparseable or non-text input falls back to the current month.
    """
    if isinstance(value, date):
        return first_of_month(value)

    text = value.strip() if isinstance(value, str) else ""
    for fmt in ("%Y-%m-%d", "%Y-%m"):
        try:
            return first_of_month(datetime.strptime(text, fmt).date())
        except ValueError:
            continue
    return first_of_month(today)


def format_period(year: int, month: int) -> str:
    """Report label, e.g. ``January 2024``."""
    return date(year, month, 1).strftime("%B %Y")
