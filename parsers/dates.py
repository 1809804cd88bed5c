"""Spent-date extraction for time entries."""

from __future__ import annotations

from datetime import date

from _errors import InvalidInputError
from parsers import _nldate

__all__ = ["parse_spent_date"]


def parse_spent_date(text: str) -> date:
    """Return the date a free-text entry should be booked against.

    A literal "today" anywhere in the text wins; otherwise the first date
    mention is used.

    Raises:
        InvalidInputError: If the text mentions no date.
    """
    now = _nldate.current_time()
    if "today" in text.lower():
        return now.date()

    mentions = _nldate.find_dates(text, now)
    if not mentions:
        raise InvalidInputError("Could not parse date from input")
    return mentions[0].start
