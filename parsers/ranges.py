"""Report date windows: "last week", "this month", "March 1 to March 5"."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from _errors import InvalidInputError
from parsers import _nldate

__all__ = ["ParsedDateRange", "parse_date_range"]

_CONNECTOR_RE = re.compile(r"^\s*(?:to|until|till|through|thru|-|–|and)\s*$", re.IGNORECASE)
_SINCE_RE = re.compile(r"\bsince\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedDateRange:
    """Inclusive date window; ``from_date <= to_date``."""

    from_date: date
    to_date: date

    def as_params(self) -> dict[str, str]:
        return {"from": self.from_date.isoformat(), "to": self.to_date.isoformat()}


def _last_month(today: date) -> tuple[date, date]:
    first_of_this = today.replace(day=1)
    return first_of_this - relativedelta(months=1), first_of_this - timedelta(days=1)


def _this_month(today: date) -> tuple[date, date]:
    return today.replace(day=1), today


def _this_week(today: date) -> tuple[date, date]:
    return _nldate.start_of_week(today), today


def _last_week(today: date) -> tuple[date, date]:
    start = _nldate.start_of_week(today) - timedelta(days=7)
    return start, start + timedelta(days=6)


# Checked in order; weeks start on Sunday.
_SHORTCUTS = (
    ("last month", _last_month),
    ("this month", _this_month),
    ("this week", _this_week),
    ("last week", _last_week),
)


def _ordered(start: date, end: date) -> ParsedDateRange:
    if end < start:
        start, end = end, start
    return ParsedDateRange(from_date=start, to_date=end)


def parse_date_range(text: str) -> ParsedDateRange:
    """Extract a ``(from, to)`` window from a report query.

    Raises:
        InvalidInputError: If no window can be derived from the text.
    """
    now = _nldate.current_time()
    today = now.date()
    lowered = text.lower()

    for phrase, window in _SHORTCUTS:
        if phrase in lowered:
            return _ordered(*window(today))

    mentions = _nldate.find_dates(text, now)
    if not mentions:
        raise InvalidInputError("Could not parse date range from input")

    first = mentions[0]
    if _SINCE_RE.search(text[: first.index]) or lowered.startswith("since", first.index):
        return _ordered(first.start, today)
    if len(mentions) > 1 and _CONNECTOR_RE.match(text[first.stop : mentions[1].index]):
        return _ordered(first.start, mentions[1].last)
    return _ordered(first.start, first.last)
