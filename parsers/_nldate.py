"""Date mentions in free text, resolved with python-dateutil.

``find_dates`` scans a string for the date expressions people type into a
timesheet ("yesterday", "last friday", "March 5th", "2025-03-01",
"3 days ago", "in February") and returns them in text order.

Bare duration phrases ("30 minutes", "2 hours") also resolve to a point in
time (now plus the duration) but are *weak*: they are only returned when
the text mentions no other date.

Everything reads the clock through :func:`current_time` so tests can pin
"now" with ``unittest.mock.patch``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

__all__ = ["DateMention", "current_time", "find_dates", "start_of_week"]


def current_time() -> datetime:
    """Return local wall-clock time (naive)."""
    return datetime.now()


def start_of_week(day: date) -> date:
    """Return the Sunday on or before *day*."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


@dataclass(frozen=True)
class DateMention:
    """A resolved date expression and where it sits in the source text."""

    start: date
    end: date | None = None
    index: int = 0
    stop: int = 0
    weak: bool = False

    @property
    def last(self) -> date:
        return self.end or self.start


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

_NUMBER_WORDS: dict[str, int] = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

_UNIT_NAMES: dict[str, str] = {
    "m": "minutes",
    "minute": "minutes",
    "min": "minutes",
    "h": "hours",
    "hour": "hours",
    "hr": "hours",
    "day": "days",
    "week": "weeks",
    "month": "months",
    "year": "years",
}

_RELATIVE_DAYS: dict[str, int] = {
    "today": 0,
    "tonight": 0,
    "yesterday": -1,
    "tomorrow": 1,
}

_WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_NUMBER = r"(\d+|an?|one|two|three|four|five|six|seven|eight|nine|ten)"
_UNIT = r"(minute|min|hour|hr|day|week|month|year)s?"
_MONTH = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"
# Duration tokens ("2h", "30m", "3 days") used as weak forward offsets.
_DURATION_UNIT = r"(minute|min|month|m|hour|hr|h|day|week|year)s?"


def _amount(word: str) -> int:
    word = word.lower()
    return int(word) if word.isdigit() else _NUMBER_WORDS[word]


def _shift(now: datetime, unit: str, amount: int) -> date | None:
    try:
        return (now + relativedelta(**{_UNIT_NAMES[unit.lower()]: amount})).date()
    except (ValueError, OverflowError):
        return None


def _parse_fragment(fragment: str, now: datetime) -> date | None:
    """Convert a matched date fragment, defaulting the year to the current one."""
    try:
        return date_parser.parse(fragment.replace(".", ""), default=datetime(now.year, 1, 1)).date()
    except (ValueError, OverflowError):
        return None


# ---------------------------------------------------------------------------
# Resolvers: (match, now) -> (start, end) or None
# ---------------------------------------------------------------------------

_Span = tuple[date, date | None]


def _iso(match: re.Match[str], now: datetime) -> _Span | None:
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3))), None
    except ValueError:
        return None


def _fragment(match: re.Match[str], now: datetime) -> _Span | None:
    parsed = _parse_fragment(match.group(0), now)
    return (parsed, None) if parsed else None


def _relative_day(match: re.Match[str], now: datetime) -> _Span:
    return now.date() + timedelta(days=_RELATIVE_DAYS[match.group(1).lower()]), None


def _offset(now: datetime, unit: str, amount: int) -> _Span | None:
    shifted = _shift(now, unit, amount)
    return (shifted, None) if shifted else None


def _ago(match: re.Match[str], now: datetime) -> _Span | None:
    return _offset(now, match.group(2), -_amount(match.group(1)))


def _ahead(match: re.Match[str], now: datetime) -> _Span | None:
    return _offset(now, match.group(2), _amount(match.group(1)))


def _weekday(match: re.Match[str], now: datetime) -> _Span:
    modifier = (match.group(1) or "").lower()
    index = _WEEKDAY_NAMES.index(match.group(2).lower())
    today = now.date()
    if modifier in ("last", "past", "previous"):
        return today + relativedelta(days=-1, weekday=_WEEKDAYS[index](-1)), None
    if modifier == "next":
        return today + relativedelta(days=+1, weekday=_WEEKDAYS[index](+1)), None
    if modifier == "this":
        return start_of_week(today) + timedelta(days=(index + 1) % 7), None
    return today + relativedelta(weekday=_WEEKDAYS[index](-1)), None


def _relative_period(match: re.Match[str], now: datetime) -> _Span | None:
    direction = {"last": -1, "past": -1, "previous": -1, "next": 1, "this": 0}
    return _offset(now, match.group(2), direction[match.group(1).lower()])


def _month_only(match: re.Match[str], now: datetime) -> _Span | None:
    prefix, name, year = match.group(1), match.group(2).lower(), match.group(3)
    # "may" is too common a word to stand alone.
    if not year and (not prefix or name == "may"):
        return None
    try:
        start = date(int(year) if year else now.year, _MONTH_NAMES.index(name) + 1, 1)
    except ValueError:
        return None
    return start, start + relativedelta(day=31)


@dataclass(frozen=True)
class _Rule:
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str], datetime], _Span | None]
    weak: bool = False


# List order is priority order when two matches overlap.
_RULES: tuple[_Rule, ...] = (
    _Rule(re.compile(r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b"), _iso),
    _Rule(re.compile(rf"\b{_MONTH}\.?\s+\d{{1,2}}{_ORDINAL}(?:,?\s+\d{{4}})?\b", re.I), _fragment),
    _Rule(
        re.compile(rf"\b\d{{1,2}}{_ORDINAL}\s+(?:of\s+)?{_MONTH}\.?(?:,?\s+\d{{4}})?\b", re.I),
        _fragment,
    ),
    _Rule(re.compile(r"\b\d{1,2}/\d{1,2}(?:/(?:\d{4}|\d{2}))?\b"), _fragment),
    _Rule(re.compile(r"\b(today|tonight|yesterday|tomorrow)\b", re.I), _relative_day),
    _Rule(re.compile(rf"\b{_NUMBER}\s+{_UNIT}\s+ago\b", re.I), _ago),
    _Rule(re.compile(rf"\b(?:in|within)\s+{_NUMBER}\s+{_UNIT}\b", re.I), _ahead),
    _Rule(re.compile(rf"\b{_NUMBER}\s+{_UNIT}\s+(?:later|from now)\b", re.I), _ahead),
    _Rule(
        re.compile(
            r"\b(?:(last|past|previous|next|this)\s+)?"
            r"(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b",
            re.I,
        ),
        _weekday,
    ),
    _Rule(re.compile(r"\b(last|past|previous|next|this)\s+(week|month|year)\b", re.I), _relative_period),
    _Rule(
        re.compile(
            r"\b(?:(in|during|for|of|since)\s+)?"
            r"(january|february|march|april|may|june|july|august|september|october|november|december)"
            r"(?:\s+(\d{4}))?\b",
            re.I,
        ),
        _month_only,
    ),
    _Rule(re.compile(rf"(\d+)\s*{_DURATION_UNIT}\b", re.I), _ahead, weak=True),
)


def find_dates(text: str, now: datetime | None = None) -> list[DateMention]:
    """Return the date mentions in *text*, ordered by position.

    Overlapping matches are settled by rule priority. Weak mentions are
    returned only when there is nothing else.
    """
    now = now or current_time()

    candidates: list[tuple[int, re.Match[str], _Rule]] = []
    for priority, rule in enumerate(_RULES):
        for match in rule.pattern.finditer(text):
            candidates.append((priority, match, rule))
    candidates.sort(key=lambda item: (item[0], item[1].start()))

    taken: list[tuple[int, int]] = []
    mentions: list[DateMention] = []
    for _priority, match, rule in candidates:
        start, stop = match.span()
        if any(start < t_stop and t_start < stop for t_start, t_stop in taken):
            continue
        resolved = rule.resolve(match, now)
        if resolved is None:
            continue
        taken.append((start, stop))
        mentions.append(
            DateMention(
                start=resolved[0],
                end=resolved[1],
                index=start,
                stop=stop,
                weak=rule.weak,
            )
        )

    mentions.sort(key=lambda m: m.index)
    strong = [m for m in mentions if not m.weak]
    return strong or mentions
