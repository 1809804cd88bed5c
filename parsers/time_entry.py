"""Turn a free-text log line into the fields of a Harvest time entry."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from _errors import InvalidInputError
from parsers import _nldate
from parsers.dates import parse_spent_date
from parsers.duration import parse_duration
from parsers.leave import LeavePattern, classify_leave

__all__ = ["ParsedTimeEntry", "parse_time_entry"]

logger = logging.getLogger("harvest_mcp.parsers")


@dataclass(frozen=True)
class ParsedTimeEntry:
    """Parsed fields of one entry.

    Leave entries always carry the standard work-day hours and their
    ``leave`` pattern; other entries take their hours from the text.
    """

    spent_date: str
    hours: float
    leave: LeavePattern | None = None

    @property
    def is_leave(self) -> bool:
        return self.leave is not None

    @property
    def leave_type(self) -> str | None:
        return self.leave.key if self.leave else None


def parse_time_entry(text: str, standard_work_day_hours: float) -> ParsedTimeEntry:
    """Run the leave, duration and date parsers over *text*.

    Raises:
        InvalidInputError: If a non-leave entry has no duration or no date.
    """
    leave = classify_leave(text)
    if leave is not None:
        try:
            spent = parse_spent_date(text)
        except InvalidInputError:
            spent = _nldate.current_time().date()
        logger.debug("Classified entry as %s leave on %s", leave.key, spent)
        return ParsedTimeEntry(
            spent_date=spent.isoformat(),
            hours=standard_work_day_hours,
            leave=leave,
        )

    hours = parse_duration(text)
    spent = parse_spent_date(text)
    return ParsedTimeEntry(spent_date=spent.isoformat(), hours=hours)
