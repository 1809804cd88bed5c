"""Natural-language parsers for time entries and report queries."""

from __future__ import annotations

from parsers.dates import parse_spent_date
from parsers.duration import parse_duration
from parsers.leave import LEAVE_PATTERNS, LeavePattern, classify_leave
from parsers.ranges import ParsedDateRange, parse_date_range
from parsers.report_router import route_report
from parsers.time_entry import ParsedTimeEntry, parse_time_entry

__all__ = [
    "LEAVE_PATTERNS",
    "LeavePattern",
    "ParsedDateRange",
    "ParsedTimeEntry",
    "classify_leave",
    "parse_date_range",
    "parse_duration",
    "parse_spent_date",
    "parse_time_entry",
    "route_report",
]
