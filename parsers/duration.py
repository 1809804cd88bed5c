"""Duration extraction: "2 hours", "90min", "3h" -> decimal hours."""

from __future__ import annotations

import re

from _errors import InvalidInputError

__all__ = ["DURATION_RE", "find_duration", "parse_duration"]

# First match wins; "5 mar" reads as five minutes.
DURATION_RE = re.compile(r"(\d+)\s*(hour|hr|h|minute|min|m)s?", re.IGNORECASE)


def find_duration(text: str) -> re.Match[str] | None:
    return DURATION_RE.search(text)


def parse_duration(text: str) -> float:
    """Return the hours denoted by the first duration token in *text*.

    Units starting with ``h`` are hours; everything else is minutes.

    Raises:
        InvalidInputError: If no duration token is present or it is zero.
    """
    match = find_duration(text)
    if match is None:
        raise InvalidInputError("Could not parse duration from input")

    amount = int(match.group(1))
    unit = match.group(2).lower()
    hours = float(amount) if unit.startswith("h") else amount / 60
    if hours <= 0:
        raise InvalidInputError("Duration must be greater than zero")
    return hours
