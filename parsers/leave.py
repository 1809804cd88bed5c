"""Leave classification for free-text time entries."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LEAVE_PATTERNS", "LeavePattern", "classify_leave"]


@dataclass(frozen=True)
class LeavePattern:
    """A leave category and the Harvest project/task it is booked against."""

    key: str
    triggers: tuple[str, ...]
    project: str
    task: str

    def matches(self, lowered_text: str) -> bool:
        return any(trigger in lowered_text for trigger in self.triggers)


_LEAVE_PROJECT = "[LV] Leave"

# Declaration order is the match order.
LEAVE_PATTERNS: tuple[LeavePattern, ...] = (
    LeavePattern(
        key="sick",
        triggers=("sick", "ill", "unwell"),
        project=_LEAVE_PROJECT,
        task="Person (Sick/Carer's) Leave",
    ),
    LeavePattern(
        key="annual",
        triggers=("annual leave", "vacation", "holiday", "time off"),
        project=_LEAVE_PROJECT,
        task="Annual Leave",
    ),
)


def classify_leave(text: str) -> LeavePattern | None:
    """Return the first leave pattern triggered by *text*, or ``None``.

    Triggers are plain substrings of the lowercased text, so "homesick"
    counts as sick leave.
    """
    lowered = text.lower()
    for pattern in LEAVE_PATTERNS:
        if pattern.matches(lowered):
            return pattern
    return None
