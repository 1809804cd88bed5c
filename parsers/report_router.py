"""Pick the Harvest time-report endpoint from the wording of a query."""

from __future__ import annotations

__all__ = ["DEFAULT_REPORT_ENDPOINT", "REPORT_ROUTES", "route_report"]

DEFAULT_REPORT_ENDPOINT = "/reports/time/projects"

# Earlier rules beat later ones; "tasks" alone is enough for the task report.
REPORT_ROUTES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("by client", "for client"), "/reports/time/clients"),
    (("by task", "tasks"), "/reports/time/tasks"),
    (("by team", "by user"), "/reports/time/team"),
)


def route_report(text: str) -> str:
    lowered = text.lower()
    for phrases, endpoint in REPORT_ROUTES:
        if any(phrase in lowered for phrase in phrases):
            return endpoint
    return DEFAULT_REPORT_ENDPOINT
