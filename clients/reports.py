"""Domain client for Harvest time reports."""

from __future__ import annotations

from typing import Any

from clients._base import BaseHarvestClient, check_harvest_result

__all__ = ["REPORT_ENDPOINTS", "ReportsClient"]

REPORT_ENDPOINTS: frozenset[str] = frozenset(
    {
        "/reports/time/projects",
        "/reports/time/tasks",
        "/reports/time/clients",
        "/reports/time/team",
    }
)


class ReportsClient:
    def __init__(self, base: BaseHarvestClient) -> None:
        self._base = base

    async def time_report(self, endpoint: str, from_date: str, to_date: str) -> Any:
        """Fetch one of the ``/reports/time/*`` reports for an inclusive window."""
        if endpoint not in REPORT_ENDPOINTS:
            raise ValueError(f"Unknown report endpoint {endpoint!r}")
        return check_harvest_result(
            await self._base.request(
                "GET", endpoint, params={"from": from_date, "to": to_date}
            )
        )
