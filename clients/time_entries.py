"""Domain client for Harvest time entries."""

from __future__ import annotations

from typing import Any

from clients._base import BaseHarvestClient, check_harvest_result

__all__ = ["TimeEntriesClient"]


class TimeEntriesClient:
    """List and create time entries."""

    def __init__(self, base: BaseHarvestClient) -> None:
        self._base = base

    async def get_entries(
        self,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date
        return await self._base.request("GET", "time_entries", params=params or None)

    async def list_entries(
        self,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return ``[{id, spent_date, hours, notes, project, task}, ...]``."""
        data = check_harvest_result(await self.get_entries(from_date, to_date))
        entries = (data.get("time_entries") or []) if isinstance(data, dict) else []
        return [
            {
                "id": e.get("id"),
                "spent_date": e.get("spent_date"),
                "hours": e.get("hours"),
                "notes": e.get("notes"),
                "project": (e.get("project") or {}).get("name"),
                "task": (e.get("task") or {}).get("name"),
            }
            for e in entries
            if isinstance(e, dict)
        ]

    async def create_entry(
        self,
        project_id: int,
        task_id: int,
        spent_date: str,
        hours: float,
        notes: str,
    ) -> Any:
        """Create a duration-based time entry and return Harvest's JSON."""
        payload = {
            "project_id": project_id,
            "task_id": task_id,
            "spent_date": spent_date,
            "hours": hours,
            "notes": notes,
        }
        return check_harvest_result(
            await self._base.request("POST", "time_entries", data=payload)
        )
