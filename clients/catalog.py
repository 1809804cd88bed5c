"""Domain client for the Harvest project/task catalog.

Uses composition: holds a reference to :class:`BaseHarvestClient` for HTTP
transport.  Nothing is cached; every lookup fetches the live catalog and
keeps Harvest's ordering.
"""

from __future__ import annotations

from typing import Any

from _errors import InvalidInputError
from clients._base import BaseHarvestClient, check_harvest_result
from parsers.leave import LeavePattern

__all__ = ["CatalogClient"]


class CatalogClient:
    """Projects, task assignments, and name-to-ID resolution."""

    def __init__(self, base: BaseHarvestClient) -> None:
        self._base = base

    # -- read methods -------------------------------------------------------

    async def get_projects(self) -> dict[str, Any]:
        return await self._base.request("GET", "projects")

    async def get_task_assignments(self, project_id: int) -> dict[str, Any]:
        return await self._base.request("GET", f"projects/{int(project_id)}/task_assignments")

    async def list_projects(self) -> list[dict[str, Any]]:
        """Return ``[{id, name, code, is_active}, ...]``."""
        data = check_harvest_result(await self.get_projects())
        return [
            {
                "id": p.get("id"),
                "name": p.get("name"),
                "code": p.get("code"),
                "is_active": p.get("is_active"),
            }
            for p in self._projects(data)
        ]

    async def list_tasks(self, project_id: int) -> list[dict[str, Any]]:
        """Return ``[{id, name}, ...]`` for the tasks assigned to a project."""
        data = check_harvest_result(await self.get_task_assignments(project_id))
        return [{"id": t.get("id"), "name": t.get("name")} for t in self._tasks(data)]

    # -- resolution ---------------------------------------------------------

    async def resolve_project(self, text: str, leave: LeavePattern | None = None) -> int:
        """Pick the project an entry belongs to.

        Leave entries first look for the leave project by exact name.
        Otherwise the first project whose name appears in *text*
        (case-insensitive) wins.

        Raises:
            InvalidInputError: If no project matches.
        """
        projects = self._projects(check_harvest_result(await self.get_projects()))

        if leave is not None:
            for project in projects:
                if project.get("name") == leave.project:
                    return int(project["id"])

        lowered = text.lower()
        for project in projects:
            name = (project.get("name") or "").lower()
            if name and name in lowered:
                return int(project["id"])

        raise InvalidInputError("Could not find matching project")

    async def resolve_task(
        self,
        project_id: int,
        text: str,
        leave: LeavePattern | None = None,
    ) -> int:
        """Pick the task within *project_id* an entry belongs to.

        Leave entries first look for the leave task by exact name, then
        the first task named in *text* wins.  When nothing is named the
        project's first task is used, so an entry can land on a task the
        user never mentioned.

        Raises:
            InvalidInputError: If the project has no task assignments.
        """
        tasks = self._tasks(check_harvest_result(await self.get_task_assignments(project_id)))
        if not tasks:
            raise InvalidInputError(f"No tasks assigned to project {project_id}")

        if leave is not None:
            for task in tasks:
                if task.get("name") == leave.task:
                    return int(task["id"])

        lowered = text.lower()
        for task in tasks:
            name = (task.get("name") or "").lower()
            if name and name in lowered:
                return int(task["id"])

        return int(tasks[0]["id"])

    # -- static helpers -----------------------------------------------------

    @staticmethod
    def _projects(data: Any) -> list[dict[str, Any]]:
        if not isinstance(data, dict):
            return []
        return [p for p in data.get("projects") or [] if isinstance(p, dict)]

    @staticmethod
    def _tasks(data: Any) -> list[dict[str, Any]]:
        """Flatten ``task_assignments[].task`` into a list of task dicts."""
        if not isinstance(data, dict):
            return []
        out: list[dict[str, Any]] = []
        for assignment in data.get("task_assignments") or []:
            if isinstance(assignment, dict) and isinstance(assignment.get("task"), dict):
                out.append(assignment["task"])
        return out
