"""Tests for clients/catalog.py -- listings and project/task resolution."""

from __future__ import annotations

import httpx
import pytest
import respx

from _errors import HarvestAPIError, InvalidInputError
from clients._base import BaseHarvestClient
from clients.catalog import CatalogClient
from parsers.leave import LEAVE_PATTERNS

from conftest import BASE_URL

SICK, ANNUAL = LEAVE_PATTERNS

PROJECTS = {
    "projects": [
        {"id": 1, "name": "Acme Redesign", "code": "ACME", "is_active": True, "budget": 100},
        {"id": 9, "name": "[LV] Leave", "code": "LV", "is_active": True, "budget": None},
    ]
}


def _assignments(*tasks: tuple[int, str]) -> dict:
    return {
        "task_assignments": [
            {"id": 1000 + task_id, "billable": True, "task": {"id": task_id, "name": name}}
            for task_id, name in tasks
        ]
    }


@pytest.fixture
def catalog(base_client: BaseHarvestClient) -> CatalogClient:
    return CatalogClient(base_client)


class TestListings:
    @respx.mock
    async def test_list_projects_shape(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(return_value=httpx.Response(200, json=PROJECTS))
        assert await catalog.list_projects() == [
            {"id": 1, "name": "Acme Redesign", "code": "ACME", "is_active": True},
            {"id": 9, "name": "[LV] Leave", "code": "LV", "is_active": True},
        ]

    @respx.mock
    async def test_list_tasks_shape(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects/9/task_assignments").mock(
            return_value=httpx.Response(200, json=_assignments((77, "Annual Leave")))
        )
        assert await catalog.list_tasks(9) == [{"id": 77, "name": "Annual Leave"}]

    @respx.mock
    async def test_http_error_raises(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(
            return_value=httpx.Response(403, json={"message": "Forbidden"})
        )
        with pytest.raises(HarvestAPIError, match="Forbidden"):
            await catalog.list_projects()


class TestResolveProject:
    @respx.mock
    async def test_case_insensitive_substring(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(return_value=httpx.Response(200, json=PROJECTS))
        assert await catalog.resolve_project("2 hours on ACME redesign today") == 1

    @respx.mock
    async def test_leave_project_by_exact_name(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(return_value=httpx.Response(200, json=PROJECTS))
        result = await catalog.resolve_project(
            "sick, skipping Acme Redesign", SICK
        )
        assert result == 9

    @respx.mock
    async def test_leave_falls_back_to_substring(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(
            return_value=httpx.Response(200, json={"projects": [PROJECTS["projects"][0]]})
        )
        result = await catalog.resolve_project(
            "sick on Acme Redesign", SICK
        )
        assert result == 1

    @respx.mock
    async def test_harvest_order_decides(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(
            return_value=httpx.Response(
                200,
                json={"projects": [{"id": 5, "name": "Acme"}, {"id": 1, "name": "Acme Redesign"}]},
            )
        )
        assert await catalog.resolve_project("acme redesign work") == 5

    @respx.mock
    async def test_no_match_raises(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects").mock(return_value=httpx.Response(200, json=PROJECTS))
        with pytest.raises(InvalidInputError, match="Could not find matching project"):
            await catalog.resolve_project("30 minutes on nothing")

    @respx.mock
    async def test_fetches_every_time(self, catalog: CatalogClient) -> None:
        route = respx.get(f"{BASE_URL}/projects").mock(
            return_value=httpx.Response(200, json=PROJECTS)
        )
        await catalog.resolve_project("acme redesign")
        await catalog.resolve_project("acme redesign")
        assert route.call_count == 2


class TestResolveTask:
    @respx.mock
    async def test_leave_task_by_exact_name(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects/9/task_assignments").mock(
            return_value=httpx.Response(
                200,
                json=_assignments((77, "Annual Leave"), (78, "Person (Sick/Carer's) Leave")),
            )
        )
        assert await catalog.resolve_task(9, "sick today", SICK) == 78
        assert await catalog.resolve_task(9, "annual leave", ANNUAL) == 77

    @respx.mock
    async def test_named_task(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects/1/task_assignments").mock(
            return_value=httpx.Response(
                200, json=_assignments((11, "Project Management"), (12, "Development"))
            )
        )
        assert await catalog.resolve_task(1, "3h development on Acme", None) == 12

    @respx.mock
    async def test_falls_back_to_first_task(self, catalog: CatalogClient) -> None:
        """No task named in the text: the first assignment is used silently."""
        respx.get(f"{BASE_URL}/projects/1/task_assignments").mock(
            return_value=httpx.Response(
                200, json=_assignments((11, "Project Management"), (12, "Development"))
            )
        )
        assert await catalog.resolve_task(1, "2 hours on Acme Redesign", None) == 11

    @respx.mock
    async def test_no_tasks_raises(self, catalog: CatalogClient) -> None:
        respx.get(f"{BASE_URL}/projects/1/task_assignments").mock(
            return_value=httpx.Response(200, json={"task_assignments": []})
        )
        with pytest.raises(InvalidInputError, match="No tasks assigned to project 1"):
            await catalog.resolve_task(1, "2 hours", None)
