"""Unit tests for the report MCP tool (tools/reports.py)."""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from fastmcp.exceptions import ToolError

from clients import HarvestClientRegistry

from conftest import BASE_URL, get_tool_fn

REPORT = {
    "results": [
        {
            "project_id": 1,
            "project_name": "Acme Redesign",
            "total_hours": 12.5,
            "billable_hours": 10.0,
            "currency": "AUD",
            "billable_amount": 1500.0,
        }
    ],
    "per_page": 1000,
    "total_pages": 1,
    "total_entries": 1,
    "next_page": None,
    "previous_page": None,
    "page": 1,
}


@pytest.fixture(autouse=True)
def _pinned_clock(frozen_now):
    yield


class TestGetTimeReport:
    @respx.mock
    async def test_last_week_projects(self, registry: HarvestClientRegistry) -> None:
        route = respx.get(f"{BASE_URL}/reports/time/projects").mock(
            return_value=httpx.Response(200, json=REPORT)
        )
        result = json.loads(await get_tool_fn("get_time_report")(text="Show time report for last week"))

        assert result == REPORT
        assert dict(route.calls.last.request.url.params) == {
            "from": "2025-03-02",
            "to": "2025-03-08",
        }

    @respx.mock
    async def test_by_client_this_month(self, registry: HarvestClientRegistry) -> None:
        route = respx.get(f"{BASE_URL}/reports/time/clients").mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        await get_tool_fn("get_time_report")(text="breakdown by client for this month")
        assert dict(route.calls.last.request.url.params) == {
            "from": "2025-03-01",
            "to": "2025-03-15",
        }

    @respx.mock
    async def test_tasks_route(self, registry: HarvestClientRegistry) -> None:
        route = respx.get(f"{BASE_URL}/reports/time/tasks").mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        await get_tool_fn("get_time_report")(text="tasks last month")
        assert dict(route.calls.last.request.url.params) == {
            "from": "2025-02-01",
            "to": "2025-02-28",
        }

    async def test_unparseable_range(self, registry: HarvestClientRegistry) -> None:
        with pytest.raises(ToolError, match="Could not parse date range from input"):
            await get_tool_fn("get_time_report")(text="show me everything by team")

    async def test_out_of_range_date_is_a_tool_error(self, registry: HarvestClientRegistry) -> None:
        with pytest.raises(ToolError, match="Could not parse date range from input"):
            await get_tool_fn("get_time_report")(text="report for 3000000 days ago")

    @respx.mock
    async def test_harvest_error(self, registry: HarvestClientRegistry) -> None:
        respx.get(f"{BASE_URL}/reports/time/team").mock(
            return_value=httpx.Response(403, json={"message": "Reports require admin access"})
        )
        with pytest.raises(ToolError, match="Harvest API error: Reports require admin access"):
            await get_tool_fn("get_time_report")(text="hours by user this week")
