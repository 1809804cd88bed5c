"""Time-entry MCP tools: natural-language logging and catalog listings."""

from __future__ import annotations

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from _tooling import dump_result, tool_error_handler
from clients import get_registry
from parsers import parse_time_entry

logger = logging.getLogger("harvest_mcp.server")

__all__ = ["register"]


def register(mcp: FastMCP) -> None:
    """Register the time-entry tools on the given FastMCP instance."""

    @mcp.tool
    @tool_error_handler
    async def log_time(
        text: Annotated[
            str,
            Field(
                description=(
                    "Natural language time entry "
                    '(e.g. "2 hours on Project X doing development work yesterday")'
                )
            ),
        ],
    ) -> str:
        """Log time entry using natural language"""
        registry = get_registry()
        entry = parse_time_entry(text, registry.config.standard_work_day_hours)
        project_id = await registry.catalog.resolve_project(text, entry.leave)
        task_id = await registry.catalog.resolve_task(project_id, text, entry.leave)
        result = await registry.time_entries.create_entry(
            project_id=project_id,
            task_id=task_id,
            spent_date=entry.spent_date,
            hours=entry.hours,
            notes=text,
        )
        logger.info(
            "WRITE_OP tool=log_time date=%s project_id=%s task_id=%s hours=%s leave=%s",
            entry.spent_date,
            project_id,
            task_id,
            entry.hours,
            entry.leave_type,
        )
        return dump_result(result)

    @mcp.tool
    @tool_error_handler
    async def list_projects() -> str:
        """List available Harvest projects"""
        return dump_result(await get_registry().catalog.list_projects())

    @mcp.tool
    @tool_error_handler
    async def list_tasks(
        project_id: Annotated[int, Field(description="Project ID")],
    ) -> str:
        """List available tasks for a project"""
        return dump_result(await get_registry().catalog.list_tasks(project_id))

    @mcp.tool
    @tool_error_handler
    async def list_entries(
        from_: Annotated[
            str | None, Field(alias="from", description="Start date (YYYY-MM-DD)")
        ] = None,
        to: Annotated[str | None, Field(description="End date (YYYY-MM-DD)")] = None,
    ) -> str:
        """List recent time entries"""
        return dump_result(
            await get_registry().time_entries.list_entries(from_date=from_, to_date=to)
        )
