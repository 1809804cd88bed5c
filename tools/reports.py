"""Report MCP tools."""

from __future__ import annotations

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from _tooling import dump_result, tool_error_handler
from clients import get_registry
from parsers import parse_date_range, route_report

logger = logging.getLogger("harvest_mcp.server")

__all__ = ["register"]


def register(mcp: FastMCP) -> None:
    """Register the report tools on the given FastMCP instance."""

    @mcp.tool
    @tool_error_handler
    async def get_time_report(
        text: Annotated[
            str,
            Field(
                description=(
                    'Natural language query (e.g., "Show time report for last month", '
                    '"Get time summary for Project X")'
                )
            ),
        ],
    ) -> str:
        """Get time reports using natural language"""
        window = parse_date_range(text)
        endpoint = route_report(text)
        logger.debug(
            "Routing report query to %s from=%s to=%s", endpoint, window.from_date, window.to_date
        )
        params = window.as_params()
        return dump_result(
            await get_registry().reports.time_report(endpoint, params["from"], params["to"])
        )
