"""Tool registration for the Harvest MCP server.

Each tool module exposes a register(mcp) function.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from tools import reports, time_entries

logger = logging.getLogger("harvest_mcp.server")

__all__ = ["TOOL_NAMES", "register_tools"]

TOOL_NAMES: tuple[str, ...] = (
    "log_time",
    "list_projects",
    "list_tasks",
    "list_entries",
    "get_time_report",
)


def register_tools(mcp: FastMCP) -> None:
    """Register every Harvest tool on *mcp*."""
    time_entries.register(mcp)
    reports.register(mcp)
    logger.debug("Registered tools: %s", ", ".join(TOOL_NAMES))
