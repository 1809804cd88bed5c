"""Shared constants for the Harvest MCP server."""

from __future__ import annotations

SERVER_NAME: str = "harvest-server"
SERVER_VERSION: str = "0.2.0"
COMMAND_NAME: str = "harvest-mcp-server"

HARVEST_BASE_URL: str = "https://api.harvestapp.com/v2"
USER_AGENT: str = "Harvest MCP Server (harvest-mcp-server)"

DEFAULT_WORK_DAY_HOURS: float = 7.5
DEFAULT_TIMEZONE: str = "Australia/Perth"
MAX_ERROR_MESSAGE_LEN: int = 500
