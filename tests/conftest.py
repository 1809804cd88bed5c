"""Pytest configuration for Harvest MCP server tests.

Pins the parser clock, provides a real client registry backed by
respx-mocked Harvest endpoints, and exposes registered tool functions.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator
from datetime import datetime
from unittest.mock import patch

import pytest
import pytest_asyncio

os.environ.setdefault("HARVEST_ACCESS_TOKEN", "test-token")
os.environ.setdefault("HARVEST_ACCOUNT_ID", "123456")

from fastmcp.tools.function_tool import FunctionTool

import server as server_module
from _config import HarvestConfig
from clients import HarvestClientRegistry, set_registry
from clients._base import BaseHarvestClient

BASE_URL = "https://api.harvestapp.com/v2"

# Saturday.
FROZEN_NOW = datetime(2025, 3, 15, 9, 30)


def get_tool_fn(name: str):
    """Get a registered tool's underlying async function by name.

    Looks up the tool in ``mcp.local_provider._components``.
    Raises ``KeyError`` with available tool names if not found.
    """
    lp = server_module.mcp.local_provider
    for comp in lp._components.values():
        if isinstance(comp, FunctionTool) and comp.name == name:
            return comp.fn
    available = sorted(
        comp.name for comp in lp._components.values() if isinstance(comp, FunctionTool)
    )
    raise KeyError(f"Tool {name!r} not found. Available: {available}")


def registered_tool_names() -> list[str]:
    lp = server_module.mcp.local_provider
    return [comp.name for comp in lp._components.values() if isinstance(comp, FunctionTool)]


@pytest.fixture
def frozen_now() -> Iterator[datetime]:
    """Pin ``parsers._nldate.current_time`` to 2025-03-15 09:30."""
    with patch("parsers._nldate.current_time", return_value=FROZEN_NOW):
        yield FROZEN_NOW


@pytest.fixture
def config() -> HarvestConfig:
    return HarvestConfig(access_token="test-token", account_id="123456")


@pytest_asyncio.fixture
async def base_client() -> AsyncGenerator[BaseHarvestClient, None]:
    c = BaseHarvestClient(access_token="test-token", account_id="123456")
    yield c
    await c.close()


@pytest_asyncio.fixture
async def registry(
    base_client: BaseHarvestClient, config: HarvestConfig
) -> AsyncGenerator[HarvestClientRegistry, None]:
    reg = HarvestClientRegistry(base=base_client, config=config)
    set_registry(reg)
    yield reg
    set_registry(None)
