"""Harvest MCP Server: FastMCP v3 over stdio.

Exposes natural-language Harvest time-tracking tools via the Model Context
Protocol.  Credentials come from the environment; the ``setup`` subcommand
writes them into the MCP host's configuration.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from _config import load_config
from _constants import COMMAND_NAME, SERVER_NAME, SERVER_VERSION
from _errors import ConfigError
from clients import HarvestClientRegistry, get_registry, set_registry
from host_setup import run_setup
from tools import register_tools

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger = logging.getLogger("harvest_mcp.server")

# stdout carries the MCP stdio stream, so logs go to stderr.
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stderr,
)

# ---------------------------------------------------------------------------
# FastMCP instance
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Build the Harvest client registry for the server lifetime."""
    try:
        config = load_config()
    except ConfigError as exc:
        logger.critical("%s; refusing to start", exc)
        raise SystemExit(1) from exc
    set_registry(HarvestClientRegistry.from_config(config))
    logger.info(
        "Harvest MCP server starting up (account=%s, work_day_hours=%s, timezone=%s)",
        config.account_id,
        config.standard_work_day_hours,
        config.timezone,
    )
    try:
        yield
    finally:
        logger.info("Harvest MCP server shutting down")
        await get_registry().close()
        set_registry(None)


mcp = FastMCP(name=SERVER_NAME, version=SERVER_VERSION, lifespan=_lifespan)
register_tools(mcp)

# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description="Harvest MCP Server with natural language time tracking",
    )
    parser.add_argument("--version", action="version", version=SERVER_VERSION)
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("start", help="Start the Harvest MCP server (default)")
    subcommands.add_parser("setup", help="Configure the Harvest MCP server")
    return parser


def start() -> int:
    """Validate configuration and serve MCP over stdio until interrupted."""
    try:
        load_config()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f'Run "{COMMAND_NAME} setup" to configure', file=sys.stderr)
        return 1

    logger.info("Harvest MCP server running on stdio")
    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, closing stdio transport")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "setup":
        return run_setup()
    return start()


if __name__ == "__main__":
    raise SystemExit(main())
