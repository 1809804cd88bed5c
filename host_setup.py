"""Interactive ``setup`` command: write Harvest credentials into MCP host configs.

Prompts for credentials and work-day settings, then merges a
``mcpServers["harvest-server"]`` block into the Claude desktop config and,
when it already exists, the Cline VS Code extension settings.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from _constants import COMMAND_NAME, DEFAULT_TIMEZONE, DEFAULT_WORK_DAY_HOURS, SERVER_NAME

logger = logging.getLogger("harvest_mcp.setup")

__all__ = ["build_server_block", "host_config_paths", "merge_server_block", "run_setup"]

_CLINE_SETTINGS = Path(
    "Code", "User", "globalStorage", "saoudrizwan.claude-dev", "settings", "cline_mcp_settings.json"
)


def build_server_block(
    access_token: str,
    account_id: str,
    work_day_hours: str = "",
    timezone: str = "",
) -> dict[str, Any]:
    """Return the ``mcpServers`` mapping that launches this server."""
    return {
        SERVER_NAME: {
            "command": COMMAND_NAME,
            "args": [],
            "env": {
                "HARVEST_ACCESS_TOKEN": access_token,
                "HARVEST_ACCOUNT_ID": account_id,
                "STANDARD_WORK_DAY_HOURS": work_day_hours or str(DEFAULT_WORK_DAY_HOURS),
                "TIMEZONE": timezone or DEFAULT_TIMEZONE,
            },
            "disabled": False,
            "autoApprove": [],
        }
    }


def host_config_paths(
    platform: str | None = None,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[Path, Path]:
    """Return ``(claude_desktop_config, cline_settings)`` for this machine."""
    platform = platform or sys.platform
    home = home or Path.home()
    env = os.environ if environ is None else environ

    if platform == "darwin":
        app_support = home / "Library" / "Application Support"
    elif platform.startswith("win"):
        app_support = Path(env.get("APPDATA") or home / "AppData" / "Roaming")
    else:
        app_support = Path(env.get("XDG_CONFIG_HOME") or home / ".config")

    return (
        app_support / "Claude" / "claude_desktop_config.json",
        app_support / _CLINE_SETTINGS,
    )


def merge_server_block(path: Path, servers: dict[str, Any]) -> None:
    """Merge *servers* into the ``mcpServers`` key of the JSON file at *path*.

    Other top-level keys and other servers are preserved.

    Raises:
        OSError: If the file cannot be read or written.
        ValueError: If the existing file is not valid JSON.
    """
    existing: dict[str, Any] = {}
    if path.exists():
        existing = json.loads(path.read_text(encoding="utf-8") or "{}")
    merged = {
        **existing,
        "mcpServers": {**(existing.get("mcpServers") or {}), **servers},
    }
    path.write_text(json.dumps(merged, indent=2), encoding="utf-8")


def run_setup(
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
    paths: tuple[Path, Path] | None = None,
) -> int:
    """Run the interactive setup and return a process exit code."""
    desktop_path, cline_path = paths or host_config_paths()

    echo("\n🌱 Harvest MCP Server Setup\n")
    echo("First, we need your Harvest credentials.")
    echo("You can find these at: https://id.getharvest.com/developers\n")

    token = prompt("Personal Access Token: ").strip()
    account_id = prompt("Account ID: ").strip()

    echo("\nNow, let's configure your work day settings.\n")

    hours = prompt(f"Standard work day hours (default: {DEFAULT_WORK_DAY_HOURS}): ").strip()
    timezone = prompt(f"Timezone (default: {DEFAULT_TIMEZONE}): ").strip()

    servers = build_server_block(token, account_id, hours, timezone)

    try:
        merge_server_block(desktop_path, servers)
        echo("\n✅ Claude desktop app configured successfully")
    except (OSError, ValueError) as exc:
        logger.debug("Could not write %s: %s", desktop_path, exc)
        echo("\n⚠️ Could not configure Claude desktop app")
        echo("You may need to add this configuration manually to:")
        echo(str(desktop_path))
        echo("\nConfiguration to add:")
        echo(json.dumps({"mcpServers": servers}, indent=2))

    if cline_path.exists():
        try:
            merge_server_block(cline_path, servers)
            echo("✅ VSCode extension configured successfully")
        except (OSError, ValueError) as exc:
            logger.debug("Skipping Cline settings %s: %s", cline_path, exc)

    echo("\n🎉 Setup complete!")
    echo("\nPlease:")
    echo("1. Restart the Claude desktop app")
    echo('2. Try a test command like: "Show time report for this week"\n')
    return 0
