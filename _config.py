"""Environment-driven configuration for the Harvest MCP server."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from _constants import DEFAULT_TIMEZONE, DEFAULT_WORK_DAY_HOURS
from _errors import ConfigError

__all__ = ["HarvestConfig", "load_config"]


@dataclass(frozen=True)
class HarvestConfig:
    """Immutable settings for one server lifetime.

    ``timezone`` is carried for forward compatibility only; date math uses
    the process's local clock.
    """

    access_token: str = field(repr=False)
    account_id: str
    standard_work_day_hours: float = DEFAULT_WORK_DAY_HOURS
    timezone: str = DEFAULT_TIMEZONE


def load_config(environ: Mapping[str, str] | None = None) -> HarvestConfig:
    """Build a :class:`HarvestConfig` from environment variables.

    Raises:
        ConfigError: If credentials are missing or the work-day hours are
            not a positive number.
    """
    env = os.environ if environ is None else environ

    token = env.get("HARVEST_ACCESS_TOKEN", "").strip()
    account_id = env.get("HARVEST_ACCOUNT_ID", "").strip()
    if not token or not account_id:
        raise ConfigError(
            "HARVEST_ACCESS_TOKEN and HARVEST_ACCOUNT_ID environment variables are required"
        )

    raw_hours = env.get("STANDARD_WORK_DAY_HOURS", "").strip() or str(DEFAULT_WORK_DAY_HOURS)
    try:
        hours = float(raw_hours)
    except ValueError as exc:
        raise ConfigError(
            f"STANDARD_WORK_DAY_HOURS must be a number, got {raw_hours!r}"
        ) from exc
    if hours <= 0:
        raise ConfigError(f"STANDARD_WORK_DAY_HOURS must be positive, got {raw_hours!r}")

    timezone = env.get("TIMEZONE", "").strip() or DEFAULT_TIMEZONE

    return HarvestConfig(
        access_token=token,
        account_id=account_id,
        standard_work_day_hours=hours,
        timezone=timezone,
    )
