"""Client registry for the Harvest domain clients.

Provides get_registry() / set_registry() for the process-wide instance.
Tests inject their own via set_registry().
"""

from __future__ import annotations

from dataclasses import dataclass, field

from _config import HarvestConfig
from clients._base import BaseHarvestClient
from clients.catalog import CatalogClient
from clients.reports import ReportsClient
from clients.time_entries import TimeEntriesClient

__all__ = ["HarvestClientRegistry", "get_registry", "set_registry"]


@dataclass
class HarvestClientRegistry:
    """Holds domain client instances. One registry per server lifecycle."""

    base: BaseHarvestClient
    config: HarvestConfig
    catalog: CatalogClient = field(init=False)
    time_entries: TimeEntriesClient = field(init=False)
    reports: ReportsClient = field(init=False)

    def __post_init__(self) -> None:
        self.catalog = CatalogClient(self.base)
        self.time_entries = TimeEntriesClient(self.base)
        self.reports = ReportsClient(self.base)

    @classmethod
    def from_config(cls, config: HarvestConfig) -> HarvestClientRegistry:
        return cls(
            base=BaseHarvestClient(access_token=config.access_token, account_id=config.account_id),
            config=config,
        )

    async def close(self) -> None:
        await self.base.close()


_registry: HarvestClientRegistry | None = None


def get_registry() -> HarvestClientRegistry:
    """Return the active registry, or raise if not initialized."""
    if _registry is None:
        raise RuntimeError("HarvestClientRegistry not initialized. Server lifespan has not started.")
    return _registry


def set_registry(registry: HarvestClientRegistry | None) -> None:
    """Set (or clear) the global registry. Used by lifespan and tests."""
    global _registry
    _registry = registry
