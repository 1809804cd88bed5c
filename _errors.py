"""Exception types shared by parsers, clients and tools."""

from __future__ import annotations

__all__ = ["ConfigError", "HarvestAPIError", "InvalidInputError"]


class InvalidInputError(ValueError):
    """Free text could not be turned into the value a tool needs."""


class HarvestAPIError(RuntimeError):
    """An outbound Harvest call failed.

    ``status_code`` is ``None`` for transport-level failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(Exception):
    """Required configuration is missing or malformed."""
