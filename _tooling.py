"""Shared error-handling and result helpers for MCP tools."""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

from fastmcp.exceptions import ToolError

from _errors import HarvestAPIError

logger = logging.getLogger("harvest_mcp.server")

__all__ = ["dump_result", "tool_error_handler"]

P = ParamSpec("P")
R = TypeVar("R")


def dump_result(data: Any) -> str:
    """Render a tool result as the single JSON text block MCP clients receive."""
    return json.dumps(data, indent=2)


def tool_error_handler(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Decorator that maps tool failures onto MCP errors.

    ValueError (including InvalidInputError) becomes a ToolError with the
    same message; HarvestAPIError becomes "Harvest API error: ...".
    Anything else is logged and propagates unchanged.
    """

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await fn(*args, **kwargs)
        except ToolError as exc:
            logger.warning("%s failed: %s", fn.__name__, exc)
            raise
        except ValueError as exc:
            logger.warning("%s rejected input: %s", fn.__name__, exc)
            raise ToolError(str(exc)) from exc
        except HarvestAPIError as exc:
            logger.warning("%s Harvest call failed: %s", fn.__name__, exc)
            raise ToolError(f"Harvest API error: {exc}") from exc
        except Exception:
            logger.exception("%s failed", fn.__name__)
            raise

    return wrapper
