"""Base Harvest client with HTTP transport.

Provides ``BaseHarvestClient`` -- the async HTTP client for the Harvest v2
REST API.  Credentials are fixed at construction: every request carries
``Authorization: Bearer <token>``, ``Harvest-Account-Id`` and a
``User-Agent`` identifying this server.

``request`` never raises on HTTP or transport failures; it returns a
result dict that callers unwrap with :func:`check_harvest_result`.
"""

from __future__ import annotations

import ipaddress
import json
import logging
from typing import Any
from urllib.parse import urlparse

import httpx

from _constants import HARVEST_BASE_URL, MAX_ERROR_MESSAGE_LEN, USER_AGENT
from _errors import HarvestAPIError

__all__ = ["BaseHarvestClient", "check_harvest_result"]

logger = logging.getLogger("harvest_mcp.client")


def check_harvest_result(result: dict[str, Any]) -> Any:
    """Return the ``data`` of a success result, or raise :class:`HarvestAPIError`."""
    if result.get("status") == "error":
        raise HarvestAPIError(
            result.get("message") or "Harvest request failed",
            status_code=result.get("status_code"),
        )
    return result.get("data")


class BaseHarvestClient:
    """Async HTTP client for the Harvest v2 API.

    One instance is shared for the server lifetime; its headers never
    change after construction.
    """

    def __init__(
        self,
        access_token: str,
        account_id: str,
        base_url: str = HARVEST_BASE_URL,
        user_agent: str = USER_AGENT,
    ) -> None:
        parsed = urlparse(base_url)
        host = (parsed.hostname or "").lower()

        if parsed.scheme != "https" and not self._is_loopback(host):
            raise ValueError(
                f"Non-HTTPS base_url is only permitted for localhost. Got: {base_url}"
            )
        if not access_token or not account_id:
            raise ValueError("access_token and account_id must not be empty")

        self._base_url: str = base_url.rstrip("/")
        self._http: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Harvest-Account-Id": str(account_id),
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            follow_redirects=False,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._http.aclose()

    @staticmethod
    def _is_loopback(host: str) -> bool:
        """Check if host is a loopback address (localhost, 127.x.x.x, ::1, etc.)."""
        if host in ("localhost",):
            return True
        stripped = host.strip("[]")
        try:
            return ipaddress.ip_address(stripped).is_loopback
        except ValueError:
            return False

    @staticmethod
    def _error_message(response_data: Any, status_code: int) -> str:
        """Pull a human message out of a Harvest error body."""
        error_msg: Any = None
        if isinstance(response_data, dict):
            error_msg = (
                response_data.get("message")
                or response_data.get("error_description")
                or response_data.get("error")
            )
        error_msg = str(error_msg or f"API error: {status_code}")
        if len(error_msg) > MAX_ERROR_MESSAGE_LEN:
            error_msg = error_msg[:MAX_ERROR_MESSAGE_LEN] + "..."
        return error_msg

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request.  Returns a result dict.

        Success: ``{"status": "success", "data": <parsed JSON>}``.
        Failure: ``{"status": "error", "message": ..., "status_code": ...}``.
        """
        path = "/" + endpoint.lstrip("/")
        try:
            response = await self._http.request(method, path, json=data, params=params)
        except httpx.TransportError as exc:
            logger.warning("Harvest API %s %s transport error: %s", method, path, exc)
            return {
                "status": "error",
                "message": str(exc) or exc.__class__.__name__,
                "status_code": None,
            }

        try:
            response_data = response.json()
        except (json.JSONDecodeError, ValueError):
            response_data = {"text": response.text[:MAX_ERROR_MESSAGE_LEN]}

        if response.status_code >= 400:
            logger.warning(
                "Harvest API %s %s returned status=%d",
                method,
                path,
                response.status_code,
            )
            return {
                "status": "error",
                "message": self._error_message(response_data, response.status_code),
                "status_code": response.status_code,
            }

        logger.debug("Harvest API %s %s returned status=%d", method, path, response.status_code)
        return {"status": "success", "data": response_data}
