"""
client.py
---------
Async client for the Resend REST API.

Every call returns a ProviderResponse holding either the decoded JSON body
(``data``) or the provider's error object (``error``). HTTP errors are not
raised here; the formatter decides what an error means for the tool call.

Usage::

    async with ResendClient(api_key) as client:
        response = await client.get("/emails/abc")
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from email_mcp import __version__

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com"
REQUEST_TIMEOUT = 30.0


def resource_path(*parts: Any) -> str:
    """Join path segments, escaping each so an ID can never add a segment."""
    return "/" + "/".join(quote(str(part), safe="@") for part in parts)


@dataclass(frozen=True)
class ProviderResponse:
    data: Any = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ResendClient:
    """Thin async wrapper over ``httpx.AsyncClient`` bound to one API key."""

    def __init__(
        self,
        api_key: str,
        base_url: str = RESEND_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "User-Agent": f"email-sending-mcp/{__version__}",
            },
            timeout=REQUEST_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "ResendClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> ProviderResponse:
        logger.debug(f"{method} {path} params={params}")
        try:
            resp = await self._client.request(method, path, params=params, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            return ProviderResponse(error={"name": "application_error", "message": str(e)})

        body = self._decode(resp)

        if resp.is_error:
            error = body if isinstance(body, dict) else {"message": body}
            error.setdefault("statusCode", resp.status_code)
            logger.warning(f"{method} {path} -> {resp.status_code}")
            return ProviderResponse(error=error)

        return ProviderResponse(data=body)

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ProviderResponse:
        return await self.request("GET", path, params=params or None)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> ProviderResponse:
        return await self.request("POST", path, json=json if json is not None else {})

    async def patch(self, path: str, json: Dict[str, Any]) -> ProviderResponse:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> ProviderResponse:
        return await self.request("DELETE", path)
