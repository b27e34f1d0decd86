"""HTTP transport for the Meilisearch API.

Uses httpx with bearer-token auth. Every call opens a short-lived
``AsyncClient`` so transports are cheap to construct and safe to share
between concurrent coroutines.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from meilikit import __version__
from meilikit.exceptions import ApiError, InvalidArgumentError, NotFoundError, TransportError

logger = logging.getLogger(__name__)


def _error_from_response(resp: httpx.Response) -> ApiError:
    """Build an ``ApiError`` (or ``NotFoundError``) from an error response.

    The server's error payload looks like
    ``{"message": ..., "code": ..., "type": ..., "link": ...}``; anything else
    falls back to the HTTP reason phrase.
    """
    payload: Dict[str, Any] = {}
    try:
        data = resp.json()
        if isinstance(data, dict):
            payload = data
    except (json.JSONDecodeError, UnicodeDecodeError):
        pass
    message = payload.get("message") or f"HTTP {resp.status_code} {resp.reason_phrase}".strip()
    cls = NotFoundError if resp.status_code == 404 else ApiError
    return cls(
        str(message),
        status_code=resp.status_code,
        code=payload.get("code"),
        error_type=payload.get("type"),
        link=payload.get("link"),
    )


class HttpTransport:
    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        verify_ssl: bool = True,
        timeout: float = 30.0,
    ) -> None:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise InvalidArgumentError(f"Invalid host: {base_url!r}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidArgumentError(f"Invalid host: {base_url!r} (expected http(s)://host[:port])")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.verify_ssl = verify_ssl
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        h = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"meilikit/{__version__}",
        }
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            verify=self.verify_ssl,
            headers=self._headers(),
        )

    async def request(self, method: str, path: str, *, content: Optional[bytes] = None) -> bytes:
        """Send one request and return the raw response body.

        Raises ``TransportError`` when no usable response was received and
        ``ApiError``/``NotFoundError`` for non-2xx statuses.
        """
        logger.debug("%s %s", method, path)
        try:
            async with self._client() as client:
                resp = await client.request(method, path, content=content)
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc
        if resp.is_error:
            err = _error_from_response(resp)
            logger.debug("%s %s -> %s %s", method, path, resp.status_code, err.code)
            raise err
        return resp.content

    async def get(self, path: str) -> bytes:
        return await self.request("GET", path)

    async def post(self, path: str, content: Optional[bytes] = None) -> bytes:
        return await self.request("POST", path, content=content)

    async def put(self, path: str, content: Optional[bytes] = None) -> bytes:
        return await self.request("PUT", path, content=content)

    async def delete(self, path: str) -> bytes:
        return await self.request("DELETE", path)
