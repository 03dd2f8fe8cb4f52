"""
Shared HTTP handling for the approval protocol clients.

Both the approval endpoint and the action endpoint reply with JSON under a
2xx status, and legitimately under HTTP 400 as well (e.g. a rejection).
Every other status, a body that is not JSON, and any connection or timeout
failure is a TransportError. Each call makes exactly one request.
"""

import logging
from typing import Any

import httpx

from regulated_assets.config.settings import HttpConfig
from regulated_assets.core.exceptions import TransportError

logger = logging.getLogger(__name__)

BAD_REQUEST = 400


def is_accepted_status(status_code: int) -> bool:
    return 200 <= status_code <= 299 or status_code == BAD_REQUEST


class BaseProtocolClient:
    """HTTP client management shared by ApprovalClient and ActionClient."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        http_config: HttpConfig | None = None,
    ) -> None:
        self.http_config = http_config or HttpConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.http_config.timeout_seconds,
            headers={"User-Agent": self.http_config.user_agent},
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _request_json(self, method: str, url: str, **kwargs) -> tuple[int, Any]:
        """Send one request and return (status_code, decoded JSON body)."""
        try:
            response = await self._client.request(
                method, url, headers={"Accept": "application/json"}, **kwargs
            )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}", cause=e,
                                 details={'url': url}) from e
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid URL: {url}", cause=e, details={'url': url}) from e

        if not is_accepted_status(response.status_code):
            logger.warning("%s %s returned HTTP %d", method, url, response.status_code)
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                details={'url': url, 'body': response.text[:500]},
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {url} returned a non-JSON body",
                cause=e,
                status_code=response.status_code,
                details={'url': url, 'body': response.text[:500]},
            ) from e

        return response.status_code, body
