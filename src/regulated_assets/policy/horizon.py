"""
Horizon account flags lookup
============================

AccountFlagsLookup backed by the Horizon REST API
(``GET {horizon}/accounts/{account_id}``). Only the ``flags`` object of the
account record is read.
"""

import logging

import httpx

from regulated_assets.core.exceptions import AccountNotFoundError, TransportError
from regulated_assets.core.types import AccountFlags

logger = logging.getLogger(__name__)


class HorizonAccountFlagsClient:
    """
    Reads issuer flags from Horizon.

    Pass an ``httpx.AsyncClient`` to share a connection pool or to inject a
    mock transport; otherwise one is created and closed by ``aclose()``.
    """

    def __init__(
        self,
        horizon_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.horizon_url = horizon_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HorizonAccountFlagsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def get_account_flags(self, account_id: str) -> AccountFlags:
        url = f"{self.horizon_url}/accounts/{account_id}"
        try:
            response = await self._client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise TransportError(f"Horizon request failed: {e}", cause=e) from e

        if response.status_code == 404:
            raise AccountNotFoundError(account_id)
        if not response.is_success:
            raise TransportError(
                f"Horizon returned HTTP {response.status_code}",
                status_code=response.status_code,
                details={'url': url},
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError("Horizon returned a non-JSON body", cause=e,
                                 status_code=response.status_code) from e

        flags = body.get("flags") if isinstance(body, dict) else None
        if not isinstance(flags, dict):
            raise TransportError("Horizon account record has no flags object",
                                 status_code=response.status_code, details={'url': url})

        return AccountFlags(
            auth_required=flags.get("auth_required") is True,
            auth_revocable=flags.get("auth_revocable") is True,
            auth_immutable=flags.get("auth_immutable") is True,
            auth_clawback_enabled=flags.get("auth_clawback_enabled") is True,
        )
