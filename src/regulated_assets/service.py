"""
Regulated Assets Service
========================

Convenience facade over the registry, the policy checker and the approval
protocol clients for one issuer domain.

Typical round::

    service = await RegulatedAssetsService.from_domain("https://issuer.example")
    asset = service.regulated_assets[0]
    if await service.authorization_required(asset):
        outcome = await service.post_transaction(tx_b64, asset)

Network and Horizon resolution:
    passphrase: explicit argument, else NETWORK_PASSPHRASE from stellar.toml
    Horizon:    explicit argument, else HORIZON_URL from stellar.toml, else
                the default Horizon of a known network

An explicitly passed Settings also applies its logging section to the
``regulated_assets`` logger.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx

from regulated_assets.config.logging_setup import configure_logging
from regulated_assets.config.settings import Settings
from regulated_assets.core.exceptions import ConfigurationError, RegulatedAssetsError
from regulated_assets.core.network import Network, network_for_passphrase
from regulated_assets.core.structured_logger import StructuredLogger, TraceContext
from regulated_assets.core.types import RegulatedAsset
from regulated_assets.policy.authorization import AccountFlagsLookup, AuthorizationPolicyChecker
from regulated_assets.policy.horizon import HorizonAccountFlagsClient
from regulated_assets.protocols.approval import (
    ActionClient,
    ActionRequired,
    ApprovalClient,
    Approved,
    Done,
    NextUrl,
    Pending,
    Rejected,
    Revised,
)
from regulated_assets.registry.asset_registry import AssetRegistry
from regulated_assets.registry.directory import StellarToml, fetch_stellar_toml

logger = StructuredLogger("RegulatedAssetsService", logging.getLogger(__name__))


class RegulatedAssetsService:
    """Regulated assets of one issuer plus the clients needed to trade them."""

    def __init__(
        self,
        toml_data: StellarToml,
        settings: Settings | None = None,
        horizon_url: str | None = None,
        network_passphrase: str | None = None,
        client: httpx.AsyncClient | None = None,
        flags_lookup: AccountFlagsLookup | None = None,
    ) -> None:
        if settings is not None:
            configure_logging(settings.logging)
        self.settings = settings or Settings()
        self.toml_data = toml_data
        self.network = self._resolve_network(toml_data, network_passphrase or self.settings.horizon.network_passphrase)
        self.horizon_url = self._resolve_horizon_url(toml_data, self.network, horizon_url or self.settings.horizon.url)
        self.regulated_assets: list[RegulatedAsset] = AssetRegistry.resolve(toml_data.currencies)

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.http.timeout_seconds,
            headers={"User-Agent": self.settings.http.user_agent},
        )
        self.flags_lookup = flags_lookup or HorizonAccountFlagsClient(self.horizon_url, client=self._client)
        self.policy_checker = AuthorizationPolicyChecker(self.flags_lookup)
        self.approval_client = ApprovalClient(self._client, self.settings.http)
        self.action_client = ActionClient(self._client, self.settings.http)

        logger.info(
            "Regulated assets service ready",
            network=self.network.passphrase,
            horizon_url=self.horizon_url,
            assets=[asset.code for asset in self.regulated_assets],
        )

    @classmethod
    def from_toml(cls, toml_data: StellarToml, **kwargs: Any) -> "RegulatedAssetsService":
        return cls(toml_data, **kwargs)

    @classmethod
    async def from_domain(
        cls,
        domain: str,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> "RegulatedAssetsService":
        """
        Fetch ``{domain}/.well-known/stellar.toml`` and build a service from it.

        Raises:
            DirectoryError: the document cannot be fetched or parsed
            ConfigurationError: network or Horizon URL cannot be resolved
        """
        http_config = (settings or Settings()).http
        if client is not None:
            toml_data = await fetch_stellar_toml(domain, client)
        else:
            async with httpx.AsyncClient(timeout=http_config.timeout_seconds) as fetch_client:
                toml_data = await fetch_stellar_toml(domain, fetch_client)
        return cls(toml_data, settings=settings, client=client, **kwargs)

    @staticmethod
    def _resolve_network(toml_data: StellarToml, passphrase: str | None) -> Network:
        passphrase = passphrase or toml_data.network_passphrase
        if not passphrase:
            raise ConfigurationError("No network passphrase given and none found in stellar.toml")
        return network_for_passphrase(passphrase)

    @staticmethod
    def _resolve_horizon_url(toml_data: StellarToml, network: Network, horizon_url: str | None) -> str:
        url = horizon_url or toml_data.horizon_url or network.horizon_url
        if not url:
            raise ConfigurationError(
                "No Horizon URL given, none found in stellar.toml, and the network is not a known one",
                details={'network': network.passphrase},
            )
        return url.rstrip("/")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RegulatedAssetsService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def find_asset(self, code: str, issuer_id: str | None = None) -> RegulatedAsset | None:
        """Return the regulated asset with this code (and issuer, if given)."""
        for asset in self.regulated_assets:
            if asset.code == code and (issuer_id is None or asset.issuer_id == issuer_id):
                return asset
        return None

    async def authorization_required(self, asset: RegulatedAsset) -> bool:
        """See AuthorizationPolicyChecker.requires_approval."""
        with TraceContext():
            try:
                required = await self.policy_checker.requires_approval(asset)
            except RegulatedAssetsError as e:
                logger.error("Authorization check failed", asset=str(asset), error=e.to_dict())
                raise
            logger.info("Authorization check", asset=str(asset), approval_required=required)
            return required

    async def post_transaction(
        self, tx_envelope: str, asset: RegulatedAsset | str
    ) -> Approved | Revised | Pending | ActionRequired | Rejected:
        """Post a transaction to the asset's approval server (or an explicit server URL)."""
        approval_server = asset.approval_server if isinstance(asset, RegulatedAsset) else asset
        with TraceContext():
            start = time.time()
            try:
                outcome = await self.approval_client.submit_envelope(approval_server, tx_envelope)
            except RegulatedAssetsError as e:
                logger.error("Transaction post failed", approval_server=approval_server, error=e.to_dict())
                raise
            logger.info(
                "Approval outcome received",
                approval_server=approval_server,
                status=outcome.status,
                terminal=outcome.terminal,
                execution_time_ms=round((time.time() - start) * 1000, 2),
            )
            return outcome

    async def post_action(
        self, url: str, fields: Mapping[str, Any] | None = None, method: str = "POST"
    ) -> Done | NextUrl:
        """Send compliance fields to an action URL."""
        with TraceContext():
            try:
                outcome = await self.action_client.submit(url, method, fields)
            except RegulatedAssetsError as e:
                logger.error("Action post failed", action_url=url, error=e.to_dict())
                raise
            logger.info("Action outcome received", action_url=url, result=outcome.result)
            return outcome


__all__ = ['RegulatedAssetsService']
