"""
Authorization Policy Checker
============================

Decides whether a transfer of a regulated asset must go through the
approval server.

Approval is required only when the issuer account has BOTH
``auth_required`` and ``auth_revocable`` set. ``auth_required`` alone is
not enough: without revocable authorization the issuer cannot enforce
per-transfer approval on the ledger.
"""

import logging
from typing import Protocol, runtime_checkable

from regulated_assets.core.exceptions import PolicyCheckFailedError
from regulated_assets.core.types import AccountFlags, RegulatedAsset

logger = logging.getLogger(__name__)


@runtime_checkable
class AccountFlagsLookup(Protocol):
    """
    Ledger collaborator returning an account's authorization flags.

    Implementations raise AccountNotFoundError for unknown accounts and
    TransportError when the ledger cannot be reached.
    """

    async def get_account_flags(self, account_id: str) -> AccountFlags:
        ...


def approval_required_for(flags: AccountFlags) -> bool:
    return flags.auth_required and flags.auth_revocable


class AuthorizationPolicyChecker:
    """Checks issuer flags to decide whether per-transfer approval applies."""

    def __init__(self, flags_lookup: AccountFlagsLookup) -> None:
        self.flags_lookup = flags_lookup

    async def requires_approval(self, asset: RegulatedAsset) -> bool:
        """
        Return True iff the issuer has auth_required and auth_revocable set.

        Raises:
            PolicyCheckFailedError: if the flags lookup fails for any reason
        """
        try:
            flags = await self.flags_lookup.get_account_flags(asset.issuer_id)
        except Exception as e:
            logger.warning("Flags lookup for issuer of %s failed: %s", asset.code, e)
            raise PolicyCheckFailedError(
                f"Could not read authorization flags of issuer {asset.issuer_id}",
                cause=e,
                details={'asset': asset.code, 'issuer': asset.issuer_id},
            ) from e

        required = approval_required_for(flags)
        logger.debug(
            "Issuer flags for %s: auth_required=%s auth_revocable=%s -> approval %s",
            asset.code, flags.auth_required, flags.auth_revocable,
            "required" if required else "not required",
        )
        return required
