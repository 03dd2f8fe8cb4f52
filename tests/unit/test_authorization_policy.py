"""
Tests for AuthorizationPolicyChecker: the auth_required AND auth_revocable rule.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from regulated_assets.core.exceptions import (
    AccountNotFoundError,
    PolicyCheckFailedError,
    TransportError,
)
from regulated_assets.core.types import AccountFlags
from regulated_assets.policy.authorization import (
    AccountFlagsLookup,
    AuthorizationPolicyChecker,
    approval_required_for,
)


def _lookup(flags=None, side_effect=None):
    lookup = AsyncMock()
    if side_effect is not None:
        lookup.get_account_flags = AsyncMock(side_effect=side_effect)
    else:
        lookup.get_account_flags = AsyncMock(return_value=flags)
    return lookup


class TestFlagTable:
    """All four auth_required / auth_revocable combinations."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "auth_required, auth_revocable, expected",
        [
            (True, True, True),
            (True, False, False),
            (False, True, False),
            (False, False, False),
        ],
    )
    async def test_requires_both_flags(self, regulated_asset, auth_required, auth_revocable, expected):
        flags = AccountFlags(auth_required=auth_required, auth_revocable=auth_revocable)
        checker = AuthorizationPolicyChecker(_lookup(flags))

        assert await checker.requires_approval(regulated_asset) is expected

    @pytest.mark.asyncio
    async def test_other_flags_do_not_matter(self, regulated_asset):
        flags = AccountFlags(auth_required=True, auth_immutable=True, auth_clawback_enabled=True)
        checker = AuthorizationPolicyChecker(_lookup(flags))

        assert await checker.requires_approval(regulated_asset) is False

    @pytest.mark.asyncio
    async def test_lookup_called_with_issuer(self, regulated_asset, issuer_id):
        lookup = _lookup(AccountFlags())
        await AuthorizationPolicyChecker(lookup).requires_approval(regulated_asset)

        lookup.get_account_flags.assert_awaited_once_with(issuer_id)

    def test_rule_function(self):
        assert approval_required_for(AccountFlags(auth_required=True, auth_revocable=True)) is True
        assert approval_required_for(AccountFlags(auth_required=True)) is False


class TestLookupFailures:
    """Collaborator failures surface as PolicyCheckFailedError, never False."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            AccountNotFoundError("GXYZ"),
            TransportError("horizon down", cause=httpx.ConnectError("refused")),
            RuntimeError("unexpected"),
        ],
    )
    async def test_failure_wrapped(self, regulated_asset, error):
        checker = AuthorizationPolicyChecker(_lookup(side_effect=error))

        with pytest.raises(PolicyCheckFailedError) as exc_info:
            await checker.requires_approval(regulated_asset)

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert exc_info.value.details["asset"] == "REG"


class TestProtocol:
    def test_horizon_client_satisfies_lookup_protocol(self):
        from regulated_assets.policy.horizon import HorizonAccountFlagsClient

        client = HorizonAccountFlagsClient("https://horizon.example", client=httpx.AsyncClient())
        assert isinstance(client, AccountFlagsLookup)
