"""Regulated assets approval client: canonical public API."""

from regulated_assets.core.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    DirectoryError,
    PolicyCheckFailedError,
    ProtocolViolationError,
    RegulatedAssetsError,
    TransportError,
    ValidationError,
)
from regulated_assets.core.types import AccountFlags, AssetKind, CurrencyDescriptor, RegulatedAsset
from regulated_assets.policy import AccountFlagsLookup, AuthorizationPolicyChecker, HorizonAccountFlagsClient
from regulated_assets.protocols.approval import (
    ActionClient,
    ActionOutcome,
    ActionRequired,
    ApprovalClient,
    ApprovalOutcome,
    Approved,
    Done,
    NextUrl,
    Pending,
    Rejected,
    Revised,
)
from regulated_assets.registry import AssetRegistry
from regulated_assets.service import RegulatedAssetsService

__all__ = [
    "AccountFlags",
    "AccountFlagsLookup",
    "AccountNotFoundError",
    "ActionClient",
    "ActionOutcome",
    "ActionRequired",
    "ApprovalClient",
    "ApprovalOutcome",
    "Approved",
    "AssetKind",
    "AssetRegistry",
    "AuthorizationPolicyChecker",
    "ConfigurationError",
    "CurrencyDescriptor",
    "DirectoryError",
    "Done",
    "HorizonAccountFlagsClient",
    "NextUrl",
    "Pending",
    "PolicyCheckFailedError",
    "ProtocolViolationError",
    "RegulatedAsset",
    "RegulatedAssetsError",
    "RegulatedAssetsService",
    "Rejected",
    "Revised",
    "TransportError",
    "ValidationError",
]
