"""Core regulated_assets module: shared types, errors and logging."""

from regulated_assets.core.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    DirectoryError,
    ErrorCode,
    PolicyCheckFailedError,
    ProtocolViolationError,
    RegulatedAssetsError,
    TransportError,
    ValidationError,
)
from regulated_assets.core.strkey import decode_account_id, is_valid_account_id
from regulated_assets.core.types import AccountFlags, AssetKind, CurrencyDescriptor, RegulatedAsset

__all__ = [
    "AccountFlags",
    "AccountNotFoundError",
    "AssetKind",
    "ConfigurationError",
    "CurrencyDescriptor",
    "decode_account_id",
    "DirectoryError",
    "ErrorCode",
    "is_valid_account_id",
    "PolicyCheckFailedError",
    "ProtocolViolationError",
    "RegulatedAsset",
    "RegulatedAssetsError",
    "TransportError",
    "ValidationError",
]
