"""
Core Type Definitions
=====================

Value types shared by the registry, the policy checker and the approval
protocol clients.

RegulatedAsset is built once when the registry loads and never changes
afterwards. CurrencyDescriptor is the raw, unvalidated shape handed over by
a directory (one entry of a stellar.toml CURRENCIES table).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .exceptions import ValidationError
from .strkey import is_valid_account_id

MIN_CODE_LENGTH = 1
MAX_CODE_LENGTH = 12
_ALPHANUM4_MAX = 4


class AssetKind(StrEnum):
    """Ledger asset type, derived from the asset code length."""

    CREDIT_ALPHANUM4 = "credit_alphanum4"
    CREDIT_ALPHANUM12 = "credit_alphanum12"

    @classmethod
    def for_code(cls, code: str) -> "AssetKind":
        return cls.CREDIT_ALPHANUM4 if len(code) <= _ALPHANUM4_MAX else cls.CREDIT_ALPHANUM12


@dataclass(frozen=True)
class RegulatedAsset:
    """
    An asset whose issuer requires per-transfer approval.

    Raises ValidationError on construction if the code length, the issuer
    account id or the approval server is invalid.
    """

    code: str
    issuer_id: str
    approval_server: str
    approval_criteria: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not MIN_CODE_LENGTH <= len(self.code) <= MAX_CODE_LENGTH:
            raise ValidationError(
                f"Asset code must be {MIN_CODE_LENGTH}-{MAX_CODE_LENGTH} characters",
                details={'code': self.code},
            )
        if not isinstance(self.approval_server, str) or not self.approval_server:
            raise ValidationError("Approval server must be a non-empty URL",
                                  details={'code': self.code})
        if not is_valid_account_id(self.issuer_id):
            raise ValidationError("Issuer is not a valid account id",
                                  details={'code': self.code, 'issuer': self.issuer_id})

    @property
    def kind(self) -> AssetKind:
        return AssetKind.for_code(self.code)

    def __str__(self) -> str:
        return f"{self.code}:{self.issuer_id}"


@dataclass(frozen=True)
class CurrencyDescriptor:
    """One currency entry as published by an asset directory. Nothing is validated here."""

    code: Any = None
    issuer: Any = None
    regulated: Any = None
    approval_server: Any = None
    approval_criteria: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CurrencyDescriptor":
        return cls(
            code=data.get('code'),
            issuer=data.get('issuer'),
            regulated=data.get('regulated'),
            approval_server=data.get('approval_server'),
            approval_criteria=data.get('approval_criteria'),
        )


@dataclass(frozen=True)
class AccountFlags:
    """Issuer account authorization flags as reported by the ledger."""

    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False
    auth_clawback_enabled: bool = False


__all__ = [
    'AssetKind',
    'RegulatedAsset',
    'CurrencyDescriptor',
    'AccountFlags',
    'MIN_CODE_LENGTH',
    'MAX_CODE_LENGTH',
]
