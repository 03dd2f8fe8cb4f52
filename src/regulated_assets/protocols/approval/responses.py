"""
Approval protocol outcomes
==========================

Closed tagged unions for the two response shapes of the approval protocol.

``ApprovalOutcome`` is discriminated on ``status`` and has exactly five
variants; ``ActionOutcome`` is discriminated on ``result`` and has two.
A payload whose discriminant is missing or unknown, or that lacks a field
required by its variant, never becomes an outcome: it raises
ProtocolViolationError carrying the payload.

Callers are expected to branch on the variant type, e.g.::

    match outcome:
        case Approved(signed_tx=tx): ...
        case Revised(revised_tx=tx): ...
        case Pending(timeout_seconds=delay): ...
        case ActionRequired(): ...
        case Rejected(reason=reason): ...
"""

from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from regulated_assets.core.exceptions import ProtocolViolationError

DEFAULT_ACTION_METHOD = "GET"


class _Outcome(BaseModel):
    # Field names are accepted for keyword construction only; wire payloads
    # are validated by alias in _classify.
    model_config = ConfigDict(frozen=True, validate_by_name=True, validate_by_alias=True, extra='ignore')

    # Whether the approval round ends with this outcome
    terminal: ClassVar[bool] = False


# =============================================================================
# TRANSACTION OUTCOMES (status)
# =============================================================================

class Approved(_Outcome):
    """The approval server signed the transaction as submitted."""
    terminal: ClassVar[bool] = True

    status: Literal["success"] = "success"
    signed_tx: str = Field(..., alias="tx", description="Signed transaction envelope (base64)")
    message: str | None = None


class Revised(_Outcome):
    """The server changed the transaction to make it compliant and signed it; the caller must re-check and re-sign."""
    terminal: ClassVar[bool] = True

    status: Literal["revised"] = "revised"
    revised_tx: str = Field(..., alias="tx", description="Revised and signed transaction envelope (base64)")
    message: str | None = None


class Pending(_Outcome):
    """The server could not decide yet; ``timeout_seconds`` is an advisory retry delay (0 = unknown)."""

    status: Literal["pending"] = "pending"
    timeout_seconds: StrictInt = Field(0, alias="timeout")
    message: str | None = None

    @field_validator('timeout_seconds', mode='before')
    @classmethod
    def _default_timeout(cls, v: Any) -> Any:
        return 0 if v is None else v


class ActionRequired(_Outcome):
    """The server needs more information, to be supplied through ``action_url``."""

    status: Literal["action_required"] = "action_required"
    message: str
    action_url: str
    action_method: str = DEFAULT_ACTION_METHOD
    action_fields: tuple[str, ...] | None = None

    @field_validator('action_method', mode='before')
    @classmethod
    def _normalize_method(cls, v: Any) -> Any:
        if v is None:
            return DEFAULT_ACTION_METHOD
        return v.upper() if isinstance(v, str) else v


class Rejected(_Outcome):
    """The transaction is not compliant and cannot be revised."""
    terminal: ClassVar[bool] = True

    status: Literal["rejected"] = "rejected"
    reason: str = Field(..., alias="error")


ApprovalOutcome = Annotated[
    Approved | Revised | Pending | ActionRequired | Rejected,
    Field(discriminator="status"),
]


# =============================================================================
# ACTION OUTCOMES (result)
# =============================================================================

class Done(_Outcome):
    """No further action needed; the caller resubmits the original transaction."""
    terminal: ClassVar[bool] = True

    result: Literal["no_further_action_required"] = "no_further_action_required"


class NextUrl(_Outcome):
    """The user must continue at ``url`` (typically in a browser)."""

    result: Literal["follow_next_url"] = "follow_next_url"
    url: str = Field(..., alias="next_url")
    message: str | None = None


ActionOutcome = Annotated[Done | NextUrl, Field(discriminator="result")]


_approval_adapter: TypeAdapter = TypeAdapter(ApprovalOutcome)
_action_adapter: TypeAdapter = TypeAdapter(ActionOutcome)


def _describe(error: PydanticValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors(include_url=False)
    ]


def _classify(adapter: TypeAdapter, payload: Any, discriminant: str, kind: str):
    if not isinstance(payload, dict):
        raise ProtocolViolationError(f"{kind} response must be a JSON object", raw_payload=payload)
    try:
        return adapter.validate_python(payload, by_alias=True, by_name=False)
    except PydanticValidationError as e:
        problems = _describe(e)
        raise ProtocolViolationError(
            f"Invalid {kind} response ({discriminant}={payload.get(discriminant)!r}): {'; '.join(problems)}",
            raw_payload=payload,
            details={'problems': problems},
        ) from e


def parse_approval_response(payload: Any) -> Approved | Revised | Pending | ActionRequired | Rejected:
    """
    Classify a decoded approval server response.

    Raises:
        ProtocolViolationError: unknown or missing ``status``, or a missing required field
    """
    return _classify(_approval_adapter, payload, "status", "approval")


def parse_action_response(payload: Any) -> Done | NextUrl:
    """
    Classify a decoded action endpoint response.

    Raises:
        ProtocolViolationError: unknown or missing ``result``, or a missing ``next_url``
    """
    return _classify(_action_adapter, payload, "result", "action")


__all__ = [
    'ApprovalOutcome',
    'Approved',
    'Revised',
    'Pending',
    'ActionRequired',
    'Rejected',
    'ActionOutcome',
    'Done',
    'NextUrl',
    'DEFAULT_ACTION_METHOD',
    'parse_approval_response',
    'parse_action_response',
]
