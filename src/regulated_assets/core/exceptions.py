"""
Custom Exceptions for the Regulated Assets client
==================================================

Structured error handling lets callers branch on error type rather than
parsing strings.

Error Codes:
- 1xxx: Client errors (caller input, validation)
- 2xxx: Protocol errors (approval server broke the response contract)
- 3xxx: Lookup errors (ledger account, directory)
- 4xxx: Transport errors (connection, timeout, unexpected HTTP status)
- 5xxx: System errors (internal, configuration)
"""

from enum import IntEnum
from typing import Any

import httpx


class ErrorCode(IntEnum):
    """Structured error codes for user-friendly messages"""

    # 1xxx: Client Errors
    VALIDATION_ERROR = 1001
    INVALID_PARAMETERS = 1002

    # 2xxx: Protocol Errors
    PROTOCOL_VIOLATION = 2001

    # 3xxx: Lookup Errors
    ACCOUNT_NOT_FOUND = 3001
    POLICY_CHECK_FAILED = 3002
    DIRECTORY_ERROR = 3003

    # 4xxx: Transport Errors
    TRANSPORT_ERROR = 4001
    TIMEOUT = 4002

    # 5xxx: System Errors
    INTERNAL_ERROR = 5001
    CONFIGURATION_ERROR = 5002


class RegulatedAssetsError(Exception):
    """Base exception for all regulated assets errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging"""
        return {
            'error_type': self.__class__.__name__,
            'error_code': int(self.error_code),
            'message': self.message,
            'details': self.details
        }

    def user_message(self) -> str:
        """Get user-friendly error message based on error code"""
        code_messages = {
            ErrorCode.VALIDATION_ERROR: "Invalid input provided",
            ErrorCode.INVALID_PARAMETERS: "Invalid parameters",
            ErrorCode.PROTOCOL_VIOLATION: "Approval server sent an invalid response",
            ErrorCode.ACCOUNT_NOT_FOUND: "Issuer account not found",
            ErrorCode.POLICY_CHECK_FAILED: "Could not determine whether approval is required",
            ErrorCode.DIRECTORY_ERROR: "Could not load the asset directory",
            ErrorCode.TRANSPORT_ERROR: "Approval server unreachable",
            ErrorCode.TIMEOUT: "Request timed out",
            ErrorCode.INTERNAL_ERROR: "Internal error",
            ErrorCode.CONFIGURATION_ERROR: "Configuration error",
        }
        return f"Error {self.error_code}: {code_messages.get(self.error_code, self.message)}"


class ValidationError(RegulatedAssetsError):
    """Raised when caller-supplied input fails validation"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class ProtocolViolationError(RegulatedAssetsError):
    """
    Raised when a response is well-formed JSON but breaks the documented
    contract: unknown or missing discriminant, or a required field missing
    for the given discriminant.

    The offending payload is kept on ``raw_payload`` for diagnostics.
    """

    def __init__(self, message: str, raw_payload: Any, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.PROTOCOL_VIOLATION, details)
        self.raw_payload = raw_payload


class AccountNotFoundError(RegulatedAssetsError):
    """Raised when the ledger has no account for the requested id"""

    def __init__(self, account_id: str, details: dict[str, Any] | None = None):
        super().__init__(f"Account not found: {account_id}", ErrorCode.ACCOUNT_NOT_FOUND, details)
        self.account_id = account_id


class PolicyCheckFailedError(RegulatedAssetsError):
    """Raised when the issuer flags lookup fails; the original error is kept on ``cause``"""

    def __init__(self, message: str, cause: BaseException, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.POLICY_CHECK_FAILED, details)
        self.cause = cause


class TransportError(RegulatedAssetsError):
    """
    Raised on connection failure, timeout, a non-JSON body, or an HTTP status
    outside the accepted carriers.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        code = ErrorCode.TIMEOUT if _is_timeout(cause) else ErrorCode.TRANSPORT_ERROR
        super().__init__(message, code, details)
        self.cause = cause
        self.status_code = status_code


class DirectoryError(RegulatedAssetsError):
    """Raised when a stellar.toml directory cannot be fetched or parsed"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.DIRECTORY_ERROR, details)


class ConfigurationError(RegulatedAssetsError):
    """Raised when network or Horizon settings cannot be resolved"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


def _is_timeout(cause: BaseException | None) -> bool:
    return isinstance(cause, (httpx.TimeoutException, TimeoutError))
