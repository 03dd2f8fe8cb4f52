"""
Pytest configuration for regulated_assets tests: validates the environment
and provides shared fixtures for assets and fake HTTP servers.
"""

import sys
from collections.abc import Callable
from typing import Any

import httpx
import pytest

# =============================================================================
# CONSTANTS
# =============================================================================

# Account id of the all-zero ed25519 key
ZERO_ACCOUNT_ID = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"
ISSUER_ID = "GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN"
APPROVAL_SERVER = "https://x/success"


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def issuer_id() -> str:
    return ISSUER_ID


@pytest.fixture
def regulated_asset():
    """A regulated asset as resolved from a directory entry."""
    from regulated_assets.core.types import RegulatedAsset

    return RegulatedAsset(
        code="REG",
        issuer_id=ISSUER_ID,
        approval_server=APPROVAL_SERVER,
        approval_criteria="KYC required for transfers over 1000",
    )


class RecordingServer:
    """
    Fake HTTP server for httpx.MockTransport.

    Replies with a fixed status and JSON (or raw) body and records every
    request it receives.
    """

    def __init__(
        self,
        json_body: Any = None,
        status_code: int = 200,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.json_body = json_body
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_server() -> Callable[..., RecordingServer]:
    """Factory for RecordingServer instances."""
    return RecordingServer


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Validate test environment."""
    missing = []
    for mod in ("httpx", "pydantic", "pydantic_settings", "yaml", "toml"):
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)

    if missing:
        print(
            "\n"
            "=" * 70 + "\n"
            " TEST ENVIRONMENT ERROR\n"
            "=" * 70 + "\n"
            f"\n"
            f" Missing dependencies: {', '.join(missing)}\n"
            f"\n"
            f" Run:\n"
            f"\n"
            f"   pip install -e '.[dev]'\n"
            f"\n"
            "=" * 70,
            file=sys.stderr,
        )
        raise SystemExit(1)
