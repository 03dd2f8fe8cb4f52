"""
Asset Directory (stellar.toml)
==============================

Parses a stellar.toml document into the pieces the client needs: the
CURRENCIES entries, the network passphrase and the Horizon URL. Also
fetches the document from ``{domain}/.well-known/stellar.toml``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
import toml

from regulated_assets.core.exceptions import DirectoryError
from regulated_assets.core.types import CurrencyDescriptor

logger = logging.getLogger(__name__)

WELL_KNOWN_PATH = "/.well-known/stellar.toml"


@dataclass(frozen=True)
class StellarToml:
    """The subset of a stellar.toml document used for regulated assets."""

    network_passphrase: str | None = None
    horizon_url: str | None = None
    currencies: tuple[CurrencyDescriptor, ...] = field(default_factory=tuple)


def parse_stellar_toml(text: str) -> StellarToml:
    """
    Parse stellar.toml text.

    Raises:
        DirectoryError: if the text is not valid TOML or CURRENCIES is not a table array
    """
    try:
        data: dict[str, Any] = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise DirectoryError(f"Invalid stellar.toml: {e}") from e

    raw_currencies = data.get("CURRENCIES", [])
    if not isinstance(raw_currencies, list):
        raise DirectoryError("Invalid stellar.toml: CURRENCIES must be an array of tables")

    currencies = tuple(
        CurrencyDescriptor.from_mapping(entry) for entry in raw_currencies if isinstance(entry, dict)
    )
    passphrase = data.get("NETWORK_PASSPHRASE")
    horizon_url = data.get("HORIZON_URL")
    return StellarToml(
        network_passphrase=passphrase if isinstance(passphrase, str) else None,
        horizon_url=horizon_url if isinstance(horizon_url, str) else None,
        currencies=currencies,
    )


def stellar_toml_url(domain: str) -> str:
    """Build the well-known URL; a bare domain is assumed to be https."""
    domain = domain.strip().rstrip("/")
    if not domain:
        raise DirectoryError("Domain must not be empty")
    if "://" not in domain:
        domain = f"https://{domain}"
    return f"{domain}{WELL_KNOWN_PATH}"


async def fetch_stellar_toml(domain: str, client: httpx.AsyncClient) -> StellarToml:
    """
    Fetch and parse the stellar.toml published by a domain.

    Raises:
        DirectoryError: on an invalid domain, an unreachable host, a non-2xx
            status or an unparseable document
    """
    url = stellar_toml_url(domain)
    try:
        response = await client.get(url)
    except httpx.InvalidURL as e:
        raise DirectoryError(f"Invalid domain: {domain}") from e
    except httpx.HTTPError as e:
        raise DirectoryError(f"Could not fetch {url}: {e}") from e

    if not response.is_success:
        raise DirectoryError(f"Could not fetch {url}: HTTP {response.status_code}",
                             details={'status_code': response.status_code})

    logger.debug("Fetched stellar.toml from %s (%d bytes)", url, len(response.content))
    return parse_stellar_toml(response.text)
