"""
Registry Package
================

Discovery of regulated assets from an issuer's published directory.
"""

from .asset_registry import AssetRegistry
from .directory import StellarToml, fetch_stellar_toml, parse_stellar_toml, stellar_toml_url

__all__ = [
    'AssetRegistry',
    'StellarToml',
    'fetch_stellar_toml',
    'parse_stellar_toml',
    'stellar_toml_url',
]
