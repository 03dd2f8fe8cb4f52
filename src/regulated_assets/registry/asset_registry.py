"""
Asset Registry
==============

Turns directory currency entries into validated RegulatedAsset records.

An entry is kept only when it is marked regulated, names an approval
server, has a 1-12 character code and an issuer that is a valid account id.
Anything else is left out without raising: being filtered is the normal
outcome for unregulated or malformed entries.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from regulated_assets.core.exceptions import ValidationError
from regulated_assets.core.types import CurrencyDescriptor, RegulatedAsset

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Stateless resolver from currency descriptors to regulated assets."""

    @staticmethod
    def resolve(
        descriptors: Iterable[CurrencyDescriptor | Mapping[str, Any]],
    ) -> list[RegulatedAsset]:
        """Return the regulated assets among descriptors, preserving order."""
        assets: list[RegulatedAsset] = []
        for descriptor in descriptors:
            if isinstance(descriptor, Mapping):
                descriptor = CurrencyDescriptor.from_mapping(descriptor)
            asset = AssetRegistry._to_asset(descriptor)
            if asset is not None:
                assets.append(asset)
        return assets

    @staticmethod
    def _to_asset(descriptor: CurrencyDescriptor) -> RegulatedAsset | None:
        if descriptor.regulated is not True:
            return None
        if not isinstance(descriptor.approval_server, str) or not descriptor.approval_server:
            logger.debug("Skipping regulated currency %r: no approval server", descriptor.code)
            return None

        criteria = descriptor.approval_criteria if isinstance(descriptor.approval_criteria, str) else None
        try:
            return RegulatedAsset(
                code=descriptor.code,
                issuer_id=descriptor.issuer,
                approval_server=descriptor.approval_server,
                approval_criteria=criteria,
            )
        except ValidationError as e:
            logger.debug("Skipping regulated currency %r: %s", descriptor.code, e.message)
            return None
