"""
Approval Client
===============

Posts a candidate transaction to a regulated asset's approval server and
classifies the reply into one of five outcomes: Approved, Revised,
Pending, ActionRequired or Rejected.

The request is a form-encoded POST with a single ``tx`` field holding the
base64 transaction envelope. The envelope is opaque here; it is never
decoded, signed or submitted to the ledger.
"""

import logging

from regulated_assets.core.exceptions import ValidationError
from regulated_assets.core.types import RegulatedAsset

from .responses import ActionRequired, Approved, Pending, Rejected, Revised, parse_approval_response
from .transport import BAD_REQUEST, BaseProtocolClient

logger = logging.getLogger(__name__)


class ApprovalClient(BaseProtocolClient):
    """Single-shot client for an approval server's transaction endpoint."""

    async def submit(
        self, asset: RegulatedAsset, tx_envelope: str
    ) -> Approved | Revised | Pending | ActionRequired | Rejected:
        """
        Submit a transaction envelope for approval of a transfer of ``asset``.

        Raises:
            TransportError: connection failure, timeout, non-JSON body, or an
                HTTP status other than 2xx/400
            ProtocolViolationError: the JSON reply does not match any outcome
        """
        return await self.submit_envelope(asset.approval_server, tx_envelope)

    async def submit_envelope(
        self, approval_server: str, tx_envelope: str
    ) -> Approved | Revised | Pending | ActionRequired | Rejected:
        """Same as ``submit`` but addressed by approval server URL."""
        if not isinstance(tx_envelope, str) or not tx_envelope:
            raise ValidationError("Transaction envelope must be a non-empty base64 string")

        logger.debug("Posting transaction (%d chars) to %s", len(tx_envelope), approval_server)
        status_code, body = await self._request_json(
            "POST", approval_server, data={"tx": tx_envelope}
        )

        outcome = parse_approval_response(body)
        if status_code == BAD_REQUEST and not isinstance(outcome, (Rejected, ActionRequired)):
            logger.warning("Approval server %s sent status %r under HTTP 400",
                           approval_server, outcome.status)
        logger.info("Approval server %s answered %s", approval_server, outcome.status)
        return outcome
