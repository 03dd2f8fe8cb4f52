"""
Action Client
=============

Sends the compliance data requested by an ActionRequired outcome to its
``action_url`` and classifies the reply as Done or NextUrl.

GET actions carry the fields as query parameters; POST actions carry them
as a JSON object body.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from regulated_assets.core.exceptions import TransportError, ValidationError

from .responses import DEFAULT_ACTION_METHOD, ActionRequired, Done, NextUrl, parse_action_response
from .transport import BaseProtocolClient

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")


class ActionClient(BaseProtocolClient):
    """Single-shot client for an approval server's follow-up action endpoint."""

    async def submit(
        self,
        action_url: str,
        action_method: str = DEFAULT_ACTION_METHOD,
        fields: Mapping[str, Any] | None = None,
    ) -> Done | NextUrl:
        """
        Submit ``fields`` to ``action_url`` using ``action_method``.

        Raises:
            ValidationError: unsupported method (before any request is sent)
            TransportError: connection failure, timeout, non-JSON body, or an
                HTTP status other than 2xx/400
            ProtocolViolationError: the JSON reply does not match Done or NextUrl
        """
        method = (action_method or DEFAULT_ACTION_METHOD).upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(f"Unsupported action method: {action_method}",
                                  details={'action_url': action_url})

        payload = dict(fields or {})
        logger.debug("Submitting %d action field(s) to %s via %s", len(payload), action_url, method)
        if method == "GET":
            # fields are appended to any query already present in action_url
            try:
                url = str(httpx.URL(action_url).copy_merge_params(payload))
            except httpx.InvalidURL as e:
                raise TransportError(f"Invalid URL: {action_url}", cause=e,
                                     details={'url': action_url}) from e
            _, body = await self._request_json(method, url)
        else:
            _, body = await self._request_json(method, action_url, json=payload)

        outcome = parse_action_response(body)
        logger.info("Action endpoint %s answered %s", action_url, outcome.result)
        return outcome

    async def submit_for(
        self, action: ActionRequired, fields: Mapping[str, Any] | None = None
    ) -> Done | NextUrl:
        """
        Answer an ActionRequired outcome.

        Field names must come from ``action.action_fields``; an unrequested
        name raises ValidationError before anything is sent.
        """
        fields = dict(fields or {})
        allowed = set(action.action_fields or ())
        unexpected = sorted(name for name in fields if name not in allowed)
        if unexpected:
            raise ValidationError(
                f"Fields not requested by the approval server: {', '.join(unexpected)}",
                details={'unexpected': unexpected, 'requested': list(action.action_fields or ())},
            )
        return await self.submit(action.action_url, action.action_method, fields)
