"""
Unit tests for ActionClient: follow-up compliance data submission.
"""

import json

import httpx
import pytest

from regulated_assets.core.exceptions import (
    ProtocolViolationError,
    TransportError,
    ValidationError,
)
from regulated_assets.protocols.approval import ActionClient, ActionRequired, Done, NextUrl


class TestSubmit:

    @pytest.mark.asyncio
    async def test_next_url_without_message(self, fake_server):
        server = fake_server({"result": "follow_next_url", "next_url": "https://x/step2"})
        outcome = await ActionClient(server.client()).submit("https://x/action", "POST", {"email_address": "a@b.c"})

        assert outcome == NextUrl(url="https://x/step2", message=None)

    @pytest.mark.asyncio
    async def test_done(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})
        outcome = await ActionClient(server.client()).submit("https://x/action", "POST", {})

        assert isinstance(outcome, Done)

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})
        fields = {"email_address": "a@b.c", "mobile_number": "+100"}
        await ActionClient(server.client()).submit("https://x/action", "post", fields)

        request = server.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == fields

    @pytest.mark.asyncio
    async def test_get_sends_query_params(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})
        await ActionClient(server.client()).submit("https://x/action?tx=1", "GET", {"email_address": "a@b.c"})

        request = server.requests[0]
        assert request.method == "GET"
        assert request.url.params["email_address"] == "a@b.c"
        assert request.url.params["tx"] == "1"

    @pytest.mark.asyncio
    async def test_get_keeps_action_url_query_without_fields(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})
        await ActionClient(server.client()).submit("https://x/kyc?id=42", "GET", {})

        assert str(server.requests[0].url) == "https://x/kyc?id=42"

    @pytest.mark.asyncio
    async def test_default_method_is_get(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})
        await ActionClient(server.client()).submit("https://x/action")

        assert server.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_unsupported_method(self, fake_server):
        server = fake_server({"result": "no_further_action_required"})

        with pytest.raises(ValidationError):
            await ActionClient(server.client()).submit("https://x/action", "DELETE", {})
        assert server.requests == []

    @pytest.mark.asyncio
    async def test_next_url_under_400(self, fake_server):
        server = fake_server({"result": "follow_next_url", "next_url": "https://x/n"}, status_code=400)
        outcome = await ActionClient(server.client()).submit("https://x/action", "POST", {})

        assert isinstance(outcome, NextUrl)

    @pytest.mark.asyncio
    async def test_unknown_result(self, fake_server):
        server = fake_server({"result": "maybe"})

        with pytest.raises(ProtocolViolationError) as exc_info:
            await ActionClient(server.client()).submit("https://x/action", "POST", {})
        assert exc_info.value.raw_payload == {"result": "maybe"}

    @pytest.mark.asyncio
    async def test_server_error(self, fake_server):
        server = fake_server({"result": "no_further_action_required"}, status_code=502)

        with pytest.raises(TransportError):
            await ActionClient(server.client()).submit("https://x/action", "POST", {})

    @pytest.mark.asyncio
    async def test_timeout(self, fake_server):
        server = fake_server(exc=httpx.ConnectTimeout("slow"))

        with pytest.raises(TransportError):
            await ActionClient(server.client()).submit("https://x/action", "POST", {})


class TestSubmitFor:

    @pytest.fixture
    def action(self):
        return ActionRequired(
            message="KYC needed",
            action_url="https://x/kyc",
            action_method="POST",
            action_fields=("email_address", "mobile_number"),
        )

    @pytest.mark.asyncio
    async def test_uses_outcome_url_and_method(self, fake_server, action):
        server = fake_server({"result": "no_further_action_required"})
        outcome = await ActionClient(server.client()).submit_for(action, {"email_address": "a@b.c"})

        assert isinstance(outcome, Done)
        request = server.requests[0]
        assert str(request.url) == "https://x/kyc"
        assert request.method == "POST"

    @pytest.mark.asyncio
    async def test_unrequested_field_rejected(self, fake_server, action):
        server = fake_server({"result": "no_further_action_required"})

        with pytest.raises(ValidationError) as exc_info:
            await ActionClient(server.client()).submit_for(action, {"ssn": "123"})
        assert exc_info.value.details["unexpected"] == ["ssn"]
        assert server.requests == []
