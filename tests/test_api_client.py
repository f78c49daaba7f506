"""Tests for the async API client against a mocked transport."""

import json
from uuid import uuid4

import httpx
import pytest

from campaign_panel.client.api_client import ApiError, CampaignApiClient
from campaign_panel.core.exceptions import ValidationError


def campaign_json(**overrides) -> dict:
    data = {
        "id": str(uuid4()),
        "title": "Launch",
        "description": "desc",
        "reward": 100,
        "status": "active",
        "endDate": "2025-01-01",
        "created_at": "2025-01-01T12:00:00Z",
        "updated_at": "2025-01-01T12:00:00Z",
    }
    data.update(overrides)
    return data


def make_client(handler) -> CampaignApiClient:
    transport = httpx.MockTransport(handler)
    return CampaignApiClient(
        prefix="/campaigns",
        client=httpx.AsyncClient(transport=transport, base_url="http://test"),
    )


class TestCampaignApiClient:
    """Test request shaping and envelope unwrapping."""

    @pytest.mark.asyncio
    async def test_list_sends_params_and_unwraps(self):
        """Test listing sends query params and unwraps the page."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={"success": True, "data": {"items": [campaign_json()], "total_pages": 3}},
            )

        async with make_client(handler) as api:
            page = await api.list(page=2, limit=10, title="Laun", status=None)

        assert requests[0].url.path == "/campaigns"
        assert dict(requests[0].url.params) == {"page": "2", "limit": "10", "title": "Laun"}
        assert page.total_pages == 3
        assert page.items[0].end_date == "2025-01-01"

    @pytest.mark.asyncio
    async def test_add_posts_wire_names(self):
        """Test creating posts the endDate wire name."""
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent.update(json.loads(request.content))
            return httpx.Response(201, json={"success": True, "data": campaign_json()})

        async with make_client(handler) as api:
            created = await api.add(
                {"title": "Launch", "description": "desc", "reward": 100, "endDate": "2025-01-01"}
            )

        assert sent == {
            "title": "Launch",
            "description": "desc",
            "reward": 100,
            "status": "active",
            "endDate": "2025-01-01",
        }
        assert created.title == "Launch"

    @pytest.mark.asyncio
    async def test_add_validates_before_sending(self):
        """Test invalid create payloads never reach the server."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("request should not be sent")

        async with make_client(handler) as api:
            with pytest.raises(ValidationError):
                await api.add({"title": "", "reward": -1})

    @pytest.mark.asyncio
    async def test_edit_sends_only_supplied_fields(self):
        """Test editing sends only the fields that were set."""
        campaign_id = uuid4()
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "data": campaign_json(status="completed")})

        async with make_client(handler) as api:
            updated = await api.edit(campaign_id, {"status": "completed"})

        assert seen == {"method": "PATCH", "path": f"/campaigns/{campaign_id}", "body": {"status": "completed"}}
        assert updated.status == "completed"

    @pytest.mark.asyncio
    async def test_delete_returns_id(self):
        """Test deleting returns the removed id."""
        campaign_id = uuid4()

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "data": {"id": str(campaign_id)}})

        async with make_client(handler) as api:
            assert await api.delete(campaign_id) == campaign_id

    @pytest.mark.asyncio
    async def test_error_envelope_raises(self):
        """Test an error envelope raises ApiError with its message."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"success": False, "error": "Campaign not found"})

        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.get(uuid4())

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Campaign not found"

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        """Test a non-JSON response raises ApiError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.list()

        assert exc_info.value.status_code == 502
