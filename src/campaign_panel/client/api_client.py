"""Async HTTP client for the campaign endpoints."""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

import httpx

from campaign_panel.api.validation import parse_create, parse_update
from campaign_panel.core.config import settings
from campaign_panel.schemas.campaign import (
    CampaignCreate,
    CampaignDeletedResponse,
    CampaignListResponse,
    CampaignResponse,
    CampaignUpdate,
)

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The API answered with ``success: false`` or an unreadable body."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class CampaignApiClient:
    """Thin wrapper over the ``/campaigns`` endpoints.

    Payloads are validated locally with the same schemas the server uses before
    anything is sent. Responses are unwrapped from their envelope.
    """

    def __init__(
        self,
        base_url: str | None = None,
        prefix: str = f"{settings.API_PREFIX}/campaigns",
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.prefix = prefix.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout,
        )

    async def __aenter__(self) -> "CampaignApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, f"{self.prefix}{path}", **kwargs)
        try:
            body = response.json()
        except ValueError:
            raise ApiError(response.status_code, "Invalid response from server") from None

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("error") if isinstance(body, dict) else None
            logger.warning(f"{method} {path} failed with {response.status_code}: {message}")
            raise ApiError(response.status_code, message or "Request failed")
        return body.get("data")

    async def list(self, **params: Any) -> CampaignListResponse:
        query = {key: value for key, value in params.items() if value is not None}
        data = await self._request("GET", "", params=query)
        return CampaignListResponse.model_validate(data)

    async def get(self, campaign_id: UUID | str) -> CampaignResponse:
        data = await self._request("GET", f"/{campaign_id}")
        return CampaignResponse.model_validate(data)

    async def add(self, payload: CampaignCreate | Mapping[str, Any]) -> CampaignResponse:
        if not isinstance(payload, CampaignCreate):
            payload = parse_create(payload)
        data = await self._request(
            "POST", "/add", json=payload.model_dump(mode="json", by_alias=True)
        )
        return CampaignResponse.model_validate(data)

    async def edit(
        self, campaign_id: UUID | str, payload: CampaignUpdate | Mapping[str, Any]
    ) -> CampaignResponse:
        if not isinstance(payload, CampaignUpdate):
            payload = parse_update(payload)
        data = await self._request(
            "PATCH",
            f"/{campaign_id}",
            json=payload.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return CampaignResponse.model_validate(data)

    async def delete(self, campaign_id: UUID | str) -> UUID:
        data = await self._request("DELETE", f"/{campaign_id}")
        return CampaignDeletedResponse.model_validate(data).id
