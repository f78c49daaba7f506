"""Pydantic schemas for request/response validation."""

from campaign_panel.schemas.campaign import (
    CampaignCreate,
    CampaignDeletedResponse,
    CampaignIdParam,
    CampaignListQuery,
    CampaignListResponse,
    CampaignResponse,
    CampaignUpdate,
    SortKey,
    SortType,
)
from campaign_panel.schemas.envelope import ApiError, ApiSuccess

__all__ = [
    "CampaignCreate",
    "CampaignUpdate",
    "CampaignListQuery",
    "CampaignIdParam",
    "CampaignResponse",
    "CampaignListResponse",
    "CampaignDeletedResponse",
    "SortKey",
    "SortType",
    "ApiSuccess",
    "ApiError",
]
