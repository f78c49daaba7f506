"""API dependencies for database access and request parsing."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campaign_panel.api.validation import parse_id, parse_list_query
from campaign_panel.core.database import get_db
from campaign_panel.schemas.campaign import CampaignListQuery
from campaign_panel.services.campaign_service import CampaignService

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_campaign_service(db: DbSession) -> CampaignService:
    return CampaignService(db)


def get_campaign_id(campaign_id: str) -> UUID:
    """Path parameter ``{campaign_id}`` parsed as a UUID."""
    return parse_id(campaign_id)


def get_list_query(request: Request) -> CampaignListQuery:
    return parse_list_query(request.query_params)


Service = Annotated[CampaignService, Depends(get_campaign_service)]
CampaignId = Annotated[UUID, Depends(get_campaign_id)]
ListQuery = Annotated[CampaignListQuery, Depends(get_list_query)]
