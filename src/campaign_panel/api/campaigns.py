"""Campaign management API endpoints."""

from fastapi import APIRouter, status

from campaign_panel.api.deps import CampaignId, ListQuery, Service
from campaign_panel.core.exceptions import NotFoundError
from campaign_panel.middleware.metrics import record_mutation
from campaign_panel.schemas.campaign import (
    CampaignCreate,
    CampaignDeletedResponse,
    CampaignListResponse,
    CampaignResponse,
    CampaignUpdate,
)
from campaign_panel.schemas.envelope import ApiSuccess
from campaign_panel.services.query_builder import total_pages

router = APIRouter()


@router.post(
    "/add",
    response_model=ApiSuccess[CampaignResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_campaign(campaign_data: CampaignCreate, service: Service):
    """Create a new campaign."""
    campaign = await service.create(campaign_data)
    record_mutation("create", "success")
    return ApiSuccess(data=CampaignResponse.model_validate(campaign))


@router.get("", response_model=ApiSuccess[CampaignListResponse])
@router.get("/", response_model=ApiSuccess[CampaignListResponse], include_in_schema=False)
async def list_campaigns(query: ListQuery, service: Service):
    """Get one page of campaigns with filters and sorting."""
    campaigns, total = await service.list_campaigns(query)
    return ApiSuccess(
        data=CampaignListResponse(
            items=[CampaignResponse.model_validate(c) for c in campaigns],
            total_pages=total_pages(total, query.take),
        )
    )


@router.get("/{campaign_id}", response_model=ApiSuccess[CampaignResponse])
async def get_campaign(campaign_id: CampaignId, service: Service):
    """Get campaign by ID."""
    campaign = await service.get_by_id(campaign_id)
    if campaign is None:
        raise NotFoundError()
    return ApiSuccess(data=CampaignResponse.model_validate(campaign))


@router.patch("/{campaign_id}", response_model=ApiSuccess[CampaignResponse])
async def edit_campaign(
    campaign_id: CampaignId,
    campaign_data: CampaignUpdate,
    service: Service,
):
    """Partially update a campaign."""
    campaign = await service.update(campaign_id, campaign_data)
    if campaign is None:
        record_mutation("update", "not_found")
        raise NotFoundError()
    record_mutation("update", "success")
    return ApiSuccess(data=CampaignResponse.model_validate(campaign))


@router.delete("/{campaign_id}", response_model=ApiSuccess[CampaignDeletedResponse])
async def remove_campaign(campaign_id: CampaignId, service: Service):
    """Hard-delete a campaign."""
    deleted_id = await service.delete(campaign_id)
    if deleted_id is None:
        record_mutation("delete", "not_found")
        raise NotFoundError()
    record_mutation("delete", "success")
    return ApiSuccess(data=CampaignDeletedResponse(id=deleted_id))
