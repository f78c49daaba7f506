"""Client-side helpers for driving the campaign API."""

from campaign_panel.client.api_client import ApiError, CampaignApiClient
from campaign_panel.client.controller import CampaignListController, NotHydratedError
from campaign_panel.client.state import ListState, state_from_query, state_to_query

__all__ = [
    "ApiError",
    "CampaignApiClient",
    "CampaignListController",
    "NotHydratedError",
    "ListState",
    "state_from_query",
    "state_to_query",
]
