"""Business logic services."""

from campaign_panel.services.campaign_service import CampaignService

__all__ = [
    "CampaignService",
]
