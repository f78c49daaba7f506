"""SQLAlchemy ORM models."""

from campaign_panel.models.base import TimestampMixin
from campaign_panel.models.campaign import DEFAULT_STATUS, Campaign, CampaignStatus

__all__ = [
    "TimestampMixin",
    "Campaign",
    "CampaignStatus",
    "DEFAULT_STATUS",
]
