from campaign_panel.core.config import settings
from campaign_panel.core.database import Base, async_session_maker, engine, get_db, init_models
from campaign_panel.core.exceptions import (
    CampaignPanelError,
    NotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "settings",
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "init_models",
    "CampaignPanelError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
]
