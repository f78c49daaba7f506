"""Pytest configuration and fixtures for testing."""

from datetime import datetime, timezone
from typing import Callable
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from campaign_panel.api.deps import get_campaign_service
from campaign_panel.main import app
from campaign_panel.models.campaign import Campaign
from campaign_panel.services.campaign_service import CampaignService


# Mock database session fixture
@pytest.fixture
def mock_db() -> AsyncMock:
    """Create a mock AsyncSession."""
    db = AsyncMock()
    db.add = MagicMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.rollback = AsyncMock()
    db.execute = AsyncMock()
    return db


# Campaign factory fixture
@pytest.fixture
def make_campaign() -> Callable[..., Campaign]:
    """Build detached Campaign rows as the store would return them."""

    def _make(**overrides) -> Campaign:
        now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        fields = {
            "id": uuid4(),
            "title": "Launch",
            "description": "desc",
            "reward": 100,
            "status": "active",
            "end_date": "2025-01-01",
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        return Campaign(**fields)

    return _make


# Mock service fixture
@pytest.fixture
def mock_service() -> AsyncMock:
    """Create a mock CampaignService with every store call stubbed."""
    service = AsyncMock(spec=CampaignService)
    service.create = AsyncMock()
    service.get_by_id = AsyncMock(return_value=None)
    service.list_campaigns = AsyncMock(return_value=([], 0))
    service.update = AsyncMock(return_value=None)
    service.delete = AsyncMock(return_value=None)
    return service


# API client fixture
@pytest.fixture
def client(mock_service: AsyncMock):
    """TestClient whose endpoints talk to the mock service instead of a database."""
    app.dependency_overrides[get_campaign_service] = lambda: mock_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
