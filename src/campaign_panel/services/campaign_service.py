"""Campaign service for CRUD operations."""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campaign_panel.core.exceptions import StorageError
from campaign_panel.models.campaign import Campaign
from campaign_panel.schemas.campaign import CampaignCreate, CampaignListQuery, CampaignUpdate
from campaign_panel.services.query_builder import (
    build_count_statement,
    build_list_statement,
    build_window,
    window_in_range,
)

logger = logging.getLogger(__name__)

# Partial-update field -> mapped column attribute
UPDATABLE_COLUMNS = {
    "title": Campaign.title,
    "description": Campaign.description,
    "reward": Campaign.reward,
    "status": Campaign.status,
    "end_date": Campaign.end_date,
}


class CampaignService:
    """Service class for campaign operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, message: str, exc: SQLAlchemyError) -> StorageError:
        logger.exception(f"{message}: {exc}")
        await self.db.rollback()
        return StorageError(message)

    async def create(self, campaign_data: CampaignCreate) -> Campaign:
        """Create a new campaign.

        Args:
            campaign_data: Validated creation payload

        Returns:
            Created campaign with generated id and timestamps
        """
        campaign = Campaign(
            title=campaign_data.title,
            description=campaign_data.description,
            reward=campaign_data.reward,
            status=campaign_data.status.value,
            end_date=campaign_data.end_date,
        )

        try:
            self.db.add(campaign)
            await self.db.commit()
            await self.db.refresh(campaign)
        except SQLAlchemyError as e:
            raise await self._fail("Failed to create campaign", e) from e

        logger.info(f"Created campaign {campaign.id}")
        return campaign

    async def get_by_id(self, campaign_id: UUID) -> Campaign | None:
        """Get campaign by ID.

        Args:
            campaign_id: Campaign UUID

        Returns:
            Campaign or None if not found
        """
        try:
            result = await self.db.execute(
                select(Campaign).where(Campaign.id == campaign_id)
            )
        except SQLAlchemyError as e:
            raise await self._fail("Failed to fetch campaign", e) from e
        return result.scalar_one_or_none()

    async def list_campaigns(self, query: CampaignListQuery) -> tuple[list[Campaign], int]:
        """Get one page of campaigns.

        Args:
            query: Validated list query (filters, sort, page window)

        Returns:
            Tuple of (campaigns on the page, total rows matching the filters)
        """
        try:
            if window_in_range(build_window(query)):
                result = await self.db.execute(build_list_statement(query))
                campaigns = list(result.scalars().all())
            else:
                # No row can sit that far past the start
                campaigns = []

            count_result = await self.db.execute(build_count_statement(query))
            total = count_result.scalar_one()
        except SQLAlchemyError as e:
            raise await self._fail("Failed to fetch campaigns", e) from e

        return campaigns, total

    async def update(self, campaign_id: UUID, campaign_data: CampaignUpdate) -> Campaign | None:
        """Apply a partial update.

        Only the supplied fields and ``updated_at`` are written.

        Args:
            campaign_id: Campaign UUID
            campaign_data: Validated partial payload

        Returns:
            Updated campaign or None if not found
        """
        values = {}
        for field, value in campaign_data.changes().items():
            column = UPDATABLE_COLUMNS.get(field)
            if column is None:
                continue
            values[column.key] = value.value if field == "status" else value
        values["updated_at"] = func.now()

        stmt = (
            update(Campaign)
            .where(Campaign.id == campaign_id)
            .values(**values)
            .returning(Campaign)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        try:
            result = await self.db.execute(stmt)
            campaign = result.scalar_one_or_none()
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail("Failed to edit campaign", e) from e

        if campaign is not None:
            logger.info(f"Updated campaign {campaign_id}: {sorted(values)}")
        return campaign

    async def delete(self, campaign_id: UUID) -> UUID | None:
        """Hard-delete a campaign.

        Args:
            campaign_id: Campaign UUID

        Returns:
            The deleted id or None if not found
        """
        stmt = delete(Campaign).where(Campaign.id == campaign_id).returning(Campaign.id)
        try:
            result = await self.db.execute(stmt)
            deleted_id = result.scalar_one_or_none()
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail("Failed to remove campaign", e) from e

        if deleted_id is not None:
            logger.info(f"Deleted campaign {deleted_id}")
        return deleted_id
