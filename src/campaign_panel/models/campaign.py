"""Campaign model for the admin panel."""

import enum
import uuid

from sqlalchemy import CheckConstraint, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from campaign_panel.core.database import Base
from campaign_panel.models.base import TimestampMixin


class CampaignStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


DEFAULT_STATUS = CampaignStatus.ACTIVE


class Campaign(TimestampMixin, Base):
    """A reward campaign managed from the panel."""

    __tablename__ = "campaigns"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    reward: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=DEFAULT_STATUS.value,
        server_default=DEFAULT_STATUS.value,
    )
    # Stored as the caller's ISO-8601 text, validated before insert
    end_date: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("reward >= 0", name="chk_campaign_reward"),
        CheckConstraint(
            "status IN ('active', 'inactive', 'completed')",
            name="chk_campaign_status",
        ),
        Index("idx_campaigns_status", "status"),
        Index("idx_campaigns_created_at", "created_at"),
    )
