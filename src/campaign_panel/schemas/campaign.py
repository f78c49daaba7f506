"""Campaign schemas for request/response validation."""

import enum
from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    BeforeValidator,
    Field,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from campaign_panel.models.campaign import DEFAULT_STATUS, CampaignStatus

DEFAULT_PAGE = 1
DEFAULT_TAKE = 10
MAX_TAKE = 100


class SortKey(str, enum.Enum):
    CREATED_AT = "created_at"
    TITLE = "title"
    REWARD = "reward"
    END_DATE = "endDate"
    STATUS = "status"


class SortType(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


def _check_reward_type(value: Any) -> Any:
    # Lax int parsing would accept "100" and True
    if isinstance(value, (str, bool)):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _check_date(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("invalid_date", "Invalid date") from None
    return value


Reward = Annotated[int, BeforeValidator(_check_reward_type), Field(ge=0)]
EndDate = Annotated[str, Field(min_length=1, max_length=64), AfterValidator(_check_date)]


class CampaignCreate(BaseModel):
    """Schema for campaign creation request."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    reward: Reward
    status: CampaignStatus = DEFAULT_STATUS
    end_date: EndDate = Field(..., alias="endDate")

    model_config = {"populate_by_name": True}


class CampaignUpdate(BaseModel):
    """Schema for partial campaign updates.

    Every field is optional but at least one must be supplied, and a supplied
    field may not be null.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    reward: Reward | None = None
    status: CampaignStatus | None = None
    end_date: EndDate | None = Field(None, alias="endDate")

    model_config = {"populate_by_name": True}

    @field_validator("title", "description", "reward", "status", "end_date")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "Field may not be null")
        return value

    @model_validator(mode="after")
    def require_one_field(self) -> "CampaignUpdate":
        if not self.model_fields_set:
            raise PydanticCustomError(
                "empty_update",
                "At least one field must be provided to update",
            )
        return self

    def changes(self) -> dict[str, Any]:
        """Supplied fields only, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class CampaignListQuery(BaseModel):
    """Schema for the list endpoint's query string."""

    page: int = Field(DEFAULT_PAGE, ge=1)
    take: int = Field(
        DEFAULT_TAKE,
        ge=1,
        le=MAX_TAKE,
        validation_alias=AliasChoices("take", "limit"),
    )
    title: str | None = Field(None, min_length=1)
    status: CampaignStatus | None = None
    sort_key: SortKey = SortKey.CREATED_AT
    sort_type: SortType = SortType.ASC

    model_config = {"populate_by_name": True}

    @field_validator("status", mode="before")
    @classmethod
    def all_means_unfiltered(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() == "all":
            return None
        return value


class CampaignIdParam(BaseModel):
    """Schema for the ``id`` path parameter."""

    id: UUID


class CampaignResponse(BaseModel):
    """Schema for campaign response."""

    id: UUID
    title: str
    description: str
    reward: int
    status: CampaignStatus
    end_date: str = Field(
        validation_alias=AliasChoices("end_date", "endDate"),
        serialization_alias="endDate",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class CampaignListResponse(BaseModel):
    """Schema for one page of campaigns."""

    items: list[CampaignResponse]
    total_pages: int


class CampaignDeletedResponse(BaseModel):
    """Schema for delete response."""

    id: UUID
