"""Response envelopes wrapping every API payload."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiSuccess(BaseModel, Generic[DataT]):
    """Successful response: ``{"success": true, "data": ...}``."""

    success: Literal[True] = True
    data: DataT


class ApiError(BaseModel):
    """Failed response: ``{"success": false, "error": "..."}``."""

    success: Literal[False] = False
    error: str
