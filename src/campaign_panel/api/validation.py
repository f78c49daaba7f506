"""Parsing of untrusted request input into validated schemas.

Every function either returns a fully typed value or raises
:class:`~campaign_panel.core.exceptions.ValidationError` listing every violated
rule, rendered as ``"<field>: <message>"``.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from campaign_panel.core.exceptions import ValidationError
from campaign_panel.schemas.campaign import (
    CampaignCreate,
    CampaignIdParam,
    CampaignListQuery,
    CampaignUpdate,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

# FastAPI prefixes error locations with where the value came from
_SOURCE_PREFIXES = {"body", "query", "path", "header", "cookie"}


def format_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    messages = []
    for error in errors:
        # Malformed JSON is located by character offset, not by field
        skip_offsets = error.get("type") == "json_invalid"
        loc = [
            str(part)
            for part in error.get("loc", ())
            if part not in _SOURCE_PREFIXES and not (skip_offsets and isinstance(part, int))
        ]
        msg = error.get("msg") or "Invalid input"
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages


def _validate(model: type[ModelT], raw: Any) -> ModelT:
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc.errors())) from exc


def parse_create(raw: Any) -> CampaignCreate:
    return _validate(CampaignCreate, raw)


def parse_update(raw: Any) -> CampaignUpdate:
    return _validate(CampaignUpdate, raw)


def parse_list_query(raw: Mapping[str, Any]) -> CampaignListQuery:
    """Validate list query parameters; values may still be strings."""
    return _validate(CampaignListQuery, dict(raw))


def parse_id(raw: Any) -> UUID:
    return _validate(CampaignIdParam, {"id": raw}).id
