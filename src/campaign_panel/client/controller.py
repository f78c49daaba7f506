"""Headless controller for the campaign list view.

Keeps one :class:`ListState` in step with the address bar and with the list
endpoint:

* ``hydrate`` reads the initial query string once; no request is sent before it.
* ``on_external_navigation`` pulls state from the URL (back button, shared
  link) unless the URL is the one this controller wrote last.
* ``apply`` adopts a new state and reports the query string to write, or None
  when the address bar is already current.
"""

import logging
from uuid import UUID

from campaign_panel.client.api_client import CampaignApiClient
from campaign_panel.client.state import (
    ListState,
    normalize_query,
    state_from_query,
    state_to_query,
)
from campaign_panel.schemas.campaign import CampaignListResponse

logger = logging.getLogger(__name__)


class NotHydratedError(RuntimeError):
    """A list request was attempted before the URL state was read."""


class CampaignListController:
    def __init__(self, api: CampaignApiClient):
        self.api = api
        self.state = ListState()
        self.hydrated = False
        self.removing_id: UUID | str | None = None
        self.page_data: CampaignListResponse | None = None
        self._last_applied_query = ""
        self._last_fetched_key: tuple | None = None

    def hydrate(self, query_string: str) -> ListState:
        if not self.hydrated:
            self.state = state_from_query(query_string)
            self._last_applied_query = normalize_query(query_string)
            self.hydrated = True
        return self.state

    def on_external_navigation(self, query_string: str) -> bool:
        """Re-derive state from a URL change; returns True if the state changed."""
        if not self.hydrated:
            return False

        current = normalize_query(query_string)
        if current == self._last_applied_query:
            return False

        parsed = state_from_query(current)
        changed = parsed != self.state
        self.state = parsed
        self._last_applied_query = current
        return changed

    def apply(self, state: ListState) -> str | None:
        self.state = state
        if not self.hydrated:
            return None

        new_query = state_to_query(state)
        if new_query == self._last_applied_query:
            return None
        self._last_applied_query = new_query
        return new_query

    def reset(self) -> str | None:
        """Back to default filters; same contract as :meth:`apply`."""
        return self.apply(ListState())

    async def fetch(self, force: bool = False) -> CampaignListResponse:
        if not self.hydrated:
            raise NotHydratedError("URL state must be hydrated before fetching")

        key = self.state.query_key()
        if not force and key == self._last_fetched_key and self.page_data is not None:
            return self.page_data

        self.page_data = await self.api.list(**self.state.to_request_params())
        self._last_fetched_key = key
        return self.page_data

    async def remove(self, campaign_id: UUID | str) -> CampaignListResponse:
        """Delete one row, then refresh the current page."""
        self.removing_id = campaign_id
        try:
            await self.api.delete(campaign_id)
        finally:
            self.removing_id = None
        logger.info(f"Removed campaign {campaign_id}")
        return await self.fetch(force=True)
