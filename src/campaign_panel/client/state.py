"""List-view state and its mapping to and from the address-bar query string.

Everything here is pure: no I/O, no clocks. The controller owns the single
mutable reference to the current :class:`ListState`.
"""

from dataclasses import dataclass, replace
from typing import Any

import httpx

from campaign_panel.schemas.campaign import MAX_TAKE, SortKey, SortType

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
SORT_KEYS = tuple(key.value for key in SortKey)
SORT_ORDERS = tuple(order.value for order in SortType)


@dataclass(frozen=True)
class ListState:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""
    status: str | None = None
    order_by: str | None = None
    order: str | None = None

    def next_page(self) -> "ListState":
        return replace(self, page=self.page + 1)

    def prev_page(self) -> "ListState":
        return replace(self, page=max(1, self.page - 1))

    def with_filters(self, **changes: Any) -> "ListState":
        """Change filters or sorting and go back to the first page."""
        return replace(self, page=DEFAULT_PAGE, **changes)

    def to_request_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"page": self.page, "limit": self.limit}
        if self.search:
            params["title"] = self.search
        if _status_filter(self.status):
            params["status"] = self.status
        if self.order_by:
            params["sort_key"] = self.order_by
        if self.order:
            params["sort_type"] = self.order
        return params

    def query_key(self) -> tuple:
        """Identity of the list request this state produces."""
        return tuple(sorted(self.to_request_params().items()))


def _status_filter(status: str | None) -> bool:
    return bool(status) and status.lower() != "all"


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        return default
    if value == 0:
        return default
    return max(1, value)


def normalize_query(query_string: str) -> str:
    return str(httpx.QueryParams(query_string.lstrip("?")))


def state_from_query(query_string: str) -> ListState:
    params = httpx.QueryParams(query_string.lstrip("?"))

    title = params.get("title")
    if title is None:
        title = params.get("q", "")

    status = params.get("status")
    order_by = params.get("sort_key")
    order = params.get("sort_type")

    return ListState(
        page=_positive_int(params.get("page"), DEFAULT_PAGE),
        limit=min(_positive_int(params.get("limit"), DEFAULT_LIMIT), MAX_TAKE),
        search=title,
        status=status if _status_filter(status) else None,
        order_by=order_by if order_by in SORT_KEYS else None,
        order=order if order in SORT_ORDERS else None,
    )


def state_to_query(state: ListState) -> str:
    """Render only what differs from the defaults, in a stable order."""
    items: list[tuple[str, str]] = []
    if state.page != DEFAULT_PAGE:
        items.append(("page", str(state.page)))
    if state.limit != DEFAULT_LIMIT:
        items.append(("limit", str(state.limit)))
    if state.search:
        items.append(("title", state.search))
    if _status_filter(state.status):
        items.append(("status", state.status))
    if state.order_by:
        items.append(("sort_key", state.order_by))
    if state.order:
        items.append(("sort_type", state.order))
    return str(httpx.QueryParams(items))
