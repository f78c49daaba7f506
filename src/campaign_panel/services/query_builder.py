"""Filter, sort and page-window construction for the campaign list query."""

import math
from typing import NamedTuple

from sqlalchemy import ColumnElement, Select, UnaryExpression, and_, func, select

from campaign_panel.models.campaign import Campaign
from campaign_panel.schemas.campaign import CampaignListQuery, SortKey, SortType

# Only these columns can ever reach ORDER BY
SORT_COLUMNS = {
    SortKey.CREATED_AT: Campaign.created_at,
    SortKey.TITLE: Campaign.title,
    SortKey.REWARD: Campaign.reward,
    SortKey.END_DATE: Campaign.end_date,
    SortKey.STATUS: Campaign.status,
}
DEFAULT_SORT_COLUMN = Campaign.created_at

# Largest OFFSET the store accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


class PageWindow(NamedTuple):
    offset: int
    limit: int


def build_filter(query: CampaignListQuery) -> ColumnElement[bool] | None:
    """Combine the optional title and status constraints.

    Returns None when no constraint applies (match every row), the single
    clause when there is one, and an AND of the clauses otherwise.
    """
    clauses: list[ColumnElement[bool]] = []
    if query.title:
        clauses.append(Campaign.title.icontains(query.title, autoescape=True))
    if query.status is not None:
        clauses.append(Campaign.status == query.status.value)

    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


def build_sort(query: CampaignListQuery) -> UnaryExpression:
    column = SORT_COLUMNS.get(query.sort_key, DEFAULT_SORT_COLUMN)
    if query.sort_type == SortType.DESC:
        return column.desc()
    return column.asc()


def build_window(query: CampaignListQuery) -> PageWindow:
    """Page numbers are 1-indexed; a page past the end simply yields no rows.

    The offset may exceed MAX_OFFSET for absurd page numbers; callers check
    :func:`window_in_range` before sending it to the store.
    """
    return PageWindow(offset=(query.page - 1) * query.take, limit=query.take)


def window_in_range(window: PageWindow) -> bool:
    return window.offset <= MAX_OFFSET


def total_pages(total: int, take: int) -> int:
    return max(1, math.ceil(total / take))


def build_list_statement(query: CampaignListQuery) -> Select:
    window = build_window(query)
    stmt = select(Campaign)
    predicate = build_filter(query)
    if predicate is not None:
        stmt = stmt.where(predicate)
    return stmt.order_by(build_sort(query)).offset(window.offset).limit(window.limit)


def build_count_statement(query: CampaignListQuery) -> Select:
    """Count rows matching the same predicate as the list statement, ignoring the window."""
    stmt = select(func.count()).select_from(Campaign)
    predicate = build_filter(query)
    if predicate is not None:
        stmt = stmt.where(predicate)
    return stmt
