"""Tests for list query construction.

Statements are compiled against the PostgreSQL dialect so the generated SQL
can be inspected without a database.
"""

import pytest
from sqlalchemy.dialects import postgresql

from campaign_panel.schemas.campaign import CampaignListQuery, SortKey, SortType
from campaign_panel.services.query_builder import (
    MAX_OFFSET,
    PageWindow,
    build_count_statement,
    build_filter,
    build_list_statement,
    build_sort,
    build_window,
    total_pages,
    window_in_range,
)


def compile_sql(clause):
    return clause.compile(dialect=postgresql.dialect())


class TestFilter:
    """Test predicate construction."""

    def test_no_filters_matches_everything(self):
        """Test no filters gives no predicate."""
        assert build_filter(CampaignListQuery()) is None

    def test_title_is_case_insensitive_substring(self):
        """Test the title filter is a case-insensitive substring match."""
        compiled = compile_sql(build_filter(CampaignListQuery(title="Laun")))
        sql = str(compiled)

        assert "campaigns.title" in sql
        assert "LIKE" in sql.upper()
        assert "AND" not in sql
        assert "Laun" in compiled.params.values()

    def test_title_wildcards_are_escaped(self):
        """Test LIKE wildcards in the title are escaped."""
        compiled = compile_sql(build_filter(CampaignListQuery(title="50%_off")))

        assert "50/%/_off" in compiled.params.values()
        assert "ESCAPE" in str(compiled)

    def test_status_only_is_single_equality(self):
        """Test a status filter alone is a single equality."""
        compiled = compile_sql(build_filter(CampaignListQuery(status="completed")))
        sql = str(compiled)

        assert "campaigns.status =" in sql
        assert "AND" not in sql
        assert "completed" in compiled.params.values()

    def test_title_and_status_are_combined_with_and(self):
        """Test title and status are combined with AND."""
        sql = str(compile_sql(build_filter(CampaignListQuery(title="x", status="active"))))

        assert " AND " in sql
        assert "campaigns.title" in sql
        assert "campaigns.status" in sql

    def test_status_all_adds_no_clause(self):
        """Test status all adds no clause."""
        query = CampaignListQuery.model_validate({"status": "all", "title": "x"})
        sql = str(compile_sql(build_filter(query)))

        assert "campaigns.status" not in sql


class TestSort:
    """Test whitelist-bound ordering."""

    @pytest.mark.parametrize(
        "sort_key, column",
        [
            (SortKey.CREATED_AT, "campaigns.created_at"),
            (SortKey.TITLE, "campaigns.title"),
            (SortKey.REWARD, "campaigns.reward"),
            (SortKey.END_DATE, "campaigns.end_date"),
            (SortKey.STATUS, "campaigns.status"),
        ],
    )
    def test_each_key_maps_to_its_column(self, sort_key, column):
        """Test each sort key orders by its column."""
        query = CampaignListQuery(sort_key=sort_key, sort_type=SortType.DESC)

        assert str(compile_sql(build_sort(query))) == f"{column} DESC"

    def test_default_is_created_at_ascending(self):
        """Test the default sort is created_at ascending."""
        assert str(compile_sql(build_sort(CampaignListQuery()))) == "campaigns.created_at ASC"

    def test_unknown_key_falls_back_to_created_at(self):
        """Test an unknown sort key falls back to created_at."""
        query = CampaignListQuery.model_construct(sort_key="bogus", sort_type=SortType.ASC)

        assert str(compile_sql(build_sort(query))) == "campaigns.created_at ASC"


class TestWindow:
    """Test page window arithmetic."""

    @pytest.mark.parametrize(
        "page, take, expected",
        [
            (1, 10, PageWindow(offset=0, limit=10)),
            (2, 10, PageWindow(offset=10, limit=10)),
            (3, 25, PageWindow(offset=50, limit=25)),
            (1, 100, PageWindow(offset=0, limit=100)),
        ],
    )
    def test_offset_is_page_minus_one_times_take(self, page, take, expected):
        """Test the offset is (page - 1) * take."""
        assert build_window(CampaignListQuery(page=page, take=take)) == expected

    @pytest.mark.parametrize(
        "total, take, expected",
        [
            (0, 10, 1),
            (5, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (250, 100, 3),
        ],
    )
    def test_total_pages(self, total, take, expected):
        """Test total pages is at least one."""
        assert total_pages(total, take) == expected

    def test_window_in_range_up_to_max_offset(self):
        """Test offsets are in range up to the store maximum."""
        assert window_in_range(PageWindow(offset=0, limit=10))
        assert window_in_range(PageWindow(offset=MAX_OFFSET, limit=10))
        assert not window_in_range(PageWindow(offset=MAX_OFFSET + 1, limit=10))

    def test_huge_page_overflows_store_offset(self):
        """Test a huge page number overflows the store offset."""
        window = build_window(CampaignListQuery(page=10**19, take=10))

        assert window.offset > MAX_OFFSET
        assert not window_in_range(window)


class TestStatements:
    """Test the composed list and count statements."""

    def test_list_statement_applies_filter_sort_and_window(self):
        """Test the list statement applies filter, sort and window."""
        query = CampaignListQuery(page=3, take=20, title="x", sort_key=SortKey.REWARD, sort_type=SortType.DESC)
        compiled = compile_sql(build_list_statement(query))
        sql = str(compiled)

        assert "FROM campaigns" in sql
        assert "WHERE" in sql
        assert "ORDER BY campaigns.reward DESC" in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql
        assert 20 in compiled.params.values()
        assert 40 in compiled.params.values()

    def test_list_statement_without_filters_has_no_where(self):
        """Test an unfiltered list statement has no WHERE."""
        sql = str(compile_sql(build_list_statement(CampaignListQuery())))

        assert "WHERE" not in sql

    def test_count_uses_same_filter_without_window(self):
        """Test the count uses the same filter without the window."""
        query = CampaignListQuery(page=4, take=10, status="inactive")
        compiled = compile_sql(build_count_statement(query))
        sql = str(compiled)

        assert "count(*)" in sql
        assert "campaigns.status =" in sql
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql
        assert "ORDER BY" not in sql
