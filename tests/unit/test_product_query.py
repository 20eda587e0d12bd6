"""
Unit tests for catalog_api.domain.models.product_query
"""
import pytest
from catalog_api.domain.models.product_query import (
    DEFAULT_SORT,
    MAX_PAGE,
    PageInfo,
    ProductQuery,
    parse_sort,
)


class TestParseSort:
    """Tests for parse_sort"""

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty_falls_back_to_newest_first(self, raw):
        assert parse_sort(raw) == DEFAULT_SORT

    def test_multiple_fields_and_directions(self):
        assert parse_sort("price,-title") == [("price", 1), ("title", -1)]

    def test_camel_case_aliases(self):
        assert parse_sort("-createdAt,updatedAt") == [("created_at", -1), ("updated_at", 1)]

    def test_unknown_fields_ignored(self):
        assert parse_sort("password,-price,$where") == [("price", -1)]

    def test_only_unknown_fields_falls_back(self):
        assert parse_sort("owner_id") == DEFAULT_SORT

    def test_repeated_field_keeps_first_direction(self):
        assert parse_sort("price,-price") == [("price", 1)]


class TestProductQuery:
    """Tests for ProductQuery.from_params"""

    def test_defaults(self):
        query = ProductQuery.from_params()
        assert query.page == 1
        assert query.limit == 10
        assert query.sort == DEFAULT_SORT
        assert query.keyword is None
        assert query.skip == 0

    @pytest.mark.parametrize("page, expected", [(0, 1), (-3, 1), (4, 4)])
    def test_page_below_one_is_one(self, page, expected):
        assert ProductQuery.from_params(page=page).page == expected

    @pytest.mark.parametrize("limit, expected", [(0, 1), (-5, 1), (25, 25), (500, 100)])
    def test_limit_clamped(self, limit, expected):
        assert ProductQuery.from_params(limit=limit).limit == expected

    def test_default_limit_is_configurable(self):
        assert ProductQuery.from_params(default_limit=20).limit == 20

    def test_blank_keyword_means_no_filter(self):
        assert ProductQuery.from_params(keyword="   ").keyword is None
        assert ProductQuery.from_params(keyword="  shirt ").keyword == "shirt"

    def test_skip(self):
        assert ProductQuery.from_params(page=3, limit=7).skip == 14

    def test_huge_page_clamped_to_max_page(self):
        query = ProductQuery.from_params(page=10 ** 20, limit=100)
        assert query.page == MAX_PAGE
        assert query.skip < 2 ** 63


class TestPageInfo:
    """Tests for PageInfo.build"""

    def test_middle_page(self):
        info = PageInfo.build(page=2, limit=10, total_items=25)
        assert info.total_pages == 3
        assert info.has_next_page is True
        assert info.has_prev_page is True

    def test_exact_multiple(self):
        info = PageInfo.build(page=2, limit=10, total_items=20)
        assert info.total_pages == 2
        assert info.has_next_page is False

    def test_no_results(self):
        info = PageInfo.build(page=1, limit=10, total_items=0)
        assert info.total_pages == 0
        assert info.has_next_page is False
        assert info.has_prev_page is False
