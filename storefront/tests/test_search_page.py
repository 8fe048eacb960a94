"""
Tests for the caller-facing `SearchPage` API, including the end-to-end
pagination and cart scenarios on a three-page result set.
"""

from __future__ import annotations

import pytest

from storefront.errors import PageNotFoundError
from storefront.search_page import SearchPage


@pytest.mark.asyncio
async def test_search_for_product_types_and_submits(three_page_storefront):
    page = SearchPage(three_page_storefront)

    assert await page.search_for_product("stainless steel table") is True

    assert three_page_storefront.searches == ["stainless steel table"]


@pytest.mark.asyncio
async def test_clear_search_box(three_page_storefront):
    page = SearchPage(three_page_storefront)
    await page.search_for_product("shelf")

    assert await page.clear_search_box() is True
    await page.search_for_product("table")

    assert three_page_storefront.searches == ["shelf", "table"]


@pytest.mark.asyncio
async def test_search_without_search_box(make_storefront):
    page = SearchPage(make_storefront(has_search_box=False))

    assert await page.search_for_product("table") is False
    assert await page.clear_search_box() is False


@pytest.mark.asyncio
async def test_result_and_page_counts(three_page_storefront):
    page = SearchPage(three_page_storefront)

    assert await page.return_search_result_count() == 1234
    assert await page.return_search_page_count() == 3
    assert await page.return_current_search_page_number() == 1


@pytest.mark.asyncio
async def test_counts_fall_back_to_zero_when_absent(make_storefront):
    page = SearchPage(make_storefront([["Work Table"]], result_header=None))

    assert await page.return_search_result_count() == 0
    assert await page.return_search_page_count() == 0
    assert await page.return_current_search_page_number() == 0
    assert await page.get_page_numbers() == []


@pytest.mark.asyncio
async def test_go_to_result_page_end_to_end(three_page_storefront):
    page = SearchPage(three_page_storefront)
    await page.search_for_product("stainless steel table")

    assert await page.get_page_numbers() == [1, 2, 3]
    await page.go_to_result_page(3)
    assert await page.return_current_search_page_number() == 3

    with pytest.raises(PageNotFoundError):
        await page.go_to_result_page(9)
    assert await page.return_current_search_page_number() == 3


@pytest.mark.asyncio
async def test_go_to_next_result_page(three_page_storefront):
    page = SearchPage(three_page_storefront)

    assert await page.go_to_next_result_page() is True
    assert await page.return_current_search_page_number() == 2


@pytest.mark.asyncio
async def test_audit_missing_keyword(three_page_storefront):
    result = await SearchPage(three_page_storefront).audit_missing_keyword("table")

    assert result.missing_titles == ["Equipment Stand", "Wall Shelf"]


@pytest.mark.asyncio
async def test_cart_sequence_end_to_end(three_page_storefront):
    page = SearchPage(three_page_storefront)
    await page.go_to_result_page(3)

    item_count = await page.get_page_item_count()
    listed = await page.get_search_item_description(item_count)
    assert listed == "Wall Shelf"

    assert await page.add_item_to_cart(item_count) is True
    assert await page.go_to_cart_page() is True
    assert await page.get_cart_item_description(0) == listed
    assert await page.get_cart_item_description(5) == ""
    assert await page.is_cart_non_empty_indicator_present() is True

    assert await page.click_empty_cart() is True
    assert await page.confirm_empty_cart() is True
    assert await page.is_cart_empty_screen_present() is True
