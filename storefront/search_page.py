"""
Caller-facing API over one storefront session.

`SearchPage` wires the pagination navigator, keyword audit engine and cart
controller to a single driver and exposes the operations the scenarios use.
Count readers keep the int contract (0 when unavailable); use the navigator
directly when "unknown" must be told apart from zero.
"""

from __future__ import annotations

from shared.logging import get_logger
from storefront.audit import KeywordAuditEngine
from storefront.cart import CartTransactionController
from storefront.driver import AutomationDriver
from storefront.models import AuditResult
from storefront.pagination import PaginationNavigator
from storefront.selectors import SEARCH_BOX, SEARCH_RESULT_HEADER
from storefront.text import extract_integer

logger = get_logger(__name__)


class SearchPage:
    def __init__(self, driver: AutomationDriver) -> None:
        self.driver = driver
        self.navigator = PaginationNavigator(driver)
        self.auditor = KeywordAuditEngine(driver, self.navigator)
        self.cart = CartTransactionController(driver)

    # --- Search box ---

    async def search_for_product(self, product_name: str) -> bool:
        """Type `product_name` into the search box and submit. False if there is no box."""
        box = await self.driver.locate(SEARCH_BOX)
        if box is None:
            logger.error("search.box_absent", selector=SEARCH_BOX)
            return False
        await self.driver.send_keys(box, product_name)
        await self.driver.submit(box)
        logger.info("search.submitted", product_name=product_name)
        return True

    async def clear_search_box(self) -> bool:
        box = await self.driver.locate(SEARCH_BOX)
        if box is None:
            logger.error("search.box_absent", selector=SEARCH_BOX)
            return False
        await self.driver.clear(box)
        return True

    async def return_search_result_count(self) -> int:
        header = await self.driver.locate(SEARCH_RESULT_HEADER)
        if header is None:
            logger.warning("search.result_header_absent", selector=SEARCH_RESULT_HEADER)
            return 0
        return extract_integer(await self.driver.get_text(header))

    # --- Pagination ---

    async def return_search_page_count(self) -> int:
        return await self.navigator.last_page() or 0

    async def return_current_search_page_number(self) -> int:
        return await self.navigator.current_page() or 0

    async def get_page_numbers(self) -> list[int]:
        """Discovered page numbers in ascending order."""
        return sorted(await self.navigator.discover_page_numbers())

    async def go_to_result_page(self, page_number: int) -> None:
        await self.navigator.go_to_result_page(page_number)

    async def go_to_next_result_page(self) -> bool:
        return await self.navigator.go_to_next_result_page()

    # --- Audit ---

    async def audit_missing_keyword(self, keyword: str) -> AuditResult:
        return await self.auditor.audit_missing_keyword(keyword)

    # --- Listing and cart ---

    async def get_page_item_count(self) -> int:
        return await self.cart.item_count()

    async def get_search_item_description(self, item_number: int) -> str:
        return await self.cart.item_description(item_number)

    async def add_item_to_cart(self, item_number: int) -> bool:
        return await self.cart.add_item_to_cart(item_number)

    async def go_to_cart_page(self) -> bool:
        return await self.cart.open_cart()

    async def get_cart_item_description(self, item_number: int) -> str:
        return await self.cart.cart_item_description(item_number)

    async def click_empty_cart(self) -> bool:
        return await self.cart.empty_cart()

    async def confirm_empty_cart(self) -> bool:
        return await self.cart.confirm_empty_cart()

    async def is_cart_non_empty_indicator_present(self) -> bool:
        return await self.cart.is_cart_non_empty_indicator_present()

    async def is_cart_empty_screen_present(self) -> bool:
        return await self.cart.is_cart_empty_screen_present()
