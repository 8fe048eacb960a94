"""
Cart transaction: add a listed item, open the cart, read it back, empty it.

The controller keeps no record of what it did. Every step is confirmed by
re-reading the page, so the transaction's state is whatever the storefront
currently shows.
"""

from __future__ import annotations

from shared.logging import get_logger
from storefront.driver import AutomationDriver
from storefront.models import CartItem, CartState, CartTransactionResult, Presence
from storefront.selectors import (
    CART_ITEM_DESCRIPTIONS,
    EMPTY_CART_BUTTON,
    EMPTY_CART_CONFIRM,
    EMPTY_CART_SCREEN,
    ITEM_ADD_TO_CART_TEMPLATE,
    ITEM_DESCRIPTION_TEMPLATE,
    LISTING_ITEMS,
    OPEN_CART,
)
from storefront.text import normalize_whitespace

logger = get_logger(__name__)


class CartTransactionController:
    """Listing lookups and cart actions, all re-queried against the live page."""

    def __init__(self, driver: AutomationDriver) -> None:
        self.driver = driver

    async def _click(self, selector: str, event: str) -> bool:
        handle = await self.driver.locate(selector)
        if handle is None:
            logger.warning(f"{event}_absent", selector=selector)
            return False
        await self.driver.click(handle)
        logger.info(f"{event}_clicked")
        return True

    async def _probe(self, selector: str) -> Presence:
        handle = await self.driver.locate(selector)
        if handle is None:
            return Presence.ABSENT
        if await self.driver.is_displayed(handle):
            return Presence.DISPLAYED
        return Presence.HIDDEN

    async def item_count(self) -> int:
        """Number of items in the active page's listing; 0 when there is none."""
        return len(await self.driver.locate_all(LISTING_ITEMS))

    async def item_description(self, index: int) -> str:
        """Description of listing item `index` (1-based), or "" when not found."""
        if index < 1:
            logger.warning("cart.item_index_invalid", index=index)
            return ""
        selector = ITEM_DESCRIPTION_TEMPLATE.format(index=index)
        handle = await self.driver.locate(selector)
        if handle is None:
            logger.warning("cart.item_description_absent", index=index, selector=selector)
            return ""
        return normalize_whitespace(await self.driver.get_text(handle))

    async def add_item_to_cart(self, index: int) -> bool:
        if index < 1:
            logger.warning("cart.item_index_invalid", index=index)
            return False
        return await self._click(ITEM_ADD_TO_CART_TEMPLATE.format(index=index), "cart.add")

    async def open_cart(self) -> bool:
        return await self._click(OPEN_CART, "cart.open")

    async def cart_items(self) -> list[CartItem]:
        handles = await self.driver.locate_all(CART_ITEM_DESCRIPTIONS)
        return [
            CartItem(
                description=normalize_whitespace(await self.driver.get_text(handle)),
                position_index=position,
            )
            for position, handle in enumerate(handles)
        ]

    async def cart_item_description(self, index: int) -> str:
        """Description of cart line `index` (0-based); "" when out of range."""
        lines = await self.cart_items()
        if not 0 <= index < len(lines):
            logger.warning("cart.line_out_of_range", index=index, lines=len(lines))
            return ""
        return lines[index].description

    async def empty_cart(self) -> bool:
        """First click: surfaces the confirmation dialog, does not empty yet."""
        return await self._click(EMPTY_CART_BUTTON, "cart.empty")

    async def confirm_empty_cart(self) -> bool:
        return await self._click(EMPTY_CART_CONFIRM, "cart.empty_confirm")

    async def probe_cart_non_empty_indicator(self) -> Presence:
        return await self._probe(EMPTY_CART_BUTTON)

    async def probe_cart_empty_screen(self) -> Presence:
        return await self._probe(EMPTY_CART_SCREEN)

    async def is_cart_non_empty_indicator_present(self) -> bool:
        return await self.probe_cart_non_empty_indicator() is Presence.DISPLAYED

    async def is_cart_empty_screen_present(self) -> bool:
        return await self.probe_cart_empty_screen() is Presence.DISPLAYED

    async def run_transaction(self, index: int) -> CartTransactionResult:
        """
        Add listing item `index` to the cart, read it back and empty the cart.

        Stops at the first action whose control is missing; `state` records
        the last stage reached and `errors` says why it stopped.
        """
        result = CartTransactionResult(item_index=index)
        result.listing_description = await self.item_description(index)

        if not await self.add_item_to_cart(index):
            result.errors.append("Add-to-cart control not found")
            return self._finish(result)
        result.state = CartState.ITEM_ADDED

        if not await self.open_cart():
            result.errors.append("Cart link not found")
            return self._finish(result)
        result.state = CartState.CART_OPEN

        result.cart_description = await self.cart_item_description(0)
        result.non_empty_before_emptying = await self.probe_cart_non_empty_indicator()

        if not await self.empty_cart():
            result.errors.append("Empty Cart button not found")
            return self._finish(result)
        result.state = CartState.EMPTYING

        if not await self.confirm_empty_cart():
            result.errors.append("Empty Cart confirmation not found")
            return self._finish(result)

        result.empty_screen_after = await self.probe_cart_empty_screen()
        if result.empty_screen_after is Presence.DISPLAYED:
            result.state = CartState.EMPTIED
        else:
            result.errors.append(f"Empty cart screen {result.empty_screen_after.value}")
        return self._finish(result)

    def _finish(self, result: CartTransactionResult) -> CartTransactionResult:
        logger.info(
            "cart.transaction_finished",
            index=result.item_index,
            state=result.state.value,
            description_matches=result.description_matches,
            errors=result.errors,
        )
        return result
