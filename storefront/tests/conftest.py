"""
Pytest fixtures for storefront tests.

`FakeStorefront` is an in-memory `AutomationDriver`: it answers the XPath
selectors in `storefront.selectors` from a small model of result pages,
pagination and cart, so components run end to end without a browser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import pytest

from storefront import selectors
from storefront.pagination import page_link_selector

_MAX_INDEX = 100


@dataclass
class FakeElement:
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    displayed: bool = True
    on_click: Optional[Callable[[], None]] = None


class FakeStorefront:
    """
    A storefront with `pages` of result titles.

    The pagination control is rendered when there is more than one page
    (or when `page_labels` overrides its entries). `next_advances=False`
    makes the "next" link do nothing, like a stalled page transition.
    """

    def __init__(
        self,
        pages: Optional[list[list[str]]] = None,
        *,
        page_labels: Optional[list[Optional[str]]] = None,
        next_advances: bool = True,
        result_header: Optional[str] = "stainless steel table (1,234 items)",
        has_search_box: bool = True,
    ) -> None:
        self.pages = pages if pages is not None else [[]]
        self.page_labels = page_labels
        self.next_advances = next_advances
        self.result_header = result_header
        self.has_search_box = has_search_box

        self.current = 1
        self.cart: list[str] = []
        self.cart_open = False
        self.confirm_open = False
        self.search_box_value = ""
        self.searches: list[str] = []
        self.clicks: list[str] = []

    # --- model ---

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def has_pagination(self) -> bool:
        return self.page_labels is not None or self.page_count > 1

    def current_titles(self) -> list[str]:
        if 1 <= self.current <= self.page_count:
            return self.pages[self.current - 1]
        return []

    def _go_to(self, page: int) -> None:
        if 1 <= page <= self.page_count:
            self.current = page

    def _next(self) -> None:
        if self.next_advances:
            self._go_to(self.current + 1)

    def _add_to_cart(self, index: int) -> None:
        self.cart.append(self.current_titles()[index - 1])

    def _confirm_empty(self) -> None:
        self.cart.clear()
        self.confirm_open = False

    def _pagination_labels(self) -> list[Optional[str]]:
        if self.page_labels is not None:
            return self.page_labels
        labels: list[Optional[str]] = []
        if self.current > 1:
            labels.append("previous page")
        for number in range(1, self.page_count + 1):
            if number == self.current:
                labels.append(f"current page, page {number}")
            elif number == self.page_count:
                labels.append(f"last page, page {number}")
            else:
                labels.append(f"page {number}")
        labels.append("next page")
        return labels

    def _clickable(self, name: str, action: Callable[[], None], text: str = "") -> FakeElement:
        def on_click() -> None:
            self.clicks.append(name)
            action()

        return FakeElement(text=text, on_click=on_click)

    def elements(self, selector: str) -> list[FakeElement]:
        titles = self.current_titles()

        if selector == selectors.SEARCH_BOX:
            return [FakeElement(text=self.search_box_value)] if self.has_search_box else []
        if selector == selectors.SEARCH_RESULT_HEADER:
            return [FakeElement(text=self.result_header)] if self.result_header is not None else []

        if selector == selectors.PAGINATION_ENTRIES:
            if not self.has_pagination:
                return []
            return [
                FakeElement(attributes={"aria-label": label} if label is not None else {})
                for label in self._pagination_labels()
            ]
        if selector == selectors.CURRENT_PAGE_LABEL:
            return [FakeElement(text=str(self.current))] if self.has_pagination else []
        if selector == selectors.LAST_PAGE_LABEL:
            return [FakeElement(text=str(self.page_count))] if self.has_pagination else []
        if selector == selectors.NEXT_PAGE_LINK:
            return [self._clickable("next", self._next)] if self.has_pagination else []

        if selector in (selectors.ITEM_TITLES, selectors.LISTING_ITEMS):
            return [FakeElement(text=title) for title in titles]

        if selector == selectors.OPEN_CART:
            return [self._clickable("open_cart", lambda: setattr(self, "cart_open", True))]
        if selector == selectors.CART_ITEM_DESCRIPTIONS:
            return [FakeElement(text=line) for line in self.cart] if self.cart_open else []
        if selector == selectors.EMPTY_CART_BUTTON:
            if self.cart_open and self.cart:
                return [self._clickable("empty_cart", lambda: setattr(self, "confirm_open", True))]
            return []
        if selector == selectors.EMPTY_CART_CONFIRM:
            return [self._clickable("confirm_empty", self._confirm_empty)] if self.confirm_open else []
        if selector == selectors.EMPTY_CART_SCREEN:
            return [FakeElement()] if self.cart_open and not self.cart else []

        for index in range(1, _MAX_INDEX):
            if selector == selectors.ITEM_DESCRIPTION_TEMPLATE.format(index=index):
                return [FakeElement(text=titles[index - 1])] if index <= len(titles) else []
            if selector == selectors.ITEM_ADD_TO_CART_TEMPLATE.format(index=index):
                if index > len(titles):
                    return []
                return [self._clickable(f"add_{index}", lambda i=index: self._add_to_cart(i))]
            if selector == page_link_selector(index):
                if not self.has_pagination or index > self.page_count:
                    return []
                return [self._clickable(f"page_{index}", lambda i=index: self._go_to(i))]

        raise AssertionError(f"FakeStorefront does not know selector {selector!r}")

    # --- AutomationDriver ---

    async def locate(self, selector: str) -> Optional[FakeElement]:
        found = self.elements(selector)
        return found[0] if found else None

    async def locate_all(self, selector: str) -> list[FakeElement]:
        return self.elements(selector)

    async def get_text(self, handle: FakeElement) -> str:
        return handle.text

    async def get_attribute(self, handle: FakeElement, name: str) -> Optional[str]:
        return handle.attributes.get(name)

    async def click(self, handle: FakeElement) -> None:
        if handle.on_click is not None:
            handle.on_click()

    async def send_keys(self, handle: FakeElement, text: str) -> None:
        self.search_box_value += text

    async def clear(self, handle: FakeElement) -> None:
        self.search_box_value = ""

    async def submit(self, handle: FakeElement) -> None:
        self.searches.append(self.search_box_value)
        self.current = 1
        self.cart_open = False

    async def is_displayed(self, handle: FakeElement) -> bool:
        return handle.displayed


@pytest.fixture
def make_storefront() -> Callable[..., FakeStorefront]:
    """Factory for `FakeStorefront` instances."""
    return FakeStorefront


@pytest.fixture
def three_page_storefront() -> FakeStorefront:
    return FakeStorefront(
        [
            ["Work Table 30x48", "Stainless Steel Worktable", "Prep Table with Undershelf"],
            ["Equipment Stand", "Table Cart", "Steel Table"],
            ["Dish Table", "Wall Shelf"],
        ]
    )
