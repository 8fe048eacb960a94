"""
Pagination navigator for search result pages.

Nothing is cached: the page-number set, the current page and the last page
are read from the pagination control on every call, because the result set
can change between calls (a new search, a page transition).
"""

from __future__ import annotations

import re
from typing import Optional

from shared.logging import get_logger
from storefront.driver import AutomationDriver
from storefront.errors import ElementAbsentError, PageNotFoundError, PaginationParseError
from storefront.selectors import (
    CURRENT_PAGE_LABEL,
    DECORATIVE_PAGE_WORDS,
    LAST_PAGE_LABEL,
    NEXT_PAGE_LINK,
    PAGE_LINK_TEMPLATE,
    PAGINATION_ENTRIES,
)
from storefront.text import parse_integer, trailing_integer

logger = get_logger(__name__)


def is_decorative_label(label: str) -> bool:
    """True for next/previous entries, which carry no page number."""
    words = re.findall(r"[a-z]+", label.lower())
    return any(word in DECORATIVE_PAGE_WORDS for word in words)


def page_link_selector(page: int) -> str:
    """Selector for the entry whose label contains "page <page>"."""
    return PAGE_LINK_TEMPLATE.format(page=page)


class PaginationNavigator:
    """Reads and drives the pagination control through an automation driver."""

    def __init__(self, driver: AutomationDriver) -> None:
        self.driver = driver

    async def discover_page_numbers(self) -> set[int]:
        """
        Collect the page numbers offered by the pagination control.

        Each entry's aria-label is expected to end in its page number
        ("page 2", "current page, page 2"); duplicates collapse. Unlabelled
        and next/previous entries are skipped. Any other label without a
        trailing page number raises PaginationParseError.
        """
        entries = await self.driver.locate_all(PAGINATION_ENTRIES)
        page_numbers: set[int] = set()
        for entry in entries:
            label = await self.driver.get_attribute(entry, "aria-label")
            if not label:
                continue
            number = trailing_integer(label)
            if number is None or number < 1:
                if is_decorative_label(label):
                    continue
                logger.error("pagination.label_unparseable", label=label)
                raise PaginationParseError(label)
            page_numbers.add(number)

        if not entries:
            logger.info("pagination.absent")
        return page_numbers

    async def _read_label_number(self, selector: str, event: str) -> Optional[int]:
        handle = await self.driver.locate(selector)
        if handle is None:
            logger.info(event, selector=selector)
            return None
        text = await self.driver.get_text(handle)
        number = parse_integer(text)
        if number is None:
            logger.warning("pagination.label_without_number", selector=selector, text=text)
        return number

    async def current_page(self) -> Optional[int]:
        """Current page number, or None when page info is unavailable."""
        return await self._read_label_number(CURRENT_PAGE_LABEL, "pagination.current_page_absent")

    async def last_page(self) -> Optional[int]:
        """Last page number, or None when page info is unavailable."""
        return await self._read_label_number(LAST_PAGE_LABEL, "pagination.last_page_absent")

    async def go_to_next_result_page(self) -> bool:
        """Click "next". Returns False, without raising, when there is no such control."""
        link = await self.driver.locate(NEXT_PAGE_LINK)
        if link is None:
            logger.warning("pagination.next_absent", selector=NEXT_PAGE_LINK)
            return False
        await self.driver.click(link)
        logger.debug("pagination.next_clicked")
        return True

    async def go_to_result_page(self, target: int) -> None:
        """
        Navigate to result page `target`.

        Raises PageNotFoundError, without clicking anything, when `target` is
        not one of the discovered page numbers.
        """
        available = await self.discover_page_numbers()
        if target not in available:
            logger.error(
                "pagination.invalid_target",
                target=target,
                available=sorted(available),
            )
            raise PageNotFoundError(target, available)

        selector = page_link_selector(target)
        link = await self.driver.locate(selector)
        if link is None:
            logger.error("pagination.page_link_absent", target=target, selector=selector)
            raise ElementAbsentError(selector, purpose="page link")
        await self.driver.click(link)
        logger.info("pagination.page_selected", target=target)
