"""
Keyword audit across every page of a search result set.

The page count is read once, before the first page is scanned, and bounds
the traversal: the loop runs that many times whether or not "next" actually
advanced. An unreadable page count means nothing is scanned and the result
is marked inconclusive.
"""

from __future__ import annotations

from typing import Optional

from shared.logging import get_logger
from storefront.driver import AutomationDriver
from storefront.models import AuditResult, ResultItem
from storefront.pagination import PaginationNavigator
from storefront.selectors import ITEM_TITLES
from storefront.text import normalize_whitespace

logger = get_logger(__name__)


def title_has_keyword(title: str, keyword: str) -> bool:
    """Case-insensitive substring check; "table" matches "Worktable"."""
    return keyword.lower() in title.lower()


class KeywordAuditEngine:
    """Classifies every visible result title against a keyword, page by page."""

    def __init__(
        self,
        driver: AutomationDriver,
        navigator: Optional[PaginationNavigator] = None,
    ) -> None:
        self.driver = driver
        self.navigator = navigator or PaginationNavigator(driver)

    async def visible_items(self) -> list[ResultItem]:
        """Titles on the active page, in listing order."""
        handles = await self.driver.locate_all(ITEM_TITLES)
        items: list[ResultItem] = []
        for position, handle in enumerate(handles, start=1):
            title = normalize_whitespace(await self.driver.get_text(handle))
            items.append(ResultItem(title=title, position_index=position))
        return items

    async def audit_missing_keyword(self, keyword: str) -> AuditResult:
        total_pages = await self.navigator.last_page()
        result = AuditResult(keyword=keyword, total_pages=total_pages)

        if not total_pages:
            logger.warning("audit.page_count_unavailable", keyword=keyword)
            return result

        page = 1
        while page <= total_pages:
            items = await self.visible_items()
            missing = [item.title for item in items if not title_has_keyword(item.title, keyword)]
            result.missing_titles.extend(missing)
            result.pages_scanned += 1
            logger.info(
                "audit.page_scanned",
                page=page,
                total_pages=total_pages,
                items=len(items),
                missing=len(missing),
            )
            await self.navigator.go_to_next_result_page()
            page += 1

        if not result.missing_titles:
            logger.info("audit.no_titles_missing_keyword", keyword=keyword)
        else:
            logger.info(
                "audit.titles_missing_keyword",
                keyword=keyword,
                count=len(result.missing_titles),
            )
        return result
