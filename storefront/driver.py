"""
Automation driver contract and its Playwright implementation.

Components only talk to the page through `AutomationDriver`. A lookup either
returns a handle or reports absence (None / empty list) once the driver's
implicit wait has elapsed; that wait is the only readiness policy.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from shared.logging import get_logger

logger = get_logger(__name__)


class AutomationDriver(Protocol):
    """Element access used by the pagination, audit and cart components."""

    async def locate(self, selector: str) -> Optional[Any]: ...

    async def locate_all(self, selector: str) -> list[Any]: ...

    async def get_text(self, handle: Any) -> str: ...

    async def get_attribute(self, handle: Any, name: str) -> Optional[str]: ...

    async def click(self, handle: Any) -> None: ...

    async def send_keys(self, handle: Any, text: str) -> None: ...

    async def clear(self, handle: Any) -> None: ...

    async def submit(self, handle: Any) -> None: ...

    async def is_displayed(self, handle: Any) -> bool: ...


class PlaywrightDriver:
    """
    `AutomationDriver` over a Playwright page, addressing elements by XPath.

    `implicit_wait_ms` bounds how long a lookup waits for the first match to
    attach before the element is reported absent.
    """

    def __init__(self, page: Page, implicit_wait_ms: int = 10_000) -> None:
        self.page = page
        self.implicit_wait_ms = implicit_wait_ms

    def _locator(self, selector: str) -> Locator:
        return self.page.locator(f"xpath={selector}")

    async def _wait_attached(self, locator: Locator) -> bool:
        # Playwright reads timeout=0 as "no timeout"; a zero wait means look once.
        if self.implicit_wait_ms <= 0:
            return await locator.count() > 0
        try:
            await locator.first.wait_for(state="attached", timeout=self.implicit_wait_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    async def locate(self, selector: str) -> Optional[Locator]:
        locator = self._locator(selector)
        if not await self._wait_attached(locator):
            logger.debug("driver.element_absent", selector=selector)
            return None
        return locator.first

    async def locate_all(self, selector: str) -> list[Locator]:
        locator = self._locator(selector)
        if not await self._wait_attached(locator):
            logger.debug("driver.elements_absent", selector=selector)
            return []
        return await locator.all()

    async def get_text(self, handle: Locator) -> str:
        return await handle.inner_text()

    async def get_attribute(self, handle: Locator, name: str) -> Optional[str]:
        return await handle.get_attribute(name)

    async def click(self, handle: Locator) -> None:
        await handle.click()

    async def send_keys(self, handle: Locator, text: str) -> None:
        await handle.press_sequentially(text)

    async def clear(self, handle: Locator) -> None:
        await handle.clear()

    async def submit(self, handle: Locator) -> None:
        # Enter in a form field submits its form.
        await handle.press("Enter")

    async def is_displayed(self, handle: Locator) -> bool:
        return await handle.is_visible()
