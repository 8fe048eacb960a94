"""
Browser session bootstrap for audit runs (viewport, UA, timezone).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, BrowserContext, async_playwright

from shared.config import AppConfig, Viewport
from shared.logging import get_logger
from storefront.driver import PlaywrightDriver

logger = get_logger(__name__)

VIEWPORT_CONFIGS = {
    "desktop": {"width": 1920, "height": 1080},
    "mobile": {"width": 375, "height": 667},
}

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


async def create_browser_context(
    browser: Browser,
    viewport: Viewport,
) -> BrowserContext:
    """Create a browser context with the given viewport and a stable UA and locale."""
    config = VIEWPORT_CONFIGS[viewport]

    return await browser.new_context(
        viewport={"width": config["width"], "height": config["height"]},
        user_agent=USER_AGENT,
        timezone_id="America/New_York",
        locale="en-US",
    )


@asynccontextmanager
async def open_storefront(config: AppConfig) -> AsyncIterator[PlaywrightDriver]:
    """
    Launch Chromium, open the storefront home page and yield a driver for it.

    The browser is closed when the block exits, whether or not it raised.
    """
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=config.headless)
        try:
            context = await create_browser_context(browser, config.viewport)
            page = await context.new_page()
            page.set_default_timeout(config.implicit_wait_ms)

            logger.info("browser.opening_storefront", url=config.base_url, viewport=config.viewport)
            await page.goto(config.base_url, wait_until="domcontentloaded")

            yield PlaywrightDriver(page, implicit_wait_ms=config.implicit_wait_ms)
        finally:
            await browser.close()
            logger.info("browser.closed")
