"""
Playwright-based BrowserDriver implementation.

Conforms to io/driver.py's BrowserDriver Protocol:
- start() / stop()
- new_context() / close_context(ctx)
- goto(ctx, url)
- click / fill / select_option / wait_for (selector based)
- scroll(ctx, pixels) / wait(ctx, milliseconds)
- evaluate(ctx, script)
- screenshot(ctx, path)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from playwright.async_api import (
    Browser,
    Error as PwError,
    Page,
    Playwright,
    TimeoutError as PwTimeoutError,
    async_playwright,
)

logger = logging.getLogger(__name__)


class PlaywrightDriver:
    """
    A concrete BrowserDriver based on Playwright Chromium.
    - `ctx` in this implementation is a Playwright `Page`.
    - Each `new_context()` creates an incognito BrowserContext + a new Page.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        slow_mo_ms: int = 0,
        default_timeout_ms: int = 30_000,
    ) -> None:
        self.headless = headless
        self.slow_mo_ms = slow_mo_ms
        self.default_timeout_ms = default_timeout_ms

        self._pw: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    # ---------------- lifecycle ----------------

    async def start(self) -> None:
        if self._browser is not None:
            return
        self._pw = await async_playwright().start()
        self._browser = await self._pw.chromium.launch(
            headless=self.headless, slow_mo=self.slow_mo_ms
        )
        logger.debug("chromium launched (headless=%s)", self.headless)

    async def stop(self) -> None:
        """Close the browser (and with it every open context), then Playwright."""
        browser, pw = self._browser, self._pw
        self._browser = self._pw = None
        try:
            if browser is not None:
                await browser.close()
        except PwError as e:
            logger.debug("ignoring error while closing browser: %s", e)
        finally:
            if pw is not None:
                await pw.stop()

    async def new_context(self) -> Page:
        """One replay = one incognito context with a single page; the page is `ctx`."""
        if self._browser is None:
            raise RuntimeError("Browser not started. Call start() first.")
        context = await self._browser.new_context()
        context.set_default_timeout(self.default_timeout_ms)
        return await context.new_page()

    async def close_context(self, ctx: Any) -> None:
        await self._as_page(ctx).context.close()

    # ---------------- primitives ----------------

    async def goto(self, ctx: Any, url: str, *, timeout_ms: Optional[int] = None) -> None:
        page = self._as_page(ctx)
        await page.goto(url, timeout=timeout_ms or self.default_timeout_ms, wait_until="load")

    async def wait_for(self, ctx: Any, selector: str, *, timeout_ms: Optional[int] = None) -> None:
        # present in the DOM, not necessarily visible
        page = self._as_page(ctx)
        await page.locator(selector).first.wait_for(
            state="attached", timeout=timeout_ms or self.default_timeout_ms
        )

    async def wait(self, ctx: Any, milliseconds: int) -> None:
        page = self._as_page(ctx)
        await page.wait_for_timeout(milliseconds)

    async def click(self, ctx: Any, selector: str, *, timeout_ms: Optional[int] = None) -> None:
        page = self._as_page(ctx)
        locator = page.locator(selector).first
        to = timeout_ms or self.default_timeout_ms
        await locator.wait_for(state="visible", timeout=to)
        await locator.scroll_into_view_if_needed()
        await locator.click(timeout=to)

    async def scroll(self, ctx: Any, pixels: int) -> None:
        page = self._as_page(ctx)
        await page.mouse.wheel(0, pixels)

    async def fill(
        self, ctx: Any, selector: str, text: str, *, timeout_ms: Optional[int] = None
    ) -> None:
        """
        Prefer fill() for determinism; fall back to click+type for tricky widgets.
        """
        page = self._as_page(ctx)
        locator = page.locator(selector).first
        to = timeout_ms or self.default_timeout_ms
        await locator.wait_for(state="visible", timeout=to)
        try:
            await locator.fill(text, timeout=to)
            return
        except PwTimeoutError:
            logger.debug("fill() timed out on %s; falling back to typing", selector)
        await locator.click(timeout=to)
        await locator.press_sequentially(text, timeout=to)

    async def select_option(
        self, ctx: Any, selector: str, value: str, *, timeout_ms: Optional[int] = None
    ) -> None:
        """
        Select an option in <select>; a plain string matches option value or label.
        """
        page = self._as_page(ctx)
        locator = page.locator(selector).first
        to = timeout_ms or self.default_timeout_ms
        await locator.wait_for(state="visible", timeout=to)
        await locator.select_option(value, timeout=to)

    async def evaluate(self, ctx: Any, script: str) -> Any:
        page = self._as_page(ctx)
        return await page.evaluate(script)

    async def screenshot(self, ctx: Any, path: str, *, full_page: bool = True) -> None:
        page = self._as_page(ctx)
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=path, full_page=full_page)

    # ---------------- internals ----------------

    @staticmethod
    def _as_page(ctx: Any) -> Page:
        if not isinstance(ctx, Page):
            raise TypeError("ctx must be a Playwright Page (returned by new_context()).")
        return ctx
