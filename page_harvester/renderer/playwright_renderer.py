# page_harvester/renderer/playwright_renderer.py
"""
Headless Chromium renderer built on Playwright.
"""
from __future__ import annotations

from typing import List, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from page_harvester.config import CrawlerSettings
from page_harvester.logger import get_logger
from page_harvester.renderer.base import BaseRenderer, PageHandle, RenderError

_LAUNCH_ARGS = (
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-extensions",
    "--no-first-run",
)

# <a> inside inline SVG exposes href as SVGAnimatedString, not a string
_ANCHOR_HREFS_JS = (
    "els => els.map(a => typeof a.href === 'string' ? a.href : (a.href && a.href.baseVal) || '')"
)

log = get_logger("renderer")


class PlaywrightPage(PageHandle):
    def __init__(self, page: Page) -> None:
        self._page = page

    async def navigate(self, url: str, *, timeout: float) -> None:
        try:
            await self._page.goto(url, wait_until="load", timeout=timeout * 1000)
        except PlaywrightError as exc:
            raise RenderError(f"navigation to {url} failed: {exc}") from exc

    async def rendered_html(self) -> str:
        try:
            return await self._page.content()
        except PlaywrightError as exc:
            raise RenderError(f"cannot read content: {exc}") from exc

    async def anchor_hrefs(self) -> List[str]:
        try:
            hrefs = await self._page.eval_on_selector_all("a", _ANCHOR_HREFS_JS)
        except PlaywrightError as exc:
            raise RenderError(f"cannot read links: {exc}") from exc
        return [href for href in hrefs if isinstance(href, str) and href]

    async def close(self) -> None:
        try:
            await self._page.close()
        except PlaywrightError as exc:
            raise RenderError(f"cannot close page: {exc}") from exc


class PlaywrightRenderer(BaseRenderer):
    """Launches one Chromium per crawl; every :meth:`open` creates a new tab."""

    def __init__(self, settings: CrawlerSettings) -> None:
        self.settings = settings
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    async def start(self) -> None:
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.settings.headless,
            args=list(_LAUNCH_ARGS),
        )
        self._context = await self._browser.new_context(
            user_agent=self.settings.user_agent,
            ignore_https_errors=self.settings.ignore_https_errors,
        )
        log.debug("Chromium started (headless=%s)", self.settings.headless)

    async def open(self) -> PageHandle:
        if self._context is None:
            raise RuntimeError("Renderer not started")
        return PlaywrightPage(await self._context.new_page())

    async def close(self) -> None:
        if self._context is not None:
            await self._context.close()
            self._context = None
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
