# page_harvester/crawler/fetcher.py
"""
Fetcher module: renders one page with bounded retries and extracts its text.
"""
from __future__ import annotations

import asyncio
from typing import List, Tuple

from page_harvester.config import CrawlerSettings
from page_harvester.crawler.models import Dropped, Fetched, FetchOutcome, PageResult
from page_harvester.crawler.url_utils import validate_url
from page_harvester.logger import get_logger
from page_harvester.parser import extract_text
from page_harvester.renderer.base import BaseRenderer, PageHandle, RenderError
from page_harvester.utils import sanitize_text


class PageFetcher:
    """Best-effort page loader: a page that keeps failing is dropped, never raised."""

    def __init__(self, renderer: BaseRenderer, settings: CrawlerSettings) -> None:
        self.renderer = renderer
        self.settings = settings
        self.logger = get_logger("fetcher")

    async def fetch(self, url: str) -> FetchOutcome:
        """
        Fetch *url* and return :class:`Fetched` with the page result and its
        anchor hrefs, or :class:`Dropped` when the URL is rejected or every
        attempt failed.
        """
        target = validate_url(url)
        if target is None:
            return Dropped(url, "invalid url")

        # PDFs are link targets only; the renderer never opens them
        if target.endswith(".pdf"):
            return Fetched(PageResult(url=target, title=target, content=""))

        page = await self.renderer.open()
        try:
            return await self._fetch_with_retry(page, target)
        finally:
            try:
                await page.close()
            except RenderError as exc:
                self.logger.warning("Closing page for %s failed: %s", target, exc)

    async def _fetch_with_retry(self, page: PageHandle, url: str) -> FetchOutcome:
        attempts = 0
        timeout = self.settings.navigation_timeout
        while True:
            attempts += 1
            try:
                html, hrefs = await asyncio.wait_for(self._render(page, url, timeout), timeout=timeout)
                break
            except (RenderError, asyncio.TimeoutError) as exc:
                reason = str(exc) or type(exc).__name__
                if attempts >= self.settings.max_attempts:
                    self.logger.warning("Dropped %s after %d attempts: %s", url, attempts, reason)
                    return Dropped(url, reason, attempts)
                self.logger.debug(
                    "Retry %d/%d for %s: %s", attempts, self.settings.max_attempts, url, reason
                )
                if self.settings.retry_delay:
                    await asyncio.sleep(self.settings.retry_delay)

        extracted = extract_text(html)
        title = sanitize_text(extracted.title)
        content = sanitize_text(extracted.body_text)
        return Fetched(PageResult(url=url, title=title or url, content=content), hrefs)

    @staticmethod
    async def _render(page: PageHandle, url: str, timeout: float) -> Tuple[str, List[str]]:
        await page.navigate(url, timeout=timeout)
        html = await page.rendered_html()
        hrefs = await page.anchor_hrefs()
        return html, hrefs
