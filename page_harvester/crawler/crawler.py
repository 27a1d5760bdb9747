# === FILE: page_harvester/crawler/crawler.py ===
"""
Frontier scheduler: batched breadth-first crawl under a page budget.

Only one batch is in flight at a time. URLs are claimed in ``visited``
synchronously, before any task for the batch is started, so a URL is fetched
at most once however many pages link to it.
"""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from page_harvester.config import CrawlerSettings, CrawlRequest
from page_harvester.crawler.fetcher import PageFetcher
from page_harvester.crawler.link_classifier import LinkClassifier
from page_harvester.crawler.models import CrawlReport, CrawlState, Dropped, PageResult
from page_harvester.crawler.url_utils import scope_links, validate_url
from page_harvester.logger import get_logger
from page_harvester.renderer.base import BaseRenderer

__all__ = ("FrontierCrawler", "crawl")


class FrontierCrawler:
    """Bounded-concurrency BFS over a site, driven by a :class:`CrawlRequest`."""

    def __init__(
        self,
        renderer: BaseRenderer,
        request: CrawlRequest,
        settings: Optional[CrawlerSettings] = None,
    ) -> None:
        self.settings = settings or CrawlerSettings()
        self.request = request
        self.fetcher = PageFetcher(renderer, self.settings)
        self.classifier = LinkClassifier.from_request(request)
        self.concurrency = request.concurrency or self.settings.default_concurrency
        self.state = CrawlState()
        self.elapsed = 0.0
        self.logger = get_logger("crawler")

    async def crawl(self) -> List[PageResult]:
        self.logger.info("Старт обхода: %s (mode=%s)", self.request.seed_url, self.request.mode.value)
        start = time.monotonic()
        state = self.state
        limit = self.settings.page_limit
        state.frontier.append(self.request.seed_url)

        while state.frontier and state.pages_visited < limit:
            size = self.concurrency
            if self.settings.strict_page_limit:
                size = min(size, limit - state.pages_visited)
            batch = [state.frontier.popleft() for _ in range(min(size, len(state.frontier)))]
            claimed = [url for url in map(self._claim, batch) if url is not None]
            await asyncio.gather(*(self._visit(url) for url in claimed))

        self.elapsed = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с (%.2f стр/с), отброшено %d, в очереди %d",
            state.pages_visited,
            self.elapsed,
            state.pages_visited / self.elapsed if self.elapsed else 0,
            len(state.dropped),
            len(state.frontier),
        )
        return state.results

    def report(self) -> CrawlReport:
        return CrawlReport(
            results=list(self.state.results),
            dropped=list(self.state.dropped),
            pages_visited=self.state.pages_visited,
            elapsed=self.elapsed,
        )

    def _claim(self, url: str) -> Optional[str]:
        # no await in here: claiming must finish before the batch is dispatched
        key = validate_url(url) or url
        return key if self.state.claim(key) else None

    async def _visit(self, url: str) -> None:
        outcome = await self.fetcher.fetch(url)
        if isinstance(outcome, Dropped):
            self.state.dropped.append(outcome)
            return

        page = outcome.result
        self.state.results.append(page)
        self.state.pages_visited += 1

        accepted = self.classifier.classify(scope_links(outcome.hrefs, page.url))
        fresh = [link for link in accepted if link not in self.state.visited]
        self.state.frontier.extend(fresh)
        self.logger.debug("%s: %d links, %d queued", page.url, len(outcome.hrefs), len(fresh))


async def crawl(
    renderer: BaseRenderer,
    request: CrawlRequest,
    settings: Optional[CrawlerSettings] = None,
) -> List[PageResult]:
    """Run one crawl with an already started *renderer*."""
    return await FrontierCrawler(renderer, request, settings).crawl()
