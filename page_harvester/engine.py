# File: page_harvester/engine.py
"""page_harvester.engine: оркестрация обхода и контракт «запрос → ответ» (status + body)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from page_harvester.config import CrawlerSettings, CrawlRequest
from page_harvester.crawler.crawler import FrontierCrawler
from page_harvester.crawler.models import CrawlReport
from page_harvester.logger import logger
from page_harvester.renderer import BaseRenderer, create_renderer

__all__ = ["CrawlResponse", "run_crawl", "handle_request", "handle_request_async"]

RendererFactory = Callable[[CrawlerSettings], BaseRenderer]


@dataclass(frozen=True, slots=True)
class CrawlResponse:
    """Ответ обработчика: HTTP-подобный код статуса и тело."""

    status_code: int
    body: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}


async def run_crawl(
    request: CrawlRequest,
    settings: Optional[CrawlerSettings] = None,
    renderer_factory: RendererFactory = create_renderer,
) -> CrawlReport:
    """Запускает рендерер на время одного обхода и возвращает CrawlReport."""
    settings = settings or CrawlerSettings()
    async with renderer_factory(settings) as renderer:
        crawler = FrontierCrawler(renderer, request, settings)
        await crawler.crawl()
    return crawler.report()


async def handle_request_async(
    event: Union[Mapping[str, Any], CrawlRequest],
    settings: Optional[CrawlerSettings] = None,
    renderer_factory: RendererFactory = create_renderer,
) -> CrawlResponse:
    """
    Обрабатывает запрос (``url``, ``whiteList``, ``blackList``, ``type``, ``concurrency``).

    200 и список страниц при успехе; 500 и описание ошибки, если исключение
    вышло за пределы обхода. Ошибки отдельных страниц сюда не попадают.
    """
    try:
        request = event if isinstance(event, CrawlRequest) else CrawlRequest.model_validate(event)
        report = await run_crawl(request, settings, renderer_factory)
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        return CrawlResponse(500, {"error": type(exc).__name__, "message": str(exc)})
    return CrawlResponse(200, report.body())


def handle_request(
    event: Union[Mapping[str, Any], CrawlRequest],
    settings: Optional[CrawlerSettings] = None,
    renderer_factory: RendererFactory = create_renderer,
) -> CrawlResponse:
    """Синхронная обёртка над :func:`handle_request_async`."""
    return asyncio.run(handle_request_async(event, settings, renderer_factory))
