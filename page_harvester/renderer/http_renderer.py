# page_harvester/renderer/http_renderer.py
"""
Static renderer: plain HTTP GET through aiohttp, no JavaScript execution.

Anchors are resolved against the final response URL, the same way a browser
exposes ``a.href``.
"""
from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence
from urllib.parse import urljoin

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector
from bs4 import BeautifulSoup
from bs4.element import Tag

from page_harvester.config import CrawlerSettings
from page_harvester.renderer.base import BaseRenderer, PageHandle, RenderError


class HttpPage(PageHandle):
    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, session: ClientSession) -> None:
        self._session = session
        self._url: Optional[str] = None
        self._html: Optional[str] = None

    async def navigate(self, url: str, *, timeout: float) -> None:
        self._url = self._html = None
        try:
            async with self._session.get(url, timeout=ClientTimeout(total=timeout)) as resp:
                if resp.status in self._RETRY_STATUS:
                    raise RenderError(f"retryable status {resp.status} for {url}")
                html = await resp.text(errors="replace")
                final_url = str(resp.url)
        except (ClientError, asyncio.TimeoutError) as exc:
            raise RenderError(f"request to {url} failed: {exc!r}") from exc
        self._url, self._html = final_url, html

    async def rendered_html(self) -> str:
        if self._html is None:
            raise RenderError("page not loaded")
        return self._html

    async def anchor_hrefs(self) -> List[str]:
        html = await self.rendered_html()
        soup = BeautifulSoup(html, "html.parser")
        hrefs: List[str] = []
        for tag in soup.find_all("a", href=True):
            if not isinstance(tag, Tag):
                continue
            href_val = tag.get("href")
            if isinstance(href_val, str):
                hrefs.append(urljoin(self._url or "", href_val.strip()))
        return hrefs

    async def close(self) -> None:
        self._url = self._html = None


class HttpRenderer(BaseRenderer):
    """One aiohttp session per crawl, shared by all page handles."""

    def __init__(self, settings: CrawlerSettings) -> None:
        self.settings = settings
        self.session: Optional[ClientSession] = None

    async def start(self) -> None:
        connector = TCPConnector(ssl=False) if self.settings.ignore_https_errors else None
        self.session = ClientSession(
            connector=connector,
            headers={"User-Agent": self.settings.user_agent},
            raise_for_status=False,
        )

    async def open(self) -> PageHandle:
        if self.session is None:
            raise RuntimeError("Session not initialized")
        return HttpPage(self.session)

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None
