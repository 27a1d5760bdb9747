# page_harvester/renderer/base.py
"""
Renderer interfaces: a crawl-scoped renderer hands out per-URL page handles.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class RenderError(Exception):
    """Navigation or rendering of a single page failed."""


class PageHandle(ABC):
    """One browser tab (or equivalent) used for a single URL."""

    @abstractmethod
    async def navigate(self, url: str, *, timeout: float) -> None:
        """Load *url*; raise :class:`RenderError` or ``asyncio.TimeoutError`` on failure."""

    @abstractmethod
    async def rendered_html(self) -> str:
        """Return the HTML of the loaded document."""

    @abstractmethod
    async def anchor_hrefs(self) -> List[str]:
        """Return the ``href`` of every ``<a>`` element in the loaded document."""

    @abstractmethod
    async def close(self) -> None:
        """Release the handle."""


class BaseRenderer(ABC):
    """Owns the rendering backend for the duration of one crawl."""

    async def __aenter__(self) -> BaseRenderer:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        await self.close()
        return None

    async def start(self) -> None:
        """Acquire backend resources (browser process, HTTP session)."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def open(self) -> PageHandle:
        """Open a fresh page handle."""
