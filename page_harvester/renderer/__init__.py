# File: page_harvester/renderer/__init__.py
"""page_harvester.renderer: рендереры страниц (Playwright и статический HTTP)."""

from __future__ import annotations

from page_harvester.config import CrawlerSettings

from .base import BaseRenderer, PageHandle, RenderError
from .http_renderer import HttpRenderer
from .playwright_renderer import PlaywrightRenderer


def create_renderer(settings: CrawlerSettings) -> BaseRenderer:
    """Создаёт рендерер, выбранный в настройках (``renderer: playwright | http``)."""
    if settings.renderer == "http":
        return HttpRenderer(settings)
    return PlaywrightRenderer(settings)


__all__ = [
    "BaseRenderer",
    "PageHandle",
    "RenderError",
    "HttpRenderer",
    "PlaywrightRenderer",
    "create_renderer",
]
