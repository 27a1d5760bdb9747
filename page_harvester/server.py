# page_harvester/server.py
"""
aiohttp front-end for the crawl handler.

``POST /crawl`` takes the request object as JSON and answers with the handler's
status code and body; ``GET /health`` is a liveness check.
"""
from __future__ import annotations

import json
from typing import Optional

from aiohttp import web

from page_harvester.config import CrawlerSettings
from page_harvester.engine import RendererFactory, handle_request_async
from page_harvester.logger import get_logger
from page_harvester.renderer import create_renderer

SETTINGS_KEY = web.AppKey("settings", CrawlerSettings)
FACTORY_KEY = web.AppKey("renderer_factory", object)

log = get_logger("server")


async def crawl_handler(request: web.Request) -> web.Response:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return web.json_response({"error": type(exc).__name__, "message": str(exc)}, status=400)
    if not isinstance(payload, dict):
        return web.json_response(
            {"error": "TypeError", "message": "request body must be a JSON object"}, status=400
        )

    log.info("Crawl request for %s", payload.get("url"))
    response = await handle_request_async(
        payload, request.app[SETTINGS_KEY], request.app[FACTORY_KEY]
    )
    return web.json_response(response.body, status=response.status_code)


async def health_handler(_: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


def create_app(
    settings: Optional[CrawlerSettings] = None,
    renderer_factory: RendererFactory = create_renderer,
) -> web.Application:
    app = web.Application()
    app[SETTINGS_KEY] = settings or CrawlerSettings()
    app[FACTORY_KEY] = renderer_factory
    app.router.add_post("/crawl", crawl_handler)
    app.router.add_get("/health", health_handler)
    return app
