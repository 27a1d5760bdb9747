# File: tests/test_fetcher.py
from __future__ import annotations

import pytest

from fakes import FakeRenderer
from page_harvester.config import CrawlerSettings
from page_harvester.crawler.fetcher import PageFetcher
from page_harvester.crawler.models import Dropped, Fetched


@pytest.mark.asyncio()
async def test_fetch_builds_sanitized_result(settings, small_site):
    renderer = FakeRenderer(small_site)
    outcome = await PageFetcher(renderer, settings).fetch("a.com")

    assert isinstance(outcome, Fetched)
    assert outcome.result.url == "https://a.com"
    assert outcome.result.title == "Home"
    assert outcome.result.content == "Welcome"
    assert outcome.hrefs == ["/about", "/blog", "https://b.com/x"]
    assert renderer.navigations == ["https://a.com"]
    assert renderer.closed_pages == 1


@pytest.mark.asyncio()
async def test_empty_title_falls_back_to_url(settings, small_site):
    outcome = await PageFetcher(FakeRenderer(small_site), settings).fetch("https://a.com/blog")
    assert outcome.result.title == "https://a.com/blog"
    assert outcome.result.content == "Posts"


@pytest.mark.asyncio()
async def test_recovers_after_two_failures(settings, small_site):
    small_site.failures["https://a.com/about"] = 2
    renderer = FakeRenderer(small_site)
    outcome = await PageFetcher(renderer, settings).fetch("https://a.com/about")

    assert isinstance(outcome, Fetched)
    assert renderer.navigations.count("https://a.com/about") == 3
    # one page handle for all attempts, closed once
    assert len(renderer.opened_pages) == 1
    assert renderer.closed_pages == 1


@pytest.mark.asyncio()
async def test_dropped_after_three_failures(settings, small_site):
    small_site.failures["https://a.com/about"] = -1
    renderer = FakeRenderer(small_site)
    outcome = await PageFetcher(renderer, settings).fetch("https://a.com/about")

    assert isinstance(outcome, Dropped)
    assert outcome.attempts == 3
    assert renderer.navigations.count("https://a.com/about") == 3
    assert renderer.closed_pages == 1


@pytest.mark.asyncio()
async def test_hung_navigation_is_bounded_by_timeout(small_site):
    small_site.hangs.append("https://a.com/about")
    renderer = FakeRenderer(small_site)
    settings = CrawlerSettings(navigation_timeout=0.05, max_attempts=2)
    outcome = await PageFetcher(renderer, settings).fetch("https://a.com/about")

    assert isinstance(outcome, Dropped)
    assert outcome.attempts == 2
    assert outcome.reason == "TimeoutError"
    assert renderer.opened_pages[0].closed


@pytest.mark.asyncio()
async def test_invalid_url_is_dropped_without_rendering(settings):
    renderer = FakeRenderer()
    outcome = await PageFetcher(renderer, settings).fetch("not a url")

    assert outcome == Dropped("not a url", "invalid url")
    assert renderer.opened_pages == []


@pytest.mark.asyncio()
async def test_pdf_is_recorded_but_not_rendered(settings):
    renderer = FakeRenderer()
    outcome = await PageFetcher(renderer, settings).fetch("http://cdn.a.com/guide.pdf")

    assert isinstance(outcome, Fetched)
    assert outcome.result.url == "https://cdn.a.com/guide.pdf"
    assert outcome.result.title == "https://cdn.a.com/guide.pdf"
    assert outcome.result.content == ""
    assert outcome.hrefs == []
    assert renderer.opened_pages == []


@pytest.mark.asyncio()
async def test_custom_attempt_count(small_site):
    small_site.failures["https://a.com"] = -1
    renderer = FakeRenderer(small_site)
    settings = CrawlerSettings(max_attempts=5, navigation_timeout=0.5)
    outcome = await PageFetcher(renderer, settings).fetch("https://a.com")
    assert outcome.attempts == 5
    assert len(renderer.navigations) == 5

