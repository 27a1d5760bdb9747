# File: tests/conftest.py
import pytest

from fakes import FakeSite, html_page
from page_harvester.config import CrawlerSettings


@pytest.fixture()
def settings() -> CrawlerSettings:
    """Fast settings for tests: small timeout, no retry pause."""
    return CrawlerSettings(navigation_timeout=0.5, renderer="http")


@pytest.fixture()
def small_site() -> FakeSite:
    return FakeSite(
        pages={
            "https://a.com": (html_page("Home", "<p>Welcome</p>"), ["/about", "/blog", "https://b.com/x"]),
            "https://a.com/about": (html_page("About", "<p>About us</p>"), []),
            "https://a.com/blog": (html_page("", "<p>Posts</p>"), ["https://a.com/blog/1#top"]),
        }
    )
