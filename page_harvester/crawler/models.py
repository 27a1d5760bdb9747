# page_harvester/crawler/models.py
"""
Data models for the PageHarvester crawler.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Set, Union


@dataclass(frozen=True, slots=True)
class PageResult:
    """Cleaned title and text of one fetched page."""

    url: str
    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"url": self.url, "title": self.title, "content": self.content}


@dataclass(slots=True)
class Fetched:
    """Successful fetch: the page result plus the raw anchor hrefs seen on it."""

    result: PageResult
    hrefs: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Dropped:
    """A URL that produced no result (rejected or out of attempts)."""

    url: str
    reason: str
    attempts: int = 0


FetchOutcome = Union[Fetched, Dropped]


@dataclass(slots=True)
class CrawlState:
    """Mutable state of a single crawl; owned by the scheduler."""

    frontier: Deque[str] = field(default_factory=deque)
    visited: Set[str] = field(default_factory=set)
    results: List[PageResult] = field(default_factory=list)
    dropped: List[Dropped] = field(default_factory=list)
    pages_visited: int = 0

    def claim(self, url: str) -> bool:
        """Mark *url* as visited; False if it was already claimed."""
        if url in self.visited:
            return False
        self.visited.add(url)
        return True


@dataclass(slots=True)
class CrawlReport:
    """Final outcome of a crawl returned by the engine."""

    results: List[PageResult] = field(default_factory=list)
    dropped: List[Dropped] = field(default_factory=list)
    pages_visited: int = 0
    elapsed: float = 0.0

    def body(self) -> List[Dict[str, str]]:
        return [page.to_dict() for page in self.results]
