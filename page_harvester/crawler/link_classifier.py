# page_harvester/crawler/link_classifier.py
"""
Allow/deny policies deciding which in-scope links join the frontier.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Pattern, Sequence


class LinkMode(str, Enum):
    """Link classification policy."""

    LINK = "link"
    REGEX = "regex"
    SCOPE = "scope"
    NONE = "none"


class LinkClassifier:
    """Filters links against allow/deny lists according to a :class:`LinkMode`.

    * ``link``  – exact matches; an empty allow list allows everything.
    * ``regex`` – ``re.search`` against each pattern; an empty allow list allows everything.
    * ``scope`` – string prefixes; an empty allow list allows nothing.
    * ``none``  – no filtering.

    Order of the input links is preserved.
    """

    def __init__(
        self,
        mode: LinkMode = LinkMode.NONE,
        allow_list: Sequence[str] = (),
        deny_list: Sequence[str] = (),
    ) -> None:
        self.mode = LinkMode(mode)
        self.allow_list: tuple[str, ...] = tuple(allow_list)
        self.deny_list: tuple[str, ...] = tuple(deny_list)
        self._allow_re: List[Pattern[str]] = []
        self._deny_re: List[Pattern[str]] = []
        if self.mode is LinkMode.REGEX:
            self._allow_re = [re.compile(p) for p in self.allow_list]
            self._deny_re = [re.compile(p) for p in self.deny_list]

    @classmethod
    def from_request(cls, request) -> LinkClassifier:
        return cls(request.mode, request.allow_list, request.deny_list)

    def accepts(self, link: str) -> bool:
        if self.mode is LinkMode.LINK:
            return (not self.allow_list or link in self.allow_list) and link not in self.deny_list
        if self.mode is LinkMode.REGEX:
            allowed = not self._allow_re or any(rx.search(link) for rx in self._allow_re)
            return allowed and not any(rx.search(link) for rx in self._deny_re)
        if self.mode is LinkMode.SCOPE:
            return any(link.startswith(s) for s in self.allow_list) and not any(
                link.startswith(s) for s in self.deny_list
            )
        return True

    def classify(self, links: Iterable[str]) -> List[str]:
        """Return the accepted subset of *links* in discovery order."""
        return [link for link in links if self.accepts(link)]
