# === FILE: page_harvester/parser/html_parser.py ===
"""HTML-to-text extraction for PageHarvester.

:func:`extract_text` turns rendered markup into two raw strings:

* title: text of every ``<title>`` element, concatenated (``""`` if absent).
* body_text: visible text of ``<body>`` with ``<script>``, ``<style>`` and
  ``<head>`` removed.

Whitespace is *not* normalised here; the fetcher runs both strings through
:func:`page_harvester.utils.sanitize_text`.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup

__all__: Sequence[str] = ("ExtractedText", "extract_text")

_UNWANTED_TAGS = ("script", "style", "head")


@dataclass(frozen=True, slots=True)
class ExtractedText:
    """Raw title and body text of a page."""

    title: str
    body_text: str


def extract_text(html: str) -> ExtractedText:
    soup = BeautifulSoup(html, "html.parser")

    title = "".join(tag.get_text() for tag in soup.find_all("title"))

    for element in soup(list(_UNWANTED_TAGS)):
        element.decompose()
    # markup without <body> is treated as a bare fragment
    root = soup.body if soup.body is not None else soup
    body_text = root.get_text(" ")

    return ExtractedText(title=title, body_text=body_text)
