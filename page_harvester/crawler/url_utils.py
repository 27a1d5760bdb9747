# page_harvester/crawler/url_utils.py
"""
URL validation, HTTPS forcing and in-scope checks for discovered links.

All helpers work on plain strings: a link is kept exactly as the page exposed
it, apart from root-relative route resolution and the ``https://`` rewrite.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional

from page_harvester.utils import remove_duplicates

__all__ = (
    "is_valid_url",
    "force_https",
    "validate_url",
    "resolve_route",
    "is_in_scope",
    "scope_links",
)

# scheme-optional, dotted host with a 2+ letter TLD, optional port/path/query/fragment
_URL_RE = re.compile(
    r"(https?://|[a-zA-Z0-9-]+\.)[a-zA-Z0-9-]+(\.[a-zA-Z]{2,})+(:\d+)?(/[^\s]*)?(\?[^\s]*)?(#[^\s]*)?",
    re.IGNORECASE | re.MULTILINE,
)


def is_valid_url(url: str) -> bool:
    """Return True if *url* contains something shaped like a web address."""
    return _URL_RE.search(url) is not None


def force_https(url: str) -> str:
    """Prepend ``https://`` to bare hosts and rewrite ``http://`` to ``https://``."""
    if url.startswith("https://"):
        return url
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return "https://" + url


def validate_url(url: str) -> Optional[str]:
    """Return the HTTPS form of *url*, or None when it does not look like a URL."""
    if not is_valid_url(url):
        return None
    return force_https(url)


def resolve_route(link: str, base_url: str) -> str:
    """Resolve a root-relative link (``/about``) against *base_url* by concatenation."""
    if link.startswith("/"):
        return base_url + link[1:] if base_url.endswith("/") else base_url + link
    return link


def is_in_scope(link: str, base_url: str) -> bool:
    """Check that *link* stays under *base_url* (or is a PDF) and has no fragment."""
    return (
        (link.startswith(base_url) or link.endswith(".pdf"))
        and "#" not in link
        and is_valid_url(link)
    )


def scope_links(hrefs: Iterable[Any], base_url: str) -> List[str]:
    """Turn raw anchor hrefs of the page at *base_url* into unique in-scope links.

    Entries that are not strings (e.g. serialized SVG ``href`` objects) are skipped.
    """
    resolved = (
        force_https(resolve_route(href, base_url)) for href in hrefs if isinstance(href, str)
    )
    return remove_duplicates([link for link in resolved if is_in_scope(link, base_url)])
