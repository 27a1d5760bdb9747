# File: page_harvester/utils.py
"""page_harvester.utils: Утилитарные функции для очистки текста и работы со списками URL."""

from __future__ import annotations

import re
from typing import Collection, List, Sequence

from page_harvester.logger import logger

__all__: Sequence[str] = (
    "sanitize_text",
    "remove_duplicates",
)

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text(text: str) -> str:
    """Заменяет переводы строк пробелами, схлопывает пробельные серии и обрезает края."""
    return _WHITESPACE_RE.sub(" ", text.replace("\n", " ")).strip()


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
