# File: page_harvester/parser/__init__.py
"""page_harvester.parser: извлечение заголовка и видимого текста из HTML."""

from .html_parser import ExtractedText, extract_text

__all__ = ["ExtractedText", "extract_text"]
