# File: tests/test_utils.py
import pytest

from page_harvester.utils import remove_duplicates, sanitize_text


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("  Hello\n\nworld  ", "Hello world"),
        ("a\tb \r\n c", "a b c"),
        ("\n\n", ""),
        ("already clean", "already clean"),
        ("non\xa0breaking\u2003space", "non breaking space"),
    ],
)
def test_sanitize_text(raw, expected):
    assert sanitize_text(raw) == expected


@pytest.mark.parametrize("raw", ["  x \n y ", "", "one", "\t\tmany   spaces\n\nhere "])
def test_sanitize_text_is_idempotent(raw):
    once = sanitize_text(raw)
    assert sanitize_text(once) == once


def test_remove_duplicates_keeps_order():
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
