# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest

from page_harvester.logger import LOGGER_NAME, configure, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    configure(level="INFO")


def test_child_loggers_share_project_handlers(tmp_path):
    log_file = tmp_path / "logs" / "crawl.log"
    project = configure(level="debug", log_file=log_file)

    get_logger("fetcher").debug("Dropped https://a.com after 3 attempts")
    for handler in project.handlers:
        handler.flush()

    assert project.level == logging.DEBUG
    assert get_logger("fetcher").name == f"{LOGGER_NAME}.fetcher"
    assert get_logger() is project
    assert any(isinstance(h, RotatingFileHandler) for h in project.handlers)
    assert "Dropped https://a.com after 3 attempts" in log_file.read_text(encoding="utf-8")


def test_reconfigure_replaces_handlers(tmp_path):
    first = configure(log_file=tmp_path / "a.log")
    file_handler = next(h for h in first.handlers if isinstance(h, RotatingFileHandler))

    second = configure()

    assert len(second.handlers) == 1
    assert file_handler.stream is None


def test_noisy_loggers_follow_threshold():
    configure(level="ERROR")
    assert logging.getLogger("aiohttp.access").level == logging.ERROR
    configure(level="DEBUG")
    assert logging.getLogger("aiohttp.access").level == logging.WARNING


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        configure(level="LOUD")
