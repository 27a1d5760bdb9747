# File: tests/test_cli.py
"""Тесты для CLI (`page_harvester.cli`) с использованием click.testing.CliRunner.
Проверяют команды `crawl`, `config`, `--version`, а также обработку ошибок.
"""
import asyncio
import json

import pytest
from click.testing import CliRunner

import page_harvester.cli as cli_module
from page_harvester.cli import cli
from page_harvester.crawler.link_classifier import LinkMode
from page_harvester.crawler.models import CrawlReport, PageResult
from page_harvester.logger import configure

PAGES = [
    PageResult("https://example.com", "Example", "Hello"),
    PageResult("https://example.com/about", "About", "Про нас"),
]


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Без configs/default.yaml в рабочей директории используются настройки по умолчанию."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    # CliRunner closes its captured stdout; put the project logger back on the real one
    configure(level="INFO")


@pytest.fixture(autouse=True)
def patch_run_crawl(monkeypatch):
    """Патчим run_crawl для возвращения фиктивных страниц без обхода."""
    calls = []

    async def fake_run_crawl(request, settings):
        calls.append((request, settings))
        return CrawlReport(results=list(PAGES), pages_visited=len(PAGES))

    monkeypatch.setattr(cli_module, "run_crawl", fake_run_crawl)
    return calls


def invoke(*args):
    return CliRunner().invoke(cli, ["--log-level", "ERROR", *args])


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "PageHarvester" in result.output


def test_show_config_defaults():
    result = invoke("config")
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["page_limit"] == 250
    assert data["renderer"] == "playwright"


def test_show_config_from_file(tmp_path):
    cfg_file = tmp_path / "settings.yaml"
    cfg_file.write_text("page_limit: 42\nrenderer: http\n", encoding="utf-8")
    result = invoke("--config", str(cfg_file), "config")
    assert result.exit_code == 0
    assert json.loads(result.output)["page_limit"] == 42


def test_bad_config_exits(tmp_path):
    cfg_file = tmp_path / "settings.yaml"
    cfg_file.write_text("page_limit: -1\n", encoding="utf-8")
    result = invoke("--config", str(cfg_file), "config")
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_crawl_stdout(patch_run_crawl):
    result = invoke(
        "crawl", "example.com",
        "--mode", "scope", "--allow", "https://example.com/docs", "--allow", "https://example.com/blog",
        "--deny", "https://example.com/docs/old", "--concurrency", "3", "--limit", "7", "--renderer", "http",
    )
    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert output[0] == {"url": "https://example.com", "title": "Example", "content": "Hello"}

    request, settings = patch_run_crawl[0]
    assert request.seed_url == "example.com"
    assert request.mode is LinkMode.SCOPE
    assert request.allow_list == ("https://example.com/docs", "https://example.com/blog")
    assert request.deny_list == ("https://example.com/docs/old",)
    assert request.concurrency == 3
    assert settings.page_limit == 7
    assert settings.renderer == "http"


def test_crawl_json_file(tmp_path):
    out = tmp_path / "reports" / "pages.json"
    result = invoke("crawl", "example.com", "--json", str(out))
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [page["url"] for page in data] == [page.url for page in PAGES]
    assert data[1]["content"] == "Про нас"


def test_crawl_html_file(tmp_path):
    out = tmp_path / "report.html"
    result = invoke("crawl", "example.com", "--html", str(out))
    assert result.exit_code == 0
    html = out.read_text(encoding="utf-8")
    assert "https://example.com/about" in html
    assert "Pages: 2" in html


def test_crawl_invalid_regex_exits():
    result = invoke("crawl", "example.com", "--mode", "regex", "--allow", "(")
    assert result.exit_code == 1
    assert "Неверный запрос" in result.output


def test_crawl_failure_exits(monkeypatch):
    async def broken(request, settings):
        raise RuntimeError("browser failed to launch")

    monkeypatch.setattr(cli_module, "run_crawl", broken)
    result = invoke("crawl", "example.com")
    assert result.exit_code == 1
    assert "browser failed to launch" in result.output


def test_crawl_timeout(monkeypatch):
    async def slow(request, settings):
        await asyncio.sleep(2)
        return CrawlReport()

    monkeypatch.setattr(cli_module, "run_crawl", slow)
    result = invoke("crawl", "example.com", "--crawl-timeout", "0.2")
    assert result.exit_code != 0
    assert "не завершён" in result.output
