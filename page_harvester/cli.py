# === FILE: page_harvester/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска PageHarvester через командную строку.

Команды:
  crawl URL   Обойти сайт начиная с URL и вывести/сохранить страницы
  config      Показать текущую конфигурацию
  serve       Запустить HTTP-сервер с эндпоинтом POST /crawl

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --allow / --deny    Элементы allow/deny-списков (можно повторять)
  --mode MODE         Режим фильтрации ссылок: link, regex, scope, none
  --concurrency INT   Размер пачки одновременных загрузок
  --limit INT         Бюджет страниц (override page_limit)
  --renderer NAME     playwright или http
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC Таймаут всего обхода (секунд)

Пример:
  page-harvester crawl example.com --mode scope --allow https://example.com/docs --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from aiohttp import web

from page_harvester import __version__
from page_harvester.config import (
    DEFAULT_CONFIG_PATH,
    CrawlerSettings,
    CrawlRequest,
    ValidationError,
    load_config,
)
from page_harvester.crawler.link_classifier import LinkMode
from page_harvester.engine import run_crawl
from page_harvester.logger import init_logging
from page_harvester.report.html_report import render_html
from page_harvester.report.json_report import render_json
from page_harvester.server import create_app

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageHarvester, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=_LOG_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PageHarvester CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        if config_path is None and not DEFAULT_CONFIG_PATH.exists():
            cfg = CrawlerSettings()
        else:
            cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--allow', '-a', 'allow_list', multiple=True, help='Элемент allow-списка')
@click.option('--deny', '-d', 'deny_list', multiple=True, help='Элемент deny-списка')
@click.option(
    '--mode', '-m', 'mode',
    default=LinkMode.NONE.value, show_default=True,
    type=click.Choice([m.value for m in LinkMode]),
    help='Режим фильтрации ссылок'
)
@click.option('--concurrency', type=click.IntRange(min=1), default=None, help='Размер пачки')
@click.option('--limit', '-l', type=click.IntRange(min=1), default=None, help='Бюджет страниц')
@click.option(
    '--renderer', type=click.Choice(['playwright', 'http']), default=None,
    help='Рендерер страниц (override renderer)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию встроенный)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, url, allow_list, deny_list, mode, concurrency, limit, renderer,
          json_output, html_output, template_dir, pretty, crawl_timeout):
    """Обойти сайт и сгенерировать отчёты."""
    cfg = ctx.obj['config']
    updates = {}
    if limit is not None:
        updates['page_limit'] = limit
    if renderer is not None:
        updates['renderer'] = renderer
    if updates:
        cfg = cfg.model_copy(update=updates)

    try:
        request = CrawlRequest(
            url=url,
            whiteList=list(allow_list),
            blackList=list(deny_list),
            type=mode,
            concurrency=concurrency,
        )
    except ValidationError as e:
        print_error(f'Неверный запрос: {e}')

    try:
        if crawl_timeout:
            report = asyncio.run(
                asyncio.wait_for(run_crawl(request, cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(run_crawl(request, cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Без файлов отчёта печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(report.body(), ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(report.results, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report.results, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


@cli.command('serve', context_settings=CONTEXT_SETTINGS)
@click.option('--host', default='127.0.0.1', show_default=True, help='Адрес для прослушивания')
@click.option('--port', '-p', default=8080, show_default=True, type=int, help='Порт')
@click.pass_context
def serve(ctx, host, port):
    """Запустить HTTP-сервер: POST /crawl принимает запрос в JSON."""
    web.run_app(create_app(ctx.obj['config']), host=host, port=port)


if __name__ == "__main__":
    cli()
