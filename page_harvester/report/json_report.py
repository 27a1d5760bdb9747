# page_harvester/report/json_report.py

"""
Генерация JSON-отчёта для проекта PageHarvester.

Сериализация списка PageResult в файл.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from page_harvester.crawler.models import PageResult


def render_json(results: Iterable[PageResult], output_path: Path | str) -> Path:
    """
    Сохраняет результаты обхода в формате JSON по указанному пути.

    :param results: страницы, полученные краулером
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from page_harvester.report.json_report import render_json
    report_path = render_json(pages, 'reports/pages.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [page.to_dict() for page in results]

    with output.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
