# === FILE: page_harvester/config.py ===
"""
Модуль для загрузки и валидации конфигурации PageHarvester.
Используется Pydantic для описания схемы и проверки данных:

* :class:`CrawlerSettings` – параметры процесса (лимит страниц, ретраи, рендерер);
* :class:`CrawlRequest` – запрос на один обход (seed URL, allow/deny, режим).
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from page_harvester.crawler.link_classifier import LinkMode
from page_harvester.logger import logger

PAGE_LIMIT = 250
DEFAULT_CONCURRENCY = 5


class CrawlerSettings(BaseModel):
    """Настройки краулера, общие для всех запросов процесса."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    page_limit: int = Field(PAGE_LIMIT, ge=1, description="Бюджет успешно обработанных страниц.")
    max_attempts: int = Field(3, ge=1, description="Всего попыток загрузки одной страницы.")
    navigation_timeout: float = Field(100.0, gt=0, description="Таймаут одной навигации (секунд).")
    retry_delay: float = Field(0.0, ge=0, description="Пауза между попытками (секунд).")
    default_concurrency: int = Field(DEFAULT_CONCURRENCY, ge=1, description="Размер пачки по умолчанию.")
    strict_page_limit: bool = Field(
        False, description="Ограничивать пачку остатком бюджета (без перебора лимита)."
    )
    renderer: Literal["playwright", "http"] = Field("playwright", description="Рендерер страниц.")
    headless: bool = Field(True, description="Запускать браузер без окна.")
    ignore_https_errors: bool = Field(True, description="Игнорировать ошибки TLS-сертификатов.")
    user_agent: str = Field("PageHarvester/1.0", min_length=1, description="Заголовок User-Agent.")


class CrawlRequest(BaseModel):
    """Запрос на обход: принимает как «проводные» имена полей, так и питоновские."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    seed_url: str = Field(..., min_length=1, validation_alias=AliasChoices("url", "seed_url"))
    allow_list: tuple[str, ...] = Field(
        default=(), validation_alias=AliasChoices("whiteList", "allow_list")
    )
    deny_list: tuple[str, ...] = Field(
        default=(), validation_alias=AliasChoices("blackList", "deny_list")
    )
    mode: LinkMode = Field(LinkMode.NONE, validation_alias=AliasChoices("type", "mode"))
    concurrency: Optional[int] = Field(None, ge=1, description="Размер пачки; None: из настроек.")

    @field_validator("allow_list", "deny_list", mode="before")
    def _none_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("concurrency", mode="before")
    def _zero_to_default(cls, v: Any) -> Any:
        # 0 means "not set", as with a missing value
        return None if v == 0 and not isinstance(v, bool) else v

    @field_validator("mode", mode="before")
    def _coerce_mode(cls, v: Any) -> Any:
        if v is None or v == "":
            return LinkMode.NONE
        if isinstance(v, str) and v not in LinkMode._value2member_map_:
            logger.warning("Unknown classification type %r, links are not filtered", v)
            return LinkMode.NONE
        return v

    @model_validator(mode="after")
    def _check_patterns(self) -> CrawlRequest:
        if self.mode is LinkMode.REGEX:
            for pattern in (*self.allow_list, *self.deny_list):
                try:
                    re.compile(pattern)
                except re.error as exc:
                    raise ValueError(f"Неверное регулярное выражение {pattern!r}: {exc}") from exc
        return self


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerSettings:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerSettings.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(DEFAULT_CONFIG_PATH))
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerSettings(**data)


__all__ = [
    "PAGE_LIMIT",
    "DEFAULT_CONCURRENCY",
    "CrawlerSettings",
    "CrawlRequest",
    "ValidationError",
    "load_config",
    "DEFAULT_CONFIG_PATH",
]
