# File: page_harvester/crawler/__init__.py
"""page_harvester.crawler: планировщик обхода, загрузка страниц и фильтрация ссылок."""
