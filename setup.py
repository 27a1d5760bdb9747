# setup.py
from setuptools import setup, find_packages

setup(
    name="page_harvester",
    version="0.1.0",
    description="Асинхронный BFS-краулер PageHarvester: заголовок и текст страниц сайта",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"page_harvester": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "jinja2>=3.1",
        "playwright>=1.40",
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "page-harvester=page_harvester.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
