# Руководство к файлу (TESTS/conftest.py)
# Назначение:
# - Общие фикстуры для pytest-тестов linkcrawler.
# - Поддельный загрузчик (без сети) и построители HTML-страниц для unit-тестов.

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Optional

import pytest

from linkcrawler.core.config import CrawlConfig
from linkcrawler.core.types import FetchResult

SEED = "http://example.test/"


def html_page(url: str, links: Iterable[str], *, status: int = 200, final_url: Optional[str] = None) -> FetchResult:
    """HTML-ответ со ссылками; тело заведомо длиннее порога в 100 байт."""

    anchors = "".join(f'<a href="{href}">link</a>\n' for href in links)
    body = f"<html><head><title>t</title></head><body><p>{'filler ' * 20}</p>\n{anchors}</body></html>"
    return FetchResult(
        url=url,
        final_url=final_url or url,
        status=status,
        content_type="text/html; charset=utf-8",
        body=body.encode("utf-8"),
    )


def status_page(url: str, status: int) -> FetchResult:
    return FetchResult(url=url, final_url=url, status=status, content_type="text/html", body=b"<html>err</html>")


def transport_failure(url: str) -> FetchResult:
    return FetchResult(url=url, final_url=None, status=0, content_type=None, error="ClientConnectorError()")


class FakeFetcher:
    """Загрузчик без сети: отдаёт заранее заданные ответы, неизвестные URL -> 404."""

    def __init__(self, pages: Dict[str, FetchResult], *, hang: Iterable[str] = ()) -> None:
        self.pages = pages
        self.hang = set(hang)
        self.calls: List[str] = []
        self.started = False
        self.stopped = False
        self._never = asyncio.Event()

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        if url in self.hang:
            await self._never.wait()
        await asyncio.sleep(0)
        return self.pages.get(url) or status_page(url, 404)


@pytest.fixture
def make_config():
    def _make(**overrides) -> CrawlConfig:
        overrides.setdefault("seed_url", SEED)
        overrides.setdefault("poll_budget_ms", 50)
        return CrawlConfig(**overrides)

    return _make
