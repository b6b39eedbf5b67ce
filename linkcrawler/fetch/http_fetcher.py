# Руководство к файлу
# Назначение: HTTP-загрузчик на aiohttp.ClientSession (общий пул соединений, редиректы, cookies на запуск).
# Этап: базовая реализация на aiohttp. Обновляйте комментарий при изменениях.
# Важно: лимиты max_con и соединений на хост держит TCPConnector сессии.

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from linkcrawler.core.types import FetchResult


class HttpFetcher:
    """HTTP-загрузчик на базе aiohttp.ClientSession.

    fetch() не бросает исключений: любой сбой транспорта (DNS, соединение,
    таймаут, слишком много редиректов) возвращается как FetchResult с error.
    """

    def __init__(
        self,
        user_agent: str,
        *,
        max_con: int = 200,
        per_host_connections: int = 6,
        connect_timeout_ms: int = 2000,
        request_timeout_ms: int = 5000,
        max_redirects: int = 3,
    ) -> None:
        self._user_agent = user_agent
        self._max_con = max_con
        self._per_host = per_host_connections
        self._connect_timeout_sec = connect_timeout_ms / 1000.0
        self._timeout_sec = request_timeout_ms / 1000.0
        self._max_redirects = max_redirects
        self._session: Optional[aiohttp.ClientSession] = None
        self._log = logging.getLogger(__name__)

    async def start(self) -> None:
        if self._session is not None:
            return
        timeout = aiohttp.ClientTimeout(total=self._timeout_sec, sock_connect=self._connect_timeout_sec)
        connector = aiohttp.TCPConnector(limit=self._max_con, limit_per_host=self._per_host)
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        # новый CookieJar на каждый запуск: cookies живут только в пределах обхода
        self._session = aiohttp.ClientSession(
            timeout=timeout,
            headers=headers,
            connector=connector,
            cookie_jar=aiohttp.CookieJar(),
            raise_for_status=False,
            auto_decompress=True,
        )

    async def stop(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str) -> FetchResult:
        assert self._session is not None, "HttpFetcher.start() must be called first"
        try:
            async with self._session.get(
                url,
                allow_redirects=True,
                max_redirects=self._max_redirects,
            ) as resp:
                body = await resp.read()
                return FetchResult(
                    url=url,
                    final_url=str(resp.url),
                    status=resp.status,
                    content_type=resp.headers.get("Content-Type"),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self._log.warning("http-fetch-failed url=%s err=%r", url, e)
            return FetchResult(url=url, final_url=None, status=0, content_type=None, error=repr(e))
