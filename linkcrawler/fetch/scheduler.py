# Руководство к файлу
# Назначение: планировщик загрузок: много одновременных запросов (asyncio.Task на каждый URL)
#   и опрос poll_once(), возвращающий пачку завершившихся запросов.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: запрос покидает планировщик ровно один раз — через retire().

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Dict, List, Protocol

from linkcrawler.core.types import FetchRequest, FetchResult, FetchState

TERMINAL_STATES = (FetchState.SUCCEEDED, FetchState.TRANSPORT_FAILED)


class Fetcher(Protocol):
    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    def fetch(self, url: str) -> Awaitable[FetchResult]: ...


class FetchScheduler:
    """Множество запросов в полёте поверх одного Fetcher.

    Лимиты max_requests/max_total проверяет вызывающий код до schedule();
    лимиты соединений — транспорт.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self._fetcher = fetcher
        self._requests: Dict[asyncio.Task, FetchRequest] = {}
        self._submitted = 0
        self._log = logging.getLogger(__name__)

    @property
    def submitted(self) -> int:
        return self._submitted

    def active(self) -> int:
        """Сколько запросов ещё не выведено из планировщика."""
        return len(self._requests)

    def in_flight(self) -> int:
        return sum(1 for r in self._requests.values() if r.state is FetchState.IN_FLIGHT)

    def schedule(self, url: str) -> FetchRequest:
        req = FetchRequest(url=url)
        req.task = asyncio.create_task(self._fetcher.fetch(url))
        req.state = FetchState.IN_FLIGHT
        self._requests[req.task] = req
        self._submitted += 1
        self._log.debug("schedule url=%s in_flight=%d", url, len(self._requests))
        return req

    async def poll_once(self, budget_ms: int) -> List[FetchRequest]:
        """Ждёт до budget_ms любое завершение и возвращает все запросы, ставшие терминальными за этот вызов."""
        waiting = [t for t, r in self._requests.items() if r.state is FetchState.IN_FLIGHT]
        if not waiting:
            return []
        done, _ = await asyncio.wait(waiting, timeout=budget_ms / 1000.0, return_when=asyncio.FIRST_COMPLETED)
        finished: List[FetchRequest] = []
        # порядок постановки, а не порядок множества done
        for task, req in self._requests.items():
            if task not in done or req.state is not FetchState.IN_FLIGHT:
                continue
            exc = task.exception()
            if exc is not None:
                # исключение из fetch -> TRANSPORT_FAILED
                self._log.warning("fetch-task-failed url=%s err=%r", req.url, exc)
                req.result = FetchResult(url=req.url, final_url=None, status=0, content_type=None, error=repr(exc))
            else:
                req.result = task.result()
            req.state = FetchState.SUCCEEDED if req.result.ok else FetchState.TRANSPORT_FAILED
            finished.append(req)
        return finished

    def retire(self, req: FetchRequest) -> None:
        if req.state not in TERMINAL_STATES:
            raise RuntimeError(f"cannot retire request in state {req.state.value}: {req.url}")
        assert req.task is not None
        del self._requests[req.task]
        req.terminal_state = req.state
        req.state = FetchState.RETIRED
        req.task = None

    async def abandon(self) -> int:
        """Жёсткая остановка: отменяет всё, что ещё в полёте."""
        tasks = list(self._requests)
        for t in tasks:
            t.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._requests.clear()
        return len(tasks)
