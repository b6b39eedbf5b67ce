# Руководство к файлу
# Назначение: общие типы/DTO (состояние запроса, результат загрузки, битая ссылка).
# Этап: базовая реализация DTO. Обновляйте комментарий при изменениях.

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass, field
from typing import Optional


class FetchState(enum.Enum):
    """Жизненный цикл запроса: QUEUED -> IN_FLIGHT -> терминальное -> RETIRED."""

    QUEUED = "queued"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    TRANSPORT_FAILED = "transport_failed"
    RETIRED = "retired"


@dataclass
class FetchResult:
    """Результат загрузки URL.

    status == 0 и заполненный error означают сбой транспорта
    (DNS, соединение, таймаут, превышение редиректов).
    """

    url: str
    final_url: Optional[str]
    status: int
    content_type: Optional[str]
    body: bytes = b""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(eq=False)
class FetchRequest:
    """Запрос в планировщике. Идентичность — целевой URL."""

    url: str
    state: FetchState = FetchState.QUEUED
    task: Optional[asyncio.Task] = field(default=None, repr=False)
    result: Optional[FetchResult] = None
    terminal_state: Optional[FetchState] = None

    @property
    def effective_url(self) -> str:
        if self.result is not None and self.result.final_url:
            return self.result.final_url
        return self.url


@dataclass(frozen=True)
class BrokenLink:
    """Битая ссылка: HTTP-статус != 200."""

    status: int
    url: str
