# Руководство к файлу
# Назначение: состояние одного запуска (граф, счётчики, битые ссылки, флаг прерывания).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: меняется только обработчиком завершений в одном потоке управления.

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List

from linkcrawler.core.types import BrokenLink
from linkcrawler.graph.store import GraphStore


@dataclass
class CrawlSession:
    """Всё изменяемое состояние обхода."""

    graph: GraphStore = field(default_factory=GraphStore)
    broken_links: List[BrokenLink] = field(default_factory=list)
    # pending — в полёте, complete — завершено (с любым исходом)
    pending: int = 0
    complete: int = 0
    scheduled: int = 0
    transport_failures: int = 0
    stop_event: asyncio.Event = field(default_factory=asyncio.Event)

    def interrupt(self) -> None:
        self.stop_event.set()

    @property
    def interrupted(self) -> bool:
        return self.stop_event.is_set()
