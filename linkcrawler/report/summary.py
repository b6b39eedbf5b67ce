# Руководство к файлу
# Назначение: итоговый отчёт обхода (строка Summary и список битых ссылок).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

from typing import List

from linkcrawler.orchestrator.session import CrawlSession


def summary_lines(session: CrawlSession) -> List[str]:
    broken = session.broken_links
    if not broken:
        return [f"Summary: checked {session.graph.num_nodes()} links, no broken links found."]
    lines = [f"Summary: {len(broken)}/{session.complete} links are broken."]
    lines.extend(f"  HTTP {b.status}: {b.url}" for b in broken)
    return lines


def exit_code(session: CrawlSession) -> int:
    return 1 if session.broken_links else 0
