# Руководство к файлу
# Назначение: граф ссылок в памяти (dict[src] -> dict[dst]) и единственный источник правды "уже видели".
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: рёбра — множество пар (src, dst); взаимные/повторные ссылки не различаются.

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple


class GraphStore:
    """Хранилище ориентированного графа ссылок.

    Узлы хранятся в порядке вставки. Для смежности используется dict без
    значений, чтобы сохранить порядок рёбер и O(1) проверку принадлежности.
    """

    def __init__(self) -> None:
        self._adj: Dict[str, Dict[str, None]] = {}

    def has(self, url: str) -> bool:
        return url in self._adj

    def add_node(self, url: str) -> None:
        self._adj.setdefault(url, {})

    def add_edge(self, src: str, dst: str) -> None:
        """Добавляет ребро src -> dst, недостающие узлы создаются неявно."""
        self._adj.setdefault(src, {})[dst] = None
        self._adj.setdefault(dst, {})

    def has_edge(self, src: str, dst: str) -> bool:
        return dst in self._adj.get(src, ())

    def nodes(self) -> List[str]:
        return list(self._adj)

    def num_nodes(self) -> int:
        return len(self._adj)

    def edges(self) -> List[Tuple[str, str]]:
        return [(src, dst) for src, dsts in self._adj.items() for dst in dsts]

    def edges_count(self) -> int:
        return sum(len(v) for v in self._adj.values())

    def successors(self, url: str) -> List[str]:
        return list(self._adj.get(url, ()))

    def adjacency(self) -> Iterator[Tuple[str, List[str]]]:
        for src, dsts in self._adj.items():
            yield src, list(dsts)
