# Руководство к файлу
# Назначение: экспорт графа (GraphViz .gv, опционально graph.json) и текстовая распечатка смежности.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

from pathlib import Path
from typing import List

import orjson

from linkcrawler.graph.store import GraphStore


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


class Exporter:
    """Экспорт графа в файлы. Файл перезаписывается при каждом запуске."""

    @staticmethod
    def to_graphviz(graph: GraphStore) -> str:
        lines: List[str] = ["digraph G {"]
        for node in graph.nodes():
            lines.append(f"  {_quote(node)};")
        for src, dst in graph.edges():
            lines.append(f"  {_quote(src)} -> {_quote(dst)};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def write_graphviz(path: str | Path, graph: GraphStore) -> None:
        # OSError пробрасывается наверх: CLI сообщает о невозможности записи
        Path(path).write_text(Exporter.to_graphviz(graph), encoding="utf-8")

    @staticmethod
    def write_graph_json(path: str | Path, graph: GraphStore) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        payload = {"nodes": graph.nodes(), "edges": graph.edges()}
        p.write_bytes(orjson.dumps(payload))

    @staticmethod
    def format_adjacency(graph: GraphStore) -> str:
        lines = []
        for src, dsts in graph.adjacency():
            lines.append(f"{src} -> {' '.join(dsts)}".rstrip())
        return "\n".join(lines)
