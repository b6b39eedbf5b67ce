# Руководство к файлу
# Назначение: CLI: разбор флагов, запуск оркестратора, отчёт в stdout, запись графа GraphViz.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: код выхода 1 при ошибке аргументов, ошибке записи файла или найденной битой ссылке.

from __future__ import annotations

import argparse
import asyncio
import signal
import sys
import time
from pathlib import Path
from typing import List, NoReturn, Optional

from linkcrawler.core.config import VERSION, CrawlConfig
from linkcrawler.core.logging import configure_logging, level_for_verbosity
from linkcrawler.graph.exporters import Exporter
from linkcrawler.orchestrator.crawler import CrawlerOrchestrator
from linkcrawler.orchestrator.session import CrawlSession
from linkcrawler.report.summary import exit_code, summary_lines


class ArgumentParser(argparse.ArgumentParser):
    """argparse с кодом выхода 1 вместо 2 при ошибке аргументов."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    d = CrawlConfig(seed_url="")
    p = ArgumentParser(prog="linkcrawler", description="Обход сайта от seed-URL, граф ссылок и поиск битых ссылок")
    p.add_argument("seed_url", metavar="url", help="Seed-URL; обходятся только ссылки с этим префиксом")
    p.add_argument("-v", dest="verbose", action="count", default=0, help="Подробный вывод (повторяемый)")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    p.add_argument("-c", "--max-con", type=int, default=d.max_con, help=f"Макс. одновременных соединений (по умолчанию {d.max_con})")
    p.add_argument("-t", "--max-total", type=int, default=d.max_total, help=f"Макс. запросов всего (по умолчанию {d.max_total})")
    p.add_argument("-r", "--max-requests", type=int, default=d.max_requests, help=f"Макс. запросов в полёте (по умолчанию {d.max_requests})")
    p.add_argument("-m", "--max-link-per-page", type=int, default=d.max_link_per_page, help=f"Макс. ссылок со страницы (по умолчанию {d.max_link_per_page})")
    p.add_argument("-o", "--output", type=Path, default=Path(d.output), help="Файл графа в формате GraphViz")
    p.add_argument("--no-follow-relative", dest="follow_relative_links", action="store_false", help="Не разрешать относительные ссылки")
    p.add_argument("--graph-json", type=Path, default=None, help="Дополнительно сохранить граф в JSON")
    p.add_argument("--log-json", action=argparse.BooleanOptionalAction, default=False, help="JSON-логирование")
    p.add_argument("--log-file", type=Path, default=None, help="Файл для логов (по умолчанию STDERR)")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(ns: argparse.Namespace) -> CrawlConfig:
    return CrawlConfig(
        seed_url=ns.seed_url,
        max_con=ns.max_con,
        max_total=ns.max_total,
        max_requests=ns.max_requests,
        max_link_per_page=ns.max_link_per_page,
        follow_relative_links=ns.follow_relative_links,
        verbose=ns.verbose,
        output=str(ns.output),
        graph_json=str(ns.graph_json) if ns.graph_json else None,
    )


async def crawl(cfg: CrawlConfig) -> CrawlSession:
    orch = CrawlerOrchestrator(cfg)
    loop = asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, orch.session.interrupt)
    try:
        return await orch.run()
    finally:
        loop.remove_signal_handler(signal.SIGINT)


def report(cfg: CrawlConfig, session: CrawlSession, started: float) -> int:
    print()
    for line in summary_lines(session):
        print(line)
    if cfg.verbose > 1:
        print()
        print(Exporter.format_adjacency(session.graph))
        print()

    try:
        Exporter.write_graphviz(cfg.output, session.graph)
    except OSError:
        print(f"Failed to write graphviz output to {cfg.output}", file=sys.stderr)
        return 1
    print(f"Wrote GraphViz output to {cfg.output}")

    if cfg.graph_json:
        try:
            Exporter.write_graph_json(cfg.graph_json, session.graph)
        except OSError:
            print(f"Failed to write graph json to {cfg.graph_json}", file=sys.stderr)
            return 1
        print(f"Wrote graph JSON to {cfg.graph_json}")

    print(f"Took {time.monotonic() - started:.3f}s")
    return exit_code(session)


def main(argv: Optional[List[str]] = None) -> int:
    started = time.monotonic()
    ns = parse_args(argv)
    configure_logging(
        level=level_for_verbosity(ns.verbose),
        to_file=str(ns.log_file) if ns.log_file else None,
        json=ns.log_json,
    )
    cfg = config_from_args(ns)
    print(f"Starting crawler at {cfg.seed_url} . . .", flush=True)
    session = asyncio.run(crawl(cfg))
    return report(cfg, session, started)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
