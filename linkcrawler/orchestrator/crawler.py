# Руководство к файлу
# Назначение: оркестратор: цикл опроса планировщика, обработка завершений, допуск новых загрузок,
#   построение графа и учёт битых ссылок.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: проверка "узел уже в графе" и запись ребра выполняются в одном шаге,
#   поэтому один URL не может быть поставлен в загрузку дважды.

from __future__ import annotations

import logging
from typing import Optional

from linkcrawler.core.config import CrawlConfig
from linkcrawler.core.types import BrokenLink, FetchRequest, FetchState
from linkcrawler.fetch.http_fetcher import HttpFetcher
from linkcrawler.fetch.scheduler import Fetcher, FetchScheduler
from linkcrawler.frontier.admission import Admission
from linkcrawler.orchestrator.session import CrawlSession
from linkcrawler.parse.link_discovery import LinkDiscovery
from linkcrawler.utils.mime import is_html


class CrawlerOrchestrator:
    """Оркестратор обхода и поиска битых ссылок."""

    def __init__(
        self,
        cfg: CrawlConfig,
        *,
        fetcher: Optional[Fetcher] = None,
        session: Optional[CrawlSession] = None,
    ) -> None:
        self.cfg = cfg
        self.log = logging.getLogger(__name__)
        self.session = session or CrawlSession()
        self.fetcher = fetcher or HttpFetcher(
            cfg.user_agent,
            max_con=cfg.max_con,
            per_host_connections=cfg.per_host_connections,
            connect_timeout_ms=cfg.connect_timeout_ms,
            request_timeout_ms=cfg.request_timeout_ms,
            max_redirects=cfg.max_redirects,
        )
        self.scheduler = FetchScheduler(self.fetcher)
        self.discovery = LinkDiscovery(
            cfg.seed_url,
            follow_relative_links=cfg.follow_relative_links,
            min_link_length=cfg.min_link_length,
        )
        self.admission = Admission(cfg.max_requests, cfg.max_total)
        self._scheduled_in_iteration = False

    def _progress(self, line: str) -> None:
        if self.cfg.verbose > 0:
            print(line, flush=True)

    def _schedule(self, url: str) -> None:
        self.scheduler.schedule(url)
        self.session.pending += 1
        self.session.scheduled += 1
        self._scheduled_in_iteration = True

    def _follow_links(self, url: str, body: bytes) -> int:
        s = self.session
        added = 0
        for link in self.discovery.discover(url, body, self.cfg.max_link_per_page):
            if s.graph.has(link):
                s.graph.add_edge(url, link)
                continue
            s.graph.add_edge(url, link)
            if self.admission.admits(s.pending, s.complete):
                self._schedule(link)
                added += 1
            else:
                self.log.debug("admission-denied url=%s pending=%d complete=%d", link, s.pending, s.complete)
        return added

    def handle_completion(self, req: FetchRequest) -> None:
        """Классифицирует завершённый запрос, затем выводит его из планировщика."""
        s = self.session
        res = req.result
        url = req.effective_url
        if req.state is FetchState.TRANSPORT_FAILED or res is None:
            s.transport_failures += 1
            self._progress(f"[{s.complete}] Connection failure: {url}")
        elif res.status != 200:
            s.broken_links.append(BrokenLink(res.status, url))
            self._progress(f"[{s.complete}] HTTP {res.status}: {url}")
        else:
            self._progress(f"[{s.complete}] HTTP 200 ({res.content_type}): {url}")
            if (
                is_html(res.content_type)
                and len(res.body) > self.cfg.min_html_bytes
                and self.admission.admits(s.pending, s.complete)
            ):
                added = self._follow_links(url, res.body)
                self.log.info("followed url=%s new=%d pending=%d", url, added, s.pending)

        self.scheduler.retire(req)
        s.complete += 1
        s.pending -= 1

    async def run(self) -> CrawlSession:
        s = self.session
        await self.fetcher.start()
        try:
            s.graph.add_node(self.cfg.seed_url)
            self._schedule(self.cfg.seed_url)
            while not s.interrupted:
                self._scheduled_in_iteration = False
                for req in await self.scheduler.poll_once(self.cfg.poll_budget_ms):
                    self.handle_completion(req)
                if self.scheduler.active() == 0 and not self._scheduled_in_iteration:
                    break
            if s.interrupted:
                abandoned = await self.scheduler.abandon()
                self.log.warning("stop: interrupted, abandoned in_flight=%d", abandoned)
        finally:
            await self.fetcher.stop()
        self.log.info(
            "done: complete=%d broken=%d transport_failures=%d nodes=%d edges=%d",
            s.complete,
            len(s.broken_links),
            s.transport_failures,
            s.graph.num_nodes(),
            s.graph.edges_count(),
        )
        return s
