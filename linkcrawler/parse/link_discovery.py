# Руководство к файлу
# Назначение: поиск ссылок-кандидатов на странице: политика префикса seed, разрешение,
#   удаление фрагмента, фильтр длины/схемы, лимит ссылок на страницу.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: модуль не трогает граф и не планирует загрузки — это делает оркестратор.

from __future__ import annotations

import logging
from typing import List, Union

from linkcrawler.parse.link_extractor import LinkExtractor
from linkcrawler.utils.url import canonicalize, has_prefix, is_http_url


class LinkDiscovery:
    """Кандидаты на обход для одной загруженной страницы."""

    def __init__(self, seed_url: str, *, follow_relative_links: bool = True, min_link_length: int = 20) -> None:
        self.seed_url = seed_url
        self.follow_relative_links = follow_relative_links
        self.min_link_length = min_link_length
        self.log = logging.getLogger(__name__)

    def discover(self, base_url: str, body: Union[str, bytes], cap: int) -> List[str]:
        # ссылки собираем только со страниц под префиксом seed
        if not has_prefix(base_url, self.seed_url):
            return []
        if cap <= 0 or not body:
            return []
        try:
            hrefs = LinkExtractor.extract_hrefs(body)
        except (ValueError, TypeError, UnicodeError) as e:
            self.log.debug("parse-failed url=%s err=%r", base_url, e)
            return []

        out: List[str] = []
        for href in hrefs:
            try:
                link = canonicalize(href, base_url if self.follow_relative_links else None)
            except ValueError as e:
                self.log.debug("bad-href url=%s href=%r err=%r", base_url, href, e)
                continue
            if len(link) < self.min_link_length or not is_http_url(link):
                continue
            out.append(link)
            if len(out) >= cap:
                break
        self.log.debug("discovered url=%s hrefs=%d candidates=%d", base_url, len(hrefs), len(out))
        return out
