# Руководство к файлу
# Назначение: извлечение ссылок из HTML (a[href]) в порядке документа, быстрый парсер Selectolax.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

from typing import List, Union

from selectolax.parser import HTMLParser


class LinkExtractor:
    """Извлечение href из тегов <a>."""

    @staticmethod
    def extract_hrefs(html: Union[str, bytes]) -> List[str]:
        """Все значения href в порядке документа.

        Парсер толерантен к битой разметке и не ходит в сеть.
        Пустой href сохраняется: после разрешения он указывает на саму страницу.
        """
        tree = HTMLParser(html)
        hrefs: List[str] = []
        for node in tree.css("a[href]"):
            href = node.attributes.get("href")
            if href is not None:
                hrefs.append(href.strip())
        return hrefs
