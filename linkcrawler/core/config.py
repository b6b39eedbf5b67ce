# Руководство к файлу
# Назначение: параметры запуска краулера (seed, лимиты соединений/запросов, сетевые настройки, вывод).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from dataclasses import dataclass
from typing import Optional


VERSION = "0.0.1"


@dataclass
class CrawlConfig:
    """Конфигурация обхода и поиска битых ссылок."""

    # Входные данные
    seed_url: str

    # Лимиты
    max_con: int = 200
    max_total: int = 20000
    max_requests: int = 500
    max_link_per_page: int = 20
    per_host_connections: int = 6

    # Обход ссылок
    follow_relative_links: bool = True
    min_link_length: int = 20
    min_html_bytes: int = 100

    # Сетевые настройки
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/88.0.4292.0 Safari/537.36"
    )
    connect_timeout_ms: int = 2000
    request_timeout_ms: int = 5000
    max_redirects: int = 3

    # Цикл опроса
    poll_budget_ms: int = 1000

    # Вывод
    verbose: int = 0
    output: str = "out.gv"
    graph_json: Optional[str] = None
