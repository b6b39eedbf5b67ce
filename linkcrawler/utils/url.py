# Руководство к файлу
# Назначение: каноникализация URL (разрешение относительных ссылок, удаление фрагмента), фильтры схем.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: URL с завершающим "/" и без него считаются разными узлами.

from __future__ import annotations

from typing import Optional
from urllib.parse import urldefrag, urljoin

ALLOWED_SCHEMES = ("http://", "https://")


def remove_fragment(url: str) -> str:
    return urldefrag(url).url


def canonicalize(href: str, base: Optional[str] = None) -> str:
    """Разрешает href относительно base (если задан) и отбрасывает #фрагмент.

    Регистр хоста, порт по умолчанию и завершающий слэш не трогаются:
    идентичность узла графа — буквальная строка.
    """
    url = href.strip()
    if base:
        url = urljoin(base, url)
    return remove_fragment(url)


def is_http_url(url: str) -> bool:
    return url.startswith(ALLOWED_SCHEMES)


def has_prefix(url: str, prefix: str) -> bool:
    """Политика same-origin-prefix: url начинается с буквальной строки prefix."""
    return url.startswith(prefix)
