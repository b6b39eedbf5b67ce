# Руководство к файлу
# Назначение: разбор заголовка Content-Type и проверка, что ответ — HTML-страница.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from typing import Optional

HTML_MIME = "text/html"


def content_mime(header: Optional[str]) -> Optional[str]:
    """MIME-тип без параметров: "text/html; charset=UTF-8" -> "text/html"."""
    if not header:
        return None
    return header.partition(";")[0].strip().lower() or None


def is_html(content_type: Optional[str]) -> bool:
    return content_mime(content_type) == HTML_MIME
