# Руководство к файлу
# Назначение: настройка логирования проекта (уровень, формат, вывод в файл/STDOUT).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional


class JsonFormatter(logging.Formatter):
    """Простой JSON-форматтер без внешних зависимостей."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z")
        msg = record.getMessage().replace("\n", " ")
        msg = msg.replace("\\", "\\\\").replace('"', '\\"')
        return f'{{"ts":"{ts}","level":"{record.levelname}","logger":"{record.name}","msg":"{msg}"}}'


def level_for_verbosity(verbose: int) -> str:
    """-v -> INFO, -vv и больше -> DEBUG, без флага только предупреждения."""
    if verbose <= 0:
        return "WARNING"
    if verbose == 1:
        return "INFO"
    return "DEBUG"


def configure_logging(level: str = "INFO", *, to_file: Optional[str] = None, json: bool = False) -> None:
    if to_file:
        h: logging.Handler = logging.FileHandler(to_file, encoding="utf-8")
    else:
        # логи идут в stderr, чтобы не смешиваться с отчётом в stdout
        h = logging.StreamHandler(sys.stderr)
    if json:
        fmt: logging.Formatter = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    h.setFormatter(fmt)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(h)

    # снизим шум от внешних библиотек
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
