# Руководство к файлу
# Назначение: контроль допуска новых загрузок (лимиты max_requests и max_total).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.


class Admission:
    """Пропускает новую загрузку, пока pending < max_requests и complete + pending < max_total."""

    def __init__(self, max_requests: int, max_total: int) -> None:
        self.max_requests = max_requests
        self.max_total = max_total

    def admits(self, pending: int, complete: int) -> bool:
        return pending < self.max_requests and (complete + pending) < self.max_total
