from typing import Any


class PaginationError(Exception):
    """Базовая ошибка пагинации."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidRangeError(PaginationError, ValueError):
    """Нижняя граница счётчика больше верхней."""

    def __init__(self, lower_bound: int, upper_bound: int):
        super().__init__(
            f"Некорректный диапазон: [{lower_bound}, {upper_bound}]",
            details={"lower_bound": lower_bound, "upper_bound": upper_bound},
        )
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
