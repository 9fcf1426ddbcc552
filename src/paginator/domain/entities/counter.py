from dataclasses import dataclass, replace

from paginator.common.logs import get_logger
from paginator.domain.entities.errors import InvalidRangeError

logger = get_logger(__name__)


@dataclass(frozen=True)
class BoundedCounter:
    """
    Целочисленный счётчик, зажатый в диапазон [lower_bound, upper_bound]

    Неизменяемый: каждая операция возвращает новый счётчик.
    """

    value: int
    lower_bound: int
    upper_bound: int

    def __post_init__(self):
        if self.lower_bound > self.upper_bound:
            logger.warning(f"Некорректный диапазон счётчика: [{self.lower_bound}, {self.upper_bound}]")
            raise InvalidRangeError(self.lower_bound, self.upper_bound)
        # значение вне диапазона зажимается к ближайшей границе
        object.__setattr__(self, "value", _clamp(self.value, self.lower_bound, self.upper_bound))

    @classmethod
    def between(cls, lower_bound: int, upper_bound: int, value: int | None = None) -> "BoundedCounter":
        """
        Создать счётчик в диапазоне

        :param lower_bound: нижняя граница
        :param upper_bound: верхняя граница (не меньше нижней)
        :param value: начальное значение (по умолчанию нижняя граница), зажимается в диапазон
        :return: новый счётчик
        :raises InvalidRangeError: если lower_bound > upper_bound
        """
        start = lower_bound if value is None else value
        return cls(value=start, lower_bound=lower_bound, upper_bound=upper_bound)

    @property
    def max_bound(self) -> int:
        return self.upper_bound

    def set(self, new_value: int) -> "BoundedCounter":
        return replace(self, value=new_value)

    def increment(self, step: int = 1) -> "BoundedCounter":
        return self.set(self.value + step)

    def decrement(self, step: int = 1) -> "BoundedCounter":
        return self.set(self.value - step)


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))
