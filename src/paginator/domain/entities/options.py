from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from paginator.core.config import PaginationConfig, get_pagination_config
from paginator.domain.entities.constants import DEFAULT_INNER_WINDOW, DEFAULT_OUTER_WINDOW


def _identity(page_number: int) -> Any:
    return page_number


class ElidedPagerOptions(BaseModel):
    """Настройки сокращённого пейджера."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    inner_window: int = Field(default=DEFAULT_INNER_WINDOW, description="Страниц по обе стороны от текущей")
    outer_window: int = Field(default=DEFAULT_OUTER_WINDOW, description="Страниц у каждого края")
    page_number_view: Callable[[int], Any] = Field(default=_identity, description="Отображение номера страницы")
    gap_view: Any = Field(default=None, description="Отображение пропуска")

    @field_validator("inner_window", "outer_window")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        return max(0, v)

    @classmethod
    def from_config(cls, config: PaginationConfig | None = None, **overrides: Any) -> "ElidedPagerOptions":
        """
        Собрать настройки из конфигурации

        :param config: конфигурация пагинации (по умолчанию из окружения)
        :param overrides: явные значения полей, перекрывающие конфигурацию
        :return: настройки пейджера
        """
        config = config or get_pagination_config()
        values: dict[str, Any] = {
            "inner_window": config.INNER_WINDOW,
            "outer_window": config.OUTER_WINDOW,
        }
        values.update(overrides)
        return cls(**values)
