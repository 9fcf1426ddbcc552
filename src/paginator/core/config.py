from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paginator.domain.entities.constants import (
    DEFAULT_INNER_WINDOW,
    DEFAULT_OUTER_WINDOW,
    DEFAULT_PAGE_SIZE,
    MIN_PAGE_SIZE,
)

# Загружаем .env из корня проекта
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)


class PaginationConfig(BaseSettings):
    """Настройки пагинации по умолчанию."""
    PAGE_SIZE: int = DEFAULT_PAGE_SIZE
    INNER_WINDOW: int = DEFAULT_INNER_WINDOW  # страниц по обе стороны от текущей
    OUTER_WINDOW: int = DEFAULT_OUTER_WINDOW  # страниц у каждого края

    model_config = SettingsConfigDict(env_file=str(env_path), env_file_encoding="utf-8", extra="allow")

    @field_validator("PAGE_SIZE")
    @classmethod
    def _clamp_page_size(cls, v: int) -> int:
        return max(MIN_PAGE_SIZE, v)

    @field_validator("INNER_WINDOW", "OUTER_WINDOW")
    @classmethod
    def _clamp_window(cls, v: int) -> int:
        return max(0, v)


@lru_cache
def get_pagination_config() -> PaginationConfig:
    return PaginationConfig()
