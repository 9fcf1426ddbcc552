"""Снимок текущей страницы для слоя отображения."""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar

from paginator.domain.entities.pagination import ListPagination, Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Результат пагинации."""

    items: list[T]
    page: int
    total_pages: int
    total_items: int
    page_size: int
    start_index: int
    end_index: int

    @property
    def has_prev(self) -> bool:
        """Есть ли предыдущая страница."""
        return self.page > 1

    @property
    def has_next(self) -> bool:
        """Есть ли следующая страница."""
        return self.page < self.total_pages


def snapshot(pagination: Pagination[Any]) -> Page[Any]:
    """
    Снимок текущей страницы

    :param pagination: пагинация
    :return: Page: элементы страницы и счётчики для отображения
    """
    total = pagination.total_items
    start, stop = pagination.page_bounds()
    items = pagination.page()
    return Page(
        items=list(items),
        page=pagination.current_page,
        total_pages=pagination.total_pages,
        total_items=total,
        page_size=pagination.items_per_page,
        start_index=min(start, total),
        end_index=min(stop, total),
    )


def paginate(items: Iterable[T], page: int, page_size: int | None = None) -> Page[T]:
    """
    Разбить список на страницы.

    :param items: Список элементов для пагинации
    :param page: Номер страницы (начиная с 1), вне диапазона зажимается
    :param page_size: Размер страницы (по умолчанию PAGE_SIZE из конфигурации), меньше 1 зажимается до 1

    :return: Page: Объект с результатами пагинации
    """
    return snapshot(ListPagination.from_list(page_size, items).go_to(page))
