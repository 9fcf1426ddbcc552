from dataclasses import dataclass
from typing import Sequence, TypeVar

from paginator.common.logs import get_logger
from paginator.domain.entities.constants import FIRST_PAGE
from paginator.domain.entities.pagination import PageCursor, count_pages, page_counter, resolve_page_size

logger = get_logger(__name__)

E = TypeVar("E")


@dataclass(frozen=True)
class Pager(PageCursor):
    """
    Пейджер без коллекции: только размер страницы и число элементов

    Коллекция передаётся в page() при каждом вызове. При изменении размера
    коллекции вызывающий код сам вызывает update().
    """

    total_items: int

    @classmethod
    def create(cls, items_per_page: int | None, total_items: int, current_page: int = FIRST_PAGE) -> "Pager":
        """
        Создать пейджер

        :param items_per_page: размер страницы (None = PAGE_SIZE из конфигурации, меньше 1 зажимается до 1)
        :param total_items: число элементов (отрицательное считается нулём)
        :param current_page: начальная страница (зажимается)
        :return: новый пейджер
        """
        if total_items < 0:
            logger.debug(f"Отрицательное число элементов {total_items}, считаем 0")
        total_items = max(0, total_items)
        size = resolve_page_size(items_per_page)
        return cls(
            items_per_page=size,
            counter=page_counter(count_pages(total_items, size), current_page),
            total_items=total_items,
        )

    def update(self, items_per_page: int | None, total_items: int) -> "Pager":
        """
        Пересчитать пейджер под новый размер страницы и коллекции

        :param items_per_page: новый размер страницы
        :param total_items: новое число элементов
        :return: новый пейджер; текущая страница сохраняется, насколько возможно
        """
        return self.create(items_per_page, total_items, current_page=self.current_page)

    def page(self, items: Sequence[E]) -> list[E]:
        """
        Срез текущей страницы переданной коллекции

        :param items: коллекция, по которой построен пейджер
        :return: элементы текущей страницы, не больше items_per_page
        """
        start, stop = self.page_bounds()
        return list(items[start:stop])
