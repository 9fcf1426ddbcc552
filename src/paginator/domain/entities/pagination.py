from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from paginator.common.logs import get_logger
from paginator.common.utils.elided import elided_pager
from paginator.core.config import get_pagination_config
from paginator.domain.entities.constants import FIRST_PAGE, MIN_PAGE_SIZE
from paginator.domain.entities.counter import BoundedCounter
from paginator.domain.entities.options import ElidedPagerOptions

logger = get_logger(__name__)

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")
C = TypeVar("C", bound="PageCursor")


def clamp_page_size(items_per_page: int) -> int:
    if items_per_page < MIN_PAGE_SIZE:
        logger.debug(f"Размер страницы {items_per_page} зажат до {MIN_PAGE_SIZE}")
    return max(MIN_PAGE_SIZE, items_per_page)


def resolve_page_size(items_per_page: int | None) -> int:
    """Размер страницы: явный или PAGE_SIZE из конфигурации, не меньше 1."""
    if items_per_page is None:
        items_per_page = get_pagination_config().PAGE_SIZE
    return clamp_page_size(items_per_page)


def count_pages(total_items: int, items_per_page: int) -> int:
    """
    Количество страниц для коллекции

    :param total_items: число элементов
    :param items_per_page: размер страницы (зажимается до 1)
    :return: ceil(total_items / items_per_page), но не меньше 1
    """
    size = max(MIN_PAGE_SIZE, items_per_page)
    return max(1, (max(0, total_items) + size - 1) // size)


def page_counter(total_pages: int, current: int = FIRST_PAGE) -> BoundedCounter:
    return BoundedCounter.between(FIRST_PAGE, total_pages, current)


@dataclass(frozen=True)
class PageCursor:
    """
    Позиция в постраничном списке: размер страницы и текущая страница

    Общая навигация для всех вариантов пагинации. Все операции возвращают новый объект.
    """

    items_per_page: int
    counter: BoundedCounter

    @property
    def current_page(self) -> int:
        return self.counter.value

    @property
    def total_pages(self) -> int:
        return self.counter.max_bound

    @property
    def is_first(self) -> bool:
        return self.current_page == FIRST_PAGE

    @property
    def is_last(self) -> bool:
        return self.current_page == self.total_pages

    def go_to(self: C, page: int) -> C:
        """
        Перейти на страницу

        :param page: номер страницы; вне диапазона зажимается в [1, total_pages]
        :return: новый объект с обновлённой текущей страницей
        """
        if not FIRST_PAGE <= page <= self.total_pages:
            logger.debug(f"Страница {page} вне диапазона [1, {self.total_pages}], зажимаем")
        return replace(self, counter=self.counter.set(page))

    def next(self: C) -> C:
        return replace(self, counter=self.counter.increment())

    def prev(self: C) -> C:
        return replace(self, counter=self.counter.decrement())

    def first(self: C) -> C:
        return self.go_to(FIRST_PAGE)

    def last(self: C) -> C:
        return self.go_to(self.total_pages)

    def page_bounds(self) -> tuple[int, int]:
        """
        Границы текущей страницы

        :return: (start, stop), где start = (current_page - 1) * items_per_page
        """
        start = (self.current_page - 1) * self.items_per_page
        return start, start + self.items_per_page

    def pager(self, f: Callable[[int, bool], R]) -> list[R]:
        """
        Пейджер по всем страницам

        :param f: функция (номер страницы, текущая ли) -> элемент пейджера
        :return: список длиной ровно total_pages, по возрастанию номеров
        """
        return [f(num, num == self.current_page) for num in range(FIRST_PAGE, self.total_pages + 1)]

    def elided_pager(self, options: ElidedPagerOptions | None = None) -> list[Any]:
        """
        Сокращённый пейджер с пропусками

        :param options: окна и отображение (по умолчанию из конфигурации)
        :return: номера страниц и токены пропусков, не длиннее total_pages
        """
        return elided_pager(self.current_page, self.total_pages, options or ElidedPagerOptions.from_config())


@dataclass(frozen=True)
class CollectionOps(Generic[T]):
    """Длина и срез для произвольной коллекции."""

    length: Callable[[T], int]
    slice: Callable[[int, int, T], T]


@dataclass(frozen=True)
class Pagination(PageCursor, Generic[T]):
    """
    Постраничное представление коллекции

    Владеет коллекцией; изменения элементов идут только через transform.
    Сравнение структурное: ops в сравнении не участвует.
    """

    items: T
    ops: CollectionOps[T] = field(compare=False, repr=False)

    @classmethod
    def create(cls, ops: CollectionOps[T], items_per_page: int | None, items: T, current_page: int = FIRST_PAGE):
        """
        Создать пагинацию

        :param ops: длина и срез коллекции
        :param items_per_page: размер страницы (None = PAGE_SIZE из конфигурации, меньше 1 зажимается до 1)
        :param items: коллекция
        :param current_page: начальная страница (зажимается)
        :return: пагинация на первой странице (или на current_page)
        """
        size = resolve_page_size(items_per_page)
        total_pages = count_pages(ops.length(items), size)
        return cls(
            items_per_page=size,
            counter=page_counter(total_pages, current_page),
            items=items,
            ops=ops,
        )

    @property
    def total_items(self) -> int:
        return self.ops.length(self.items)

    def _rebuild(self, items_per_page: int, items: T):
        return self.create(self.ops, items_per_page, items, current_page=self.current_page)

    def transform(self, f: Callable[[T], T]):
        """
        Изменить элементы с пересчётом страниц

        :param f: функция над коллекцией (фильтрация, сортировка, вставка, удаление)
        :return: новая пагинация; текущая страница сохраняется, насколько возможно
        """
        return self._rebuild(self.items_per_page, f(self.items))

    def change_items_per_page(self, items_per_page: int):
        return self._rebuild(items_per_page, self.items)

    def fold_map(self, f: Callable[[T], R]) -> R:
        return f(self.items)

    def page(self) -> T:
        start, stop = self.page_bounds()
        return self.ops.slice(start, stop, self.items)


def _seq_slice(start: int, stop: int, items: Sequence[E]) -> Sequence[E]:
    # drop/take: выход за границы даёт короткий или пустой срез
    return items[max(0, start):max(0, stop)]


LIST_OPS: CollectionOps[Sequence[Any]] = CollectionOps(length=len, slice=_seq_slice)


@dataclass(frozen=True)
class ListPagination(Pagination[tuple[E, ...]]):
    """Пагинация списка: длина и срез берутся из последовательности."""

    @classmethod
    def from_list(cls, items_per_page: int | None, items: Iterable[E]) -> "ListPagination[E]":
        return cls.create(LIST_OPS, items_per_page, tuple(items))

    def transform(self, f: Callable[[list[E]], Iterable[E]]) -> "ListPagination[E]":
        return super().transform(lambda xs: tuple(f(list(xs))))

    def page(self) -> list[E]:
        return list(super().page())

    def to_list(self) -> list[E]:
        return list(self.items)

    def all_items(self) -> list[E]:
        return self.to_list()

    def query(self, f: Callable[[list[E]], R]) -> R:
        return self.fold_map(lambda xs: f(list(xs)))
