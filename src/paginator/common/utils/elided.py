"""Сокращённый пейджер: края, окно вокруг текущей страницы и пропуски между ними."""
from typing import Any

from paginator.domain.entities.options import ElidedPagerOptions


def elided_page_numbers(current: int, total: int, inner_window: int, outer_window: int) -> list[int | None]:
    """
    Номера страниц для сокращённого пейджера

    :param current: текущая страница (зажимается в [1, total])
    :param total: всего страниц (не меньше 1)
    :param inner_window: страниц по обе стороны от текущей (отрицательное = 0)
    :param outer_window: страниц у каждого края (отрицательное = 0)
    :return: возрастающий список номеров, None на месте пропуска

    Пропуск ставится только между двумя показанными номерами,
    если между ними есть хотя бы одна скрытая страница.
    """
    total = max(1, total)
    current = max(1, min(current, total))
    inner = max(0, inner_window)
    outer = max(0, outer_window)

    kept: set[int] = set()
    kept.update(range(1, min(outer, total) + 1))
    kept.update(range(max(1, current - inner), min(total, current + inner) + 1))
    kept.update(range(max(1, total - outer + 1), total + 1))

    result: list[int | None] = []
    last: int | None = None
    for num in sorted(kept):
        if last is not None and num - last > 1:
            result.append(None)
        result.append(num)
        last = num
    return result


def elided_pager(current: int, total: int, options: ElidedPagerOptions) -> list[Any]:
    """
    Сокращённый пейджер с отображением номеров и пропусков

    :param current: текущая страница
    :param total: всего страниц
    :param options: окна и функции отображения
    :return: список токенов: page_number_view(n) для номеров и gap_view для пропусков
    """
    return [
        options.gap_view if num is None else options.page_number_view(num)
        for num in elided_page_numbers(current, total, options.inner_window, options.outer_window)
    ]
