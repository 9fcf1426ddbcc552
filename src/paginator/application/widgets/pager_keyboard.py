"""
Виджет пейджера для навигации по страницам в Telegram.
"""
from typing import Literal, TypeVar

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from paginator.core.config import get_pagination_config
from paginator.domain.entities.constants import DEFAULT_PREFIX, GAP_LABEL
from paginator.domain.entities.options import ElidedPagerOptions
from paginator.domain.entities.pagination import PageCursor

C = TypeVar("C", bound=PageCursor)


class PagerKeyboard:
    """
    Виджет для перехода между страницами через inline-клавиатуру Telegram

    Показывает сокращённый ряд номеров страниц (края, окно вокруг текущей,
    пропуски между ними) и стрелки назад/вперёд.
    """

    def __init__(
        self,
        *,
        prefix: str = DEFAULT_PREFIX,
        inner_window: int | None = None,
        outer_window: int | None = None,
        show_arrows: bool = True,
    ):
        """
        Инициализация виджета пейджера

        :param prefix: префикс для callback_data (для избежания конфликтов)
        :param inner_window: страниц по обе стороны от текущей (по умолчанию из конфигурации)
        :param outer_window: страниц у каждого края (по умолчанию из конфигурации)
        :param show_arrows: показывать ли стрелки "Назад"/"Вперёд"
        """
        config = get_pagination_config()
        self.prefix = prefix
        self.show_arrows = show_arrows
        self.options = ElidedPagerOptions(
            inner_window=config.INNER_WINDOW if inner_window is None else inner_window,
            outer_window=config.OUTER_WINDOW if outer_window is None else outer_window,
            gap_view=None,
        )

    def build_keyboard(self, cursor: PageCursor) -> InlineKeyboardMarkup:
        """
        Построение клавиатуры пейджера

        :param cursor: текущая позиция пагинации
        :return: inline-клавиатура с номерами страниц и стрелками

        Структура клавиатуры:
        [1] […] [4] [· 5 ·] [6] […] [10]
        [⬅️] [➡️]
        Для единственной страницы клавиатура пустая.
        """
        if cursor.total_pages <= 1:
            return InlineKeyboardMarkup(inline_keyboard=[])

        kb = InlineKeyboardBuilder()

        # Номера страниц
        numbers = [
            self._gap_button() if num is None else self._page_button(num, num == cursor.current_page)
            for num in cursor.elided_pager(self.options)
        ]
        kb.row(*numbers)

        # Стрелки
        if self.show_arrows:
            arrows = []
            if not cursor.is_first:
                arrows.append(InlineKeyboardButton(text="⬅️", callback_data=f"{self.prefix}:prev"))
            if not cursor.is_last:
                arrows.append(InlineKeyboardButton(text="➡️", callback_data=f"{self.prefix}:next"))
            kb.row(*arrows)

        return kb.as_markup()

    def handle_callback(self, callback_data: str, cursor: C) -> tuple[C, Literal["update", "noop"]]:
        """
        Обработка callback от кнопок пейджера

        :param callback_data: данные callback от Telegram
        :param cursor: текущая позиция пагинации
        :return: кортеж (новая_позиция, действие)

        Возможные действия:
        - "update": страница изменилась, клавиатуру нужно перерисовать
        - "noop": callback не относится к виджету или страница не изменилась
        """
        if not callback_data.startswith(f"{self.prefix}:"):
            return cursor, "noop"

        action = callback_data.split(":", 1)[1]

        if action == "prev":
            moved = cursor.prev()
        elif action == "next":
            moved = cursor.next()
        elif action.startswith("page:"):
            try:
                target = int(action.split(":", 1)[1])
            except ValueError:
                return cursor, "noop"
            moved = cursor.go_to(target)
        else:
            return cursor, "noop"

        if moved.current_page == cursor.current_page:
            return cursor, "noop"
        return moved, "update"

    def _page_button(self, num: int, is_current: bool) -> InlineKeyboardButton:
        text = f"· {num} ·" if is_current else str(num)
        return InlineKeyboardButton(text=text, callback_data=f"{self.prefix}:page:{num}")

    def _gap_button(self) -> InlineKeyboardButton:
        return InlineKeyboardButton(text=GAP_LABEL, callback_data=f"{self.prefix}:noop")
