"""Константы пагинации."""

# Размер страницы
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1

# Первая страница (нумерация с единицы)
FIRST_PAGE = 1

# Окна сокращённого пейджера
DEFAULT_INNER_WINDOW = 2  # Соседние с текущей страницы
DEFAULT_OUTER_WINDOW = 1  # Страницы у краёв

# Префикс callback_data для клавиатуры пейджера
DEFAULT_PREFIX = "pg"
GAP_LABEL = "…"
