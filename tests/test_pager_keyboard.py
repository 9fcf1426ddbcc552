import pytest

pytest.importorskip("aiogram")

from paginator.application.widgets.pager_keyboard import PagerKeyboard  # noqa: E402
from paginator.domain.entities.pager import Pager  # noqa: E402
from paginator.domain.entities.pagination import ListPagination  # noqa: E402


def texts(markup):
    return [[button.text for button in row] for row in markup.inline_keyboard]


def callbacks(markup):
    return [[button.callback_data for button in row] for row in markup.inline_keyboard]


def test_keyboard_layout():
    widget = PagerKeyboard(inner_window=1, outer_window=1)
    markup = widget.build_keyboard(Pager.create(1, 10).go_to(5))
    assert texts(markup) == [
        ["1", "…", "4", "· 5 ·", "6", "…", "10"],
        ["⬅️", "➡️"],
    ]
    assert callbacks(markup)[0] == [
        "pg:page:1", "pg:noop", "pg:page:4", "pg:page:5", "pg:page:6", "pg:noop", "pg:page:10",
    ]


def test_arrows_hidden_at_edges():
    widget = PagerKeyboard(prefix="items", inner_window=1, outer_window=0)
    first = ListPagination.from_list(2, range(6))
    assert texts(widget.build_keyboard(first)) == [["· 1 ·", "2"], ["➡️"]]
    assert texts(widget.build_keyboard(first.last())) == [["2", "· 3 ·"], ["⬅️"]]


def test_without_arrows():
    widget = PagerKeyboard(inner_window=1, outer_window=0, show_arrows=False)
    markup = widget.build_keyboard(Pager.create(2, 6).next())
    assert texts(markup) == [["1", "· 2 ·", "3"]]


def test_single_page_renders_empty_keyboard():
    widget = PagerKeyboard()
    assert widget.build_keyboard(Pager.create(10, 3)).inline_keyboard == []


def test_handle_callback_navigation():
    widget = PagerKeyboard(inner_window=1, outer_window=1)
    pager = Pager.create(1, 10)

    moved, action = widget.handle_callback("pg:next", pager)
    assert action == "update"
    assert moved.current_page == 2

    moved, action = widget.handle_callback("pg:page:7", moved)
    assert action == "update"
    assert moved.current_page == 7

    moved, action = widget.handle_callback("pg:prev", moved)
    assert action == "update"
    assert moved.current_page == 6


def test_handle_callback_noop():
    widget = PagerKeyboard()
    pager = Pager.create(1, 3)
    assert widget.handle_callback("other:next", pager) == (pager, "noop")
    assert widget.handle_callback("pg:noop", pager) == (pager, "noop")
    assert widget.handle_callback("pg:prev", pager) == (pager, "noop")
    assert widget.handle_callback("pg:page:abc", pager) == (pager, "noop")
    assert widget.handle_callback("pg:page:1", pager) == (pager, "noop")


def test_handle_callback_clamps_page():
    widget = PagerKeyboard()
    moved, action = widget.handle_callback("pg:page:99", Pager.create(1, 3))
    assert action == "update"
    assert moved.current_page == 3


def test_handle_callback_keeps_pagination_type():
    widget = PagerKeyboard(prefix="items")
    pagination = ListPagination.from_list(2, range(6))
    moved, _ = widget.handle_callback("items:next", pagination)
    assert isinstance(moved, ListPagination)
    assert moved.page() == [2, 3]
