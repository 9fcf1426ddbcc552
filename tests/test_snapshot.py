from paginator.common.utils.pagination import paginate, snapshot
from paginator.domain.entities.pagination import ListPagination


def test_paginate_first_page():
    page = paginate(range(1, 26), page=1, page_size=10)
    assert page.items == list(range(1, 11))
    assert page.page == 1
    assert page.total_pages == 3
    assert page.total_items == 25
    assert page.page_size == 10
    assert (page.start_index, page.end_index) == (0, 10)
    assert not page.has_prev
    assert page.has_next


def test_paginate_last_page_end_index_is_clamped():
    page = paginate(range(1, 26), page=3, page_size=10)
    assert page.items == [21, 22, 23, 24, 25]
    assert (page.start_index, page.end_index) == (20, 25)
    assert page.has_prev
    assert not page.has_next


def test_paginate_clamps_page_and_size():
    page = paginate([1, 2, 3], page=99, page_size=0)
    assert page.page_size == 1
    assert page.page == 3
    assert page.items == [3]


def test_paginate_empty():
    page = paginate([], page=1, page_size=10)
    assert page.items == []
    assert page.total_pages == 1
    assert page.total_items == 0
    assert (page.start_index, page.end_index) == (0, 0)
    assert not page.has_prev and not page.has_next


def test_snapshot_of_pagination():
    pagination = ListPagination.from_list(2, "abcde").next()
    page = snapshot(pagination)
    assert page.items == ["c", "d"]
    assert page.page == 2
