import pytest

from errors import PageOverflow, PageUnderflow
from pagination import Paginator, compute_window, page_count


@pytest.mark.parametrize(
    "row_count, page_size, page, expected",
    [
        (10, 3, 1, (0, 3)),
        (10, 3, 2, (3, 6)),
        (10, 3, 4, (9, 10)),
        (9, 3, 3, (6, 9)),
        (1, 1, 1, (0, 1)),
        (5, 1, 5, (4, 5)),
        (4, 10, 1, (0, 4)),
    ],
)
def test_compute_window(row_count, page_size, page, expected):
    assert compute_window(row_count, page_size, page) == expected


@pytest.mark.parametrize(
    "row_count, page_size, page",
    [
        (10, 3, 5),
        (9, 3, 4),
        (0, 3, 1),
        (5, 1, 6),
    ],
)
def test_compute_window_past_last_page(row_count, page_size, page):
    with pytest.raises(PageOverflow):
        compute_window(row_count, page_size, page)


@pytest.mark.parametrize("row_count", [0, 10])
def test_page_zero_is_underflow(row_count):
    with pytest.raises(PageUnderflow):
        compute_window(row_count, 3, 0)


def test_invalid_page_size():
    with pytest.raises(ValueError):
        compute_window(10, 0, 1)


@pytest.mark.parametrize(
    "row_count, page_size, expected",
    [(0, 3, 0), (1, 3, 1), (9, 3, 3), (10, 3, 4)],
)
def test_page_count(row_count, page_size, expected):
    assert page_count(row_count, page_size) == expected


def test_paginator_walks_forward_and_back():
    pager = Paginator(3)
    assert pager.window(10) == (0, 3)
    assert pager.next_page(10) == (3, 6)
    assert pager.next_page(10) == (6, 9)
    assert pager.next_page(10) == (9, 10)
    assert pager.page == 4
    assert pager.prev_page(10) == (6, 9)
    assert pager.page == 3


def test_paginator_stays_put_past_the_end():
    pager = Paginator(3, page=4)
    with pytest.raises(PageOverflow):
        pager.next_page(10)
    assert pager.page == 4
    assert pager.window(10) == (9, 10)


def test_paginator_stays_put_before_the_start():
    pager = Paginator(3)
    with pytest.raises(PageUnderflow):
        pager.prev_page(10)
    assert pager.page == 1
