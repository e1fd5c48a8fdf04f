from errors import PageOverflow, PageUnderflow


def compute_window(row_count: int, page_size: int, page: int) -> tuple[int, int]:
    """Map a 1-based page onto the half-open 0-based row range ``[start, end)``.

    Raises PageUnderflow for page 0 and PageOverflow when the page starts at or
    past the last row, which includes every page of an empty grid.
    """
    if page_size < 1:
        raise ValueError(f"page size must be >= 1, got {page_size}")
    if page < 0 or row_count < 0:
        raise ValueError("page and row count must not be negative")
    if page == 0:
        raise PageUnderflow()

    start_row = (page - 1) * page_size
    if start_row >= row_count:
        raise PageOverflow()
    end_row = min(start_row + page_size, row_count)
    return start_row, end_row


def page_count(row_count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page size must be >= 1, got {page_size}")
    if row_count <= 0:
        return 0
    return (row_count - 1) // page_size + 1


class Paginator:
    """Page cursor for the interactive next/back prompt."""

    def __init__(self, page_size: int, page: int = 1):
        if page_size < 1:
            raise ValueError(f"page size must be >= 1, got {page_size}")
        self.page_size = page_size
        self.page = page

    def window(self, row_count: int) -> tuple[int, int]:
        return compute_window(row_count, self.page_size, self.page)

    def page_total(self, row_count: int) -> int:
        return page_count(row_count, self.page_size)

    def next_page(self, row_count: int) -> tuple[int, int]:
        return self._move(row_count, 1)

    def prev_page(self, row_count: int) -> tuple[int, int]:
        return self._move(row_count, -1)

    def _move(self, row_count: int, delta: int) -> tuple[int, int]:
        previous = self.page
        self.page = max(0, previous + delta)
        try:
            return self.window(row_count)
        except Exception:
            # stay on the last page that rendered
            self.page = previous
            raise
