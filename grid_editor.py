# ~/Apps/rowedit/grid_editor.py
import logging

from grid import Grid
from pagination import compute_window
from table_row import RenderedRow

logger = logging.getLogger(__name__)


class GridEditor:
    """Owns one Grid and writes it back to storage after every mutation.

    There is no dirty tracking: each mutation attempt, rejected or not, is
    followed by a full rewrite of the backing file. A failed write is raised
    to the caller; the in-memory grid keeps the mutation unless
    ``rollback_on_save_failure`` is set.
    """

    def __init__(self, handler, grid: Grid | None = None, rollback_on_save_failure: bool = False):
        self.handler = handler
        self.rollback_on_save_failure = rollback_on_save_failure
        self.grid = grid if grid is not None else handler.load()

    @property
    def path(self) -> str:
        return self.handler.path

    @property
    def row_count(self) -> int:
        return self.grid.row_count

    @property
    def col_count(self) -> int:
        return self.grid.col_count

    def reload(self) -> None:
        self.grid = self.handler.load()
        logger.debug("Reloaded %s (%r)", self.path, self.grid)

    # ---------- display ----------
    def display(self) -> list[RenderedRow]:
        return self._render(0, self.grid.row_count)

    def display_page(self, page_size: int, page: int) -> list[RenderedRow]:
        start_row, end_row = compute_window(self.grid.row_count, page_size, page)
        return self._render(start_row, end_row)

    def _render(self, start_row: int, end_row: int) -> list[RenderedRow]:
        return [
            RenderedRow(start_row + offset + 1, tuple(fields))
            for offset, fields in enumerate(self.grid.slice_rows(start_row, end_row))
        ]

    # ---------- mutation ----------
    def modify(self, row: int, col: int, value: str) -> None:
        self._mutate(f"modify {row},{col}", self.grid.modify_field, row, col, value)

    def delete_row(self, row: int) -> None:
        self._mutate(f"delete row {row}", self.grid.delete_row, row)

    def delete_column(self, col: int) -> None:
        self._mutate(f"delete column {col}", self.grid.delete_column, col)

    def _mutate(self, label: str, operation, *args) -> None:
        snapshot = self.grid.copy() if self.rollback_on_save_failure else None
        try:
            operation(*args)
            logger.info("%s applied to %s", label, self.path)
        finally:
            self._persist(snapshot)

    def _persist(self, snapshot: Grid | None) -> None:
        try:
            self.handler.save(self.grid.rows)
        except Exception:
            if snapshot is not None:
                self.grid = snapshot
                logger.warning("Rolled back in-memory grid after failed save of %s", self.path)
            raise
