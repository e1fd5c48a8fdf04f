# ~/Apps/rowedit/grid.py
import pandas as pd

from errors import EmptyDataset, IndexOutOfRange, MalformedInput


class Grid:
    """Rectangular rows of text fields.

    Every public method that takes a row or column number expects it 1-based,
    the way the user typed it. The conversion to positional (0-based) frame
    access happens in ``_position`` and nowhere else.
    """

    def __init__(self, rows):
        rows = [[str(field) for field in row] for row in rows]
        if not rows:
            raise EmptyDataset("Dataset has no rows")
        width = len(rows[0])
        for line_no, row in enumerate(rows, start=1):
            if len(row) != width:
                raise MalformedInput(
                    f"Line {line_no} has {len(row)} fields, expected {width}"
                )
        self._df = self._build_frame(rows, width)

    @staticmethod
    def _build_frame(rows, width: int) -> pd.DataFrame:
        index = pd.RangeIndex(len(rows))
        if width == 0:
            return pd.DataFrame(index=index, columns=pd.RangeIndex(0), dtype=object)
        return pd.DataFrame(rows, index=index, columns=pd.RangeIndex(width), dtype=object)

    @classmethod
    def _from_frame(cls, df: pd.DataFrame) -> "Grid":
        grid = cls.__new__(cls)
        grid._df = df
        return grid

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return int(self._df.shape[0])

    @property
    def col_count(self) -> int:
        return int(self._df.shape[1])

    def __len__(self):
        return self.row_count

    def __repr__(self):
        return f"Grid(rows={self.row_count}, cols={self.col_count})"

    # ---------- read access ----------
    @property
    def rows(self) -> list[list[str]]:
        return self.slice_rows(0, self.row_count)

    def row(self, row: int) -> list[str]:
        r = self._position("row", row, self.row_count)
        return list(self._df.iloc[r])

    def field(self, row: int, col: int) -> str:
        r = self._position("row", row, self.row_count)
        c = self._position("column", col, self.col_count)
        return self._df.iat[r, c]

    def slice_rows(self, start: int, end: int) -> list[list[str]]:
        """Rows in the 0-based half-open range ``[start, end)``."""
        part = self._df.iloc[start:end]
        if self.col_count == 0:
            # itertuples yields nothing for a frame without columns
            return [[] for _ in range(len(part))]
        return [list(row) for row in part.itertuples(index=False, name=None)]

    def copy(self) -> "Grid":
        return Grid._from_frame(self._df.copy(deep=True))

    # ---------- mutation ----------
    def modify_field(self, row: int, col: int, value: str) -> None:
        r = self._position("row", row, self.row_count)
        c = self._position("column", col, self.col_count)
        self._df.iat[r, c] = "" if value is None else str(value)

    def delete_row(self, row: int) -> None:
        r = self._position("row", row, self.row_count)
        self._df = self._df.drop(index=self._df.index[r]).reset_index(drop=True)

    def delete_column(self, col: int) -> None:
        c = self._position("column", col, self.col_count)
        # one drop across every row keeps all rows the same width
        df = self._df.drop(columns=self._df.columns[c])
        df.columns = pd.RangeIndex(df.shape[1])
        self._df = df

    # ---------- helpers ----------
    @staticmethod
    def _position(axis: str, index: int, limit: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"{axis} index must be an int, got {index!r}")
        if index < 1 or index > limit:
            raise IndexOutOfRange(axis, index, limit)
        return index - 1
