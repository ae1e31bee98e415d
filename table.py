from typing import Iterator, List, NamedTuple

import pandas as pd

from errors import CellIndexError, TableIOError, ValidationError

PLACEHOLDER = "_"


class Coordinate(NamedTuple):
    row: int
    col: int


class Window(NamedTuple):
    start: Coordinate
    end: Coordinate

    @classmethod
    def ordered(cls, start: Coordinate, end: Coordinate) -> "Window":
        if start.row < end.row or (start.row == end.row and start.col <= end.col):
            return cls(start, end)
        raise ValidationError(
            "Invalid range: ensure that end row/column is greater than or equal to start row/column."
        )


class Table:
    """Grid of text cells with dimensions fixed at load time.

    Cells live in an object-dtype DataFrame addressed positionally. Rows are
    never inserted or removed and cells are only replaced in place, so every
    row keeps the column count of the first row.
    """

    def __init__(self, rows: List[List[str]]):
        width = len(rows[0]) if rows else 0
        for idx, row in enumerate(rows):
            if len(row) != width:
                raise TableIOError(
                    f"Row {idx + 1} has {len(row)} fields, expected {width}"
                )
        self.df = pd.DataFrame(
            [[str(v) for v in row] for row in rows], dtype=object
        )
        self._dimensions = (len(rows), width)

    @classmethod
    def load(cls, source) -> "Table":
        return cls(source.read_rows())

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._dimensions

    @property
    def row_count(self) -> int:
        return self._dimensions[0]

    @property
    def column_count(self) -> int:
        return self._dimensions[1]

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0 or self.column_count == 0

    @property
    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.df.itertuples(index=False, name=None)]

    def _check(self, row: int, col: int):
        rows, cols = self._dimensions
        if not (0 <= row < rows and 0 <= col < cols):
            raise CellIndexError(
                f"Cell ({row + 1}, {col + 1}) is outside the table ({rows}x{cols})"
            )

    def cell(self, coord: Coordinate) -> str:
        self._check(coord.row, coord.col)
        return self.df.iat[coord.row, coord.col]

    def write_cell(self, coord: Coordinate, value: str) -> None:
        self._check(coord.row, coord.col)
        self.df.iat[coord.row, coord.col] = value

    def delete_cell(self, coord: Coordinate, placeholder: str = PLACEHOLDER) -> None:
        self.write_cell(coord, placeholder)

    def read_window(self, window: Window) -> List[List[str]]:
        start, end = window
        # end is inclusive on both axes
        self._check(start.row, start.col)
        self._check(end.row, end.col)

        out = []
        for row in range(start.row, end.row + 1):
            lo = start.col if row == start.row else 0
            hi = end.col + 1 if row == end.row else self.column_count
            out.append(self.df.iloc[row, lo:hi].tolist())
        return out

    def display(self, separator: str = ",") -> Iterator[str]:
        for row in self.df.itertuples(index=False, name=None):
            yield separator.join(row)

    def save(self, sink) -> None:
        sink.write_rows(self.rows)

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return self.dimensions == other.dimensions and self.rows == other.rows

    def __repr__(self):
        rows, cols = self._dimensions
        return f"Table({rows}x{cols})"
