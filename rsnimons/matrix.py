"""Integer matrix and the hospital floor plan of rooms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from rsnimons.containers import Queue

MAX_ROWS = 100
MAX_COLS = 100


class Matrix:
    """Zero-filled integer grid of fixed capacity.

    ``rows`` and ``cols`` track the used extent: one past the largest row and
    column ever written.
    """

    def __init__(self, max_rows: int, max_cols: int) -> None:
        self.max_rows = max_rows
        self.max_cols = max_cols
        self.rows = 0
        self.cols = 0
        self._cells = [[0] * max_cols for _ in range(max_rows)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.max_rows and 0 <= col < self.max_cols):
            raise IndexError(f"cell ({row}, {col}) out of range")

    def set(self, row: int, col: int, value: int) -> None:
        """Store ``value`` at (row, col), growing the used extent."""
        self._check(row, col)
        self.rows = max(self.rows, row + 1)
        self.cols = max(self.cols, col + 1)
        self._cells[row][col] = value

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._cells[row][col]

    def is_empty(self) -> bool:
        """True when nothing was written or every used cell is zero."""
        if self.rows == 0 or self.cols == 0:
            return True
        return not any(
            any(cells[: self.cols]) for cells in self._cells[: self.rows]
        )

    def is_row_empty(self, row: int) -> bool:
        """True when every used cell of ``row`` is zero."""
        if self.is_empty():
            return True
        self._check(row, 0)
        return not any(self._cells[row][: self.cols])

    def size(self) -> int:
        """Number of cells in the used extent."""
        return self.rows * self.cols


def room_code(row: int, col: int) -> str:
    """Return the room code for a position: row letters then column number."""
    if row < 0 or col < 0:
        raise ValueError("row and column must not be negative")
    letters = 1
    power = 26
    while power <= row:
        letters += 1
        power *= 26
    out = []
    for remaining in range(letters, 0, -1):
        power //= 26
        code = row // power + ord("A")
        if remaining != 1:
            code -= 1
        out.append(chr(code))
        row %= power
    return "".join(out) + str(col + 1)


@dataclass
class Room:
    """A room: its code, the doctor assigned (0 for none) and its queue."""

    code: str
    doctor_id: int = 0
    queue: Queue = field(default_factory=Queue)


class FloorPlan:
    """Grid of rooms; ``rows`` x ``cols`` is the part in use."""

    def __init__(self, max_rows: int = MAX_ROWS, max_cols: int = MAX_COLS) -> None:
        self.max_rows = max_rows
        self.max_cols = max_cols
        self.rows = 0
        self.cols = 0
        self._rooms: dict[tuple[int, int], Room] = {}

    def room(self, row: int, col: int) -> Room:
        """Return the room at (row, col)."""
        if not (0 <= row < self.max_rows and 0 <= col < self.max_cols):
            raise IndexError(f"room ({row}, {col}) out of range")
        key = (row, col)
        if key not in self._rooms:
            self._rooms[key] = Room(room_code(row, col))
        return self._rooms[key]

    def rooms(self) -> Iterator[Room]:
        """Yield the rooms in use, row by row."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield self.room(row, col)