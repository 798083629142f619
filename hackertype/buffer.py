"""Line buffer: the grid of revealed rows.

The buffer always holds exactly ``height`` rows. Text is appended one
character at a time; a character that does not fit in the remaining columns
of the active row starts a new row, and running past the last row evicts the
oldest one. Wrapping is by column budget only, mid-word.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from .width import char_width


class Cell(NamedTuple):
    """A placed character and the number of columns it occupies."""
    char: str
    width: int


Row = tuple[Cell, ...]


class LineBuffer:
    """Fixed-height grid of rows with a write cursor.

    ``row_index`` and ``column`` locate where the next character will be
    placed. The cursor is kept in range even when ``height`` is zero, in
    which case characters are consumed but never stored.
    """

    def __init__(self, height: int, width: int):
        if height < 0 or width < 0:
            raise ValueError(f"Buffer dimensions must be non-negative, got {width}x{height}")
        self.height = height
        self.width = width
        self._rows: list[list[Cell]] = [[] for _ in range(height)]
        self.row_index = 0
        self.column = 0

    def append(self, chars: Iterable[str]) -> None:
        """Place each character of ``chars`` in order, wrapping and scrolling."""
        for ch in chars:
            if ch == "\n":
                self._line_break()
                continue

            w = char_width(ch)
            if self.column + w > self.width:
                self._line_break()
            # A character wider than the whole row can never be placed.
            if w <= self.width and self._rows:
                self._rows[self.row_index].append(Cell(ch, w))
            self.column += w

    def _line_break(self) -> None:
        self.row_index += 1
        self.column = 0
        if self.row_index >= self.height:
            self._scroll()

    def _scroll(self) -> None:
        """Evict the oldest row and open an empty one at the bottom."""
        if self._rows:
            del self._rows[0]
            self._rows.append([])
        self.row_index = max(self.height - 1, 0)

    def rows(self) -> list[Row]:
        """Return a snapshot of all rows, top to bottom."""
        return [tuple(row) for row in self._rows]

    def lines(self) -> list[str]:
        """Return each row as a plain string."""
        return ["".join(cell.char for cell in row) for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineBuffer):
            return NotImplemented
        return (
            self.height == other.height
            and self.width == other.width
            and self._rows == other._rows
            and self.row_index == other.row_index
            and self.column == other.column
        )

    def __repr__(self) -> str:
        return (
            f"LineBuffer(height={self.height}, width={self.width}, "
            f"cursor=({self.row_index}, {self.column}), lines={self.lines()!r})"
        )


def new_buffer(height: int, width: int) -> LineBuffer:
    """Return an empty buffer of ``height`` rows, ``width`` columns each."""
    return LineBuffer(height, width)
