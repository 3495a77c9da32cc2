from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from lines.constants import FIELD_SIZE

Position = Tuple[int, int]
# A cell holds a color index, or None when it is empty.
CellState = Optional[int]
EMPTY: CellState = None
BoardSnapshot = Tuple[Tuple[CellState, ...], ...]


@dataclass(slots=True)
class Board:
    """Square grid of cell states owned by the turn controller.

    Rows and columns are 0-indexed; free-cell enumeration is row-major.
    """

    size: int = FIELD_SIZE
    cells: List[List[CellState]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[EMPTY for _ in range(self.size)] for _ in range(self.size)]
        elif len(self.cells) != self.size or any(len(row) != self.size for row in self.cells):
            raise ValueError(f"Board cells must be a {self.size}x{self.size} grid")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[CellState]]) -> "Board":
        cells = [list(row) for row in rows]
        return cls(size=len(cells), cells=cells)

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} outside {self.size}x{self.size} board")

    def get(self, pos: Position) -> CellState:
        self._check(pos)
        return self.cells[pos[0]][pos[1]]

    def set(self, pos: Position, state: CellState) -> None:
        self._check(pos)
        self.cells[pos[0]][pos[1]] = state

    def clear(self, pos: Position) -> None:
        self.set(pos, EMPTY)

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is EMPTY

    def positions(self) -> Iterator[Position]:
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def free_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self.cells[pos[0]][pos[1]] is EMPTY]

    def occupied_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self.cells[pos[0]][pos[1]] is not EMPTY]

    def count_free(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is EMPTY)

    def nth_free(self, index: int) -> Position:
        """Return the index-th free cell in row-major order.

        A stale index means the caller mutated the board between counting and
        looking up; that is a bug, so it raises instead of recovering.
        """
        seen = 0
        for pos in self.positions():
            if self.cells[pos[0]][pos[1]] is EMPTY:
                if seen == index:
                    return pos
                seen += 1
        raise RuntimeError(f"Can't find free cell #{index}; only {seen} free")

    def snapshot(self) -> BoardSnapshot:
        return tuple(tuple(row) for row in self.cells)

    def reset(self) -> None:
        for row in self.cells:
            for col in range(len(row)):
                row[col] = EMPTY
