from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Mark = str  # 'X' or 'O'
Cell = Optional[Mark]
Coord = Tuple[int, int]
Line = Tuple[int, int, int]

SIZE = 3
BOARD_IDS: Tuple[str, ...] = ('A', 'B', 'C')

# Rows, columns, diagonals as row-major cell indices.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def other_mark(mark: Mark) -> Mark:
    return 'O' if mark == 'X' else 'X'


def check_win(cells: Tuple[Cell, ...]) -> Tuple[Optional[Mark], Optional[Line]]:
    """Returns the mark and cells of the first completed line, or (None, None)."""
    for a, b, c in WIN_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a], (a, b, c)
    return None, None


@dataclass(frozen=True)
class SubBoard:
    """One 3x3 grid of the match. Cells are row-major; a cell is None, 'X' or 'O'."""
    cells: Tuple[Cell, ...] = (None,) * (SIZE * SIZE)
    completed: bool = False
    winner: Optional[Mark] = None
    win_line: Optional[Line] = None

    @staticmethod
    def index(row: int, col: int) -> int:
        return row * SIZE + col

    def at(self, row: int, col: int) -> Cell:
        return self.cells[self.index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        return self.at(row, col) is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_cells(self) -> Iterable[Coord]:
        for r in range(SIZE):
            for c in range(SIZE):
                if self.is_empty(r, c):
                    yield (r, c)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))

    def place(self, row: int, col: int, mark: Mark) -> 'SubBoard':
        """
        Returns a new board with `mark` at (row, col), re-evaluated for a win or draw.
        The caller is responsible for checking the board is open and the cell empty.
        """
        cells = list(self.cells)
        cells[self.index(row, col)] = mark
        new_cells = tuple(cells)
        winner, line = check_win(new_cells)
        if winner is not None:
            return SubBoard(new_cells, True, winner, line)
        full = all(cell is not None for cell in new_cells)
        return SubBoard(new_cells, full, None, None)

    def pretty(self) -> str:
        """Generates a human-readable string representation of the grid."""
        return "\n".join(" ".join(cell or "." for cell in row) for row in self.rows())
