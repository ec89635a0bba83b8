from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Tuple

Symbol = str  # single printable character
Coord = Tuple[int, int]  # (row, col), 0-based


@dataclass(frozen=True)
class Cell:
    """One card on the board: its symbol plus the two display flags."""
    symbol: Symbol
    revealed: bool = False  # face up for the current attempt only
    matched: bool = False   # permanently face up

    @property
    def shown(self) -> bool:
        return self.matched or self.revealed

    @property
    def is_open(self) -> bool:
        """Revealed this attempt but not yet confirmed as a match."""
        return self.revealed and not self.matched


@dataclass(frozen=True)
class Board:
    """Represents the grid of cards, its dimensions and every cell's display state."""
    rows: int
    cols: int
    cells: Tuple[Cell, ...]  # row-major, length == rows * cols

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"Board of {self.rows}x{self.cols} needs {self.rows * self.cols} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_symbols(cls, rows: int, cols: int, symbols: Iterable[Symbol]) -> 'Board':
        """Places symbols row-major onto a fresh, fully hidden board."""
        return cls(rows=rows, cols=cols, cells=tuple(Cell(s) for s in symbols))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Cell:
        """Gets the cell at a given row and column (no wrap-around)."""
        if not self.in_bounds((r, c)):
            raise IndexError(f"({r}, {c}) is outside a {self.rows}x{self.cols} board")
        return self.cells[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row-major."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def with_cell(self, coord: Coord, cell: Cell) -> 'Board':
        """Returns a copy of the board with one cell replaced. The symbol must not change."""
        old = self.at(*coord)
        if old.symbol != cell.symbol:
            raise ValueError(f"Cannot change the symbol at {coord}")
        cells = list(self.cells)
        cells[self.index(*coord)] = cell
        return replace(self, cells=tuple(cells))

    def reveal(self, coord: Coord) -> 'Board':
        return self.with_cell(coord, replace(self.at(*coord), revealed=True))

    def hide(self, coord: Coord) -> 'Board':
        return self.with_cell(coord, replace(self.at(*coord), revealed=False))

    def mark_matched(self, coord: Coord) -> 'Board':
        return self.with_cell(coord, replace(self.at(*coord), matched=True))

    def open_cells(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.at(*coord).is_open]

    def matched_count(self) -> int:
        return sum(1 for cell in self.cells if cell.matched)

    def symbol_counts(self) -> Dict[Symbol, int]:
        return dict(Counter(cell.symbol for cell in self.cells))
