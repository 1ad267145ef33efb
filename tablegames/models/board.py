"""Board model for five-in-a-row."""

from enum import IntEnum

DEFAULT_BOARD_SIZE = 13


class Cell(IntEnum):
    """Contents of a board square. Also used to name a player."""

    EMPTY = 0
    PLAYER_A = 1  # Moves first (black)
    PLAYER_B = 2  # White

    def opponent(self) -> "Cell":
        """Get the other player."""
        if self == Cell.PLAYER_A:
            return Cell.PLAYER_B
        if self == Cell.PLAYER_B:
            return Cell.PLAYER_A
        raise ValueError("EMPTY has no opponent")


CELL_SYMBOLS = {
    Cell.EMPTY: ".",
    Cell.PLAYER_A: "X",
    Cell.PLAYER_B: "O",
}


class Board:
    """Square grid of cells.

    The board stores pieces only; turn order and win rules live in
    GomokuSession and the win detector.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        """Initialize an empty board.

        Args:
            size: Number of rows (and columns).
        """
        if size < 1:
            raise ValueError(f"Board size must be positive: {size}")
        self.size = size
        self._grid: list[list[Cell]] = [[Cell.EMPTY] * size for _ in range(size)]

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if (row, col) is on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        self._check(row, col)
        return self._grid[row][col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        """Set the cell at (row, col)."""
        self._check(row, col)
        self._grid[row][col] = Cell(cell)

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        for row in self._grid:
            for col in range(self.size):
                row[col] = Cell.EMPTY

    def empty_count(self) -> int:
        """Get number of EMPTY cells."""
        return sum(row.count(Cell.EMPTY) for row in self._grid)

    def is_full(self) -> bool:
        """Check if no EMPTY cells remain."""
        return all(Cell.EMPTY not in row for row in self._grid)

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Get a snapshot of the grid."""
        return tuple(tuple(row) for row in self._grid)

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the board")

    def __str__(self) -> str:
        return "\n".join(
            "".join(CELL_SYMBOLS[c] for c in row) for row in self._grid
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size}, empty={self.empty_count()})"
