"""Five-in-a-row win detection."""

from dataclasses import dataclass

from tablegames.models.board import Board, Cell

# Vertical, horizontal, and the two diagonals, in scan order
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))

WIN_LENGTH = 5

Square = tuple[int, int]


@dataclass(frozen=True)
class WinningRun:
    """A line of pieces long enough to win.

    start and end are the squares at the two ends of the run, ordered so
    that start comes first in (row, col) order.
    """

    start: Square
    end: Square
    length: int
    direction: tuple[int, int]

    @property
    def endpoints(self) -> tuple[Square, Square]:
        return (self.start, self.end)


def _walk(
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
    player: Cell,
) -> tuple[int, Square]:
    """Count player's pieces beyond (row, col) in one direction.

    Returns:
        (number of matching squares, last matching square). The last square
        is (row, col) itself when the neighbour does not match.
    """
    steps = 0
    r, c = row + d_row, col + d_col
    while board.in_bounds(r, c) and board.get(r, c) == player:
        steps += 1
        r += d_row
        c += d_col
    return steps, (r - d_row, c - d_col)


def count_run(
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
    player: Cell,
) -> tuple[int, Square, Square]:
    """Measure the run through (row, col) along one line.

    Args:
        board: Board to inspect.
        row: Row of a square assumed to hold player's piece.
        col: Column of that square.
        d_row: Row step, one of -1, 0, 1.
        d_col: Column step, one of -1, 0, 1 (not both zero).
        player: Owner whose pieces are counted.

    Returns:
        (run length including (row, col), forward endpoint, backward endpoint)
    """
    if d_row == 0 and d_col == 0:
        raise ValueError("Direction must be non-zero")
    forward, forward_end = _walk(board, row, col, d_row, d_col, player)
    backward, backward_end = _walk(board, row, col, -d_row, -d_col, player)
    return 1 + forward + backward, forward_end, backward_end


def find_winning_run(
    board: Board,
    row: int,
    col: int,
    player: Cell | None = None,
    win_length: int = WIN_LENGTH,
) -> WinningRun | None:
    """Check whether the piece at (row, col) completes a winning line.

    Directions are tried in DIRECTIONS order and the first one with at
    least win_length contiguous pieces is returned. Its endpoints bound the
    whole contiguous run, even when it is longer than win_length.

    Args:
        board: Board after the piece was placed.
        row: Row of the placed piece.
        col: Column of the placed piece.
        player: Owner to check for. Defaults to the owner of (row, col).
        win_length: Pieces in a row needed to win.

    Returns:
        WinningRun, or None if the move does not win.
    """
    if player is None:
        player = board.get(row, col)
    if player == Cell.EMPTY:
        return None

    for d_row, d_col in DIRECTIONS:
        length, first, last = count_run(board, row, col, d_row, d_col, player)
        if length >= win_length:
            start, end = sorted((first, last))
            return WinningRun(
                start=start,
                end=end,
                length=length,
                direction=(d_row, d_col),
            )

    return None
