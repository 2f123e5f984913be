"""Five-in-a-row rule enforcement: win lines and immediate winning moves."""

from contextlib import contextmanager

try:
    from Board import Board, DIRECTIONS, WIN_COUNT
except ImportError:
    from Omok_Rule_AI.Board import Board, DIRECTIONS, WIN_COUNT


@contextmanager
def _simulate(board: Board, row: int, col: int, color: int):
    board.place(row, col, color)
    try:
        yield
    finally:
        board.remove(row, col)


def win_line_after_move(board: Board, row: int, col: int, color: int) -> list[tuple[int, int]] | None:
    """
    Assumes stone is already placed. Return the ordered winning run through
    (row, col) for the first qualifying direction, or None.
    Overlines (six or more) also win.
    """
    if board.cells[row][col] != color:
        return None
    for d_row, d_col in DIRECTIONS:
        line = board.run_through(row, col, d_row, d_col)
        if len(line) >= WIN_COUNT:
            return line
    return None


def is_win_after_move(board: Board, row: int, col: int, color: int) -> bool:
    """Assumes stone is already placed."""
    return win_line_after_move(board, row, col, color) is not None


def find_winning_move(board: Board, color: int) -> tuple[int, int] | None:
    """First empty cell (row-major) where `color` would complete a run; board is left unchanged."""
    for row, col in board.empty_cells():
        with _simulate(board, row, col, color):
            if is_win_after_move(board, row, col, color):
                return row, col
    return None
