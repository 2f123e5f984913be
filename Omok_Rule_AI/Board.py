"""Board state container, cell/outcome constants, and run collection."""

BOARD_SIZE = 15
WIN_COUNT = 5

# Cell values
EMPTY = 0
HUMAN = 1
AI = 2

# Game outcomes
PLAYING = 0
HUMAN_WIN = 1
AI_WIN = 2
DRAW = 3

PLAYER_NAMES = {HUMAN: "Human", AI: "AI"}
OUTCOME_NAMES = {PLAYING: "Playing", HUMAN_WIN: "Human wins", AI_WIN: "AI wins", DRAW: "Draw"}

# (d_row, d_col) in scan order: horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (-1, 1)]


def opponent_of(color):
    if color not in (HUMAN, AI):
        raise ValueError("color must be HUMAN (1) or AI (2)")
    return AI if color == HUMAN else HUMAN


def win_outcome_for(color):
    return HUMAN_WIN if color == HUMAN else AI_WIN


class Board:
    def __init__(self, size=BOARD_SIZE):
        # Store cells as 0 (empty), 1 (human), 2 (ai), indexed [row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def empty_cells(self):
        """Return every empty (row, col) in row-major order."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == EMPTY
        ]

    def place(self, row, col, color):
        """Place a stone; raise if out of bounds or occupied."""
        if color not in (HUMAN, AI):
            raise ValueError("color must be HUMAN (1) or AI (2)")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = color
        self.move_count += 1

    def remove(self, row, col):
        """Clear an occupied cell (used by undo and hypothetical placement)."""
        if not self.in_bounds(row, col) or self.cells[row][col] == EMPTY:
            raise ValueError("no stone to remove")
        self.cells[row][col] = EMPTY
        self.move_count -= 1

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        return new_board

    def snapshot(self):
        """Immutable copy of the grid for observers."""
        return tuple(tuple(row) for row in self.cells)

    def run_through(self, row, col, d_row, d_col):
        """
        Ordered coordinates of the contiguous same-color run through (row, col)
        along (d_row, d_col), from the negative end to the positive end.
        Bounded only by the board edges.
        """
        color = self.cells[row][col]
        if color == EMPTY:
            return []
        backward = self._count_dir(row, col, -d_row, -d_col, color)
        forward = self._count_dir(row, col, d_row, d_col, color)
        start_r, start_c = row - d_row * backward, col - d_col * backward
        return [
            (start_r + d_row * i, start_c + d_col * i)
            for i in range(backward + 1 + forward)
        ]

    def _count_dir(self, row, col, d_row, d_col, color):
        """Count contiguous stones of color from (row, col) (exclusive) in (d_row, d_col)."""
        count = 0
        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            count += 1
            r += d_row
            c += d_col
        return count
