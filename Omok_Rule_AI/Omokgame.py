"""Game engine: turn order, move application, win/draw detection, and paired undo."""

from collections import namedtuple

try:
    from Board import Board, AI, DRAW, HUMAN, PLAYING, PLAYER_NAMES, opponent_of, win_outcome_for
    from Player import RuleBasedAI
    from engine import referee, rules
    from utils.logger import silent
except ImportError:
    from Omok_Rule_AI.Board import Board, AI, DRAW, HUMAN, PLAYING, PLAYER_NAMES, opponent_of, win_outcome_for
    from Omok_Rule_AI.Player import RuleBasedAI
    from Omok_Rule_AI.engine import referee, rules
    from Omok_Rule_AI.utils.logger import silent


# Undo log entry: the cell a move filled and the player to move before it.
HistoryEntry = namedtuple("HistoryEntry", ["row", "col", "player"])


class Omokgame:
    def __init__(self, opponent=None, logger=None):
        self.board = Board()
        self.current_player = HUMAN  # human moves first
        self.outcome = PLAYING
        self.last_move = None
        self.win_line = None
        self.history = []
        self.opponent = opponent or RuleBasedAI(color=AI)
        self.logger = logger or silent

    # --- State queries (copies; callers must not mutate engine state) ---

    @property
    def board_size(self):
        return self.board.size

    @property
    def move_count(self):
        return self.board.move_count

    @property
    def history_length(self):
        return len(self.history)

    @property
    def is_over(self):
        return self.outcome != PLAYING

    def board_state(self):
        return [row[:] for row in self.board.cells]

    def get_win_line(self):
        return list(self.win_line) if self.win_line else None

    # --- Commands ---

    def apply_move(self, row, col):
        """Place the current player's stone. Returns False (no state change) if illegal."""
        reason = referee.check_move(self.board, row, col, self.outcome)
        if reason is not None:
            self.logger(f"Rejected move {(row, col)}: {reason}")
            return False

        mover = self.current_player
        self.history.append(HistoryEntry(row, col, mover))
        self.board.place(row, col, mover)
        self.last_move = (row, col)

        line = rules.win_line_after_move(self.board, row, col, mover)
        if line:
            self.outcome = win_outcome_for(mover)
            self.win_line = line
            self.logger(f"Winner: {PLAYER_NAMES[mover]} {line}")
        elif self.board.is_full():
            self.outcome = DRAW
            self.logger("Result: Draw (board full)")
        else:
            self.current_player = opponent_of(mover)
        return True

    def undo(self):
        """Revert the last (human, AI) pair of moves. Returns False if fewer than two moves exist."""
        if len(self.history) < 2:
            return False

        latest = self.history.pop()
        older = self.history.pop()
        self.board.remove(latest.row, latest.col)
        self.board.remove(older.row, older.col)

        self.current_player = older.player
        self.outcome = PLAYING
        self.last_move = None
        self.win_line = None
        return True

    def ai_move(self):
        """Let the opponent choose and play. Returns the move, or None if it cannot move now."""
        if self.current_player != self.opponent.color or self.outcome != PLAYING:
            return None

        move = self.opponent.next_move(self.board)
        if move is None:
            return None
        self.apply_move(*move)
        return move
