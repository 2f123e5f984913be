"""State adapter between the game engine and a front end (publish-on-change snapshots)."""

from dataclasses import dataclass
import time

try:
    from Board import AI, HUMAN, PLAYING, PLAYER_NAMES, OUTCOME_NAMES
    from Omokgame import Omokgame
    from Player import RuleBasedAI
    from utils import timer
    from utils.logger import log_event
except ImportError:
    from Omok_Rule_AI.Board import AI, HUMAN, PLAYING, PLAYER_NAMES, OUTCOME_NAMES
    from Omok_Rule_AI.Omokgame import Omokgame
    from Omok_Rule_AI.Player import RuleBasedAI
    from Omok_Rule_AI.utils import timer
    from Omok_Rule_AI.utils.logger import log_event


AI_DELAY_SECONDS = 0.5


@dataclass(frozen=True)
class GameSnapshot:
    board: tuple
    current_player: int
    outcome: int
    last_move: tuple | None
    win_line: tuple | None
    board_size: int
    move_count: int
    ai_pending: bool
    generation: int

    @property
    def is_over(self):
        return self.outcome != PLAYING

    @property
    def status_text(self):
        if self.is_over:
            return OUTCOME_NAMES[self.outcome]
        if self.ai_pending:
            return "AI is thinking..."
        return f"{PLAYER_NAMES[self.current_player]} to move"


@dataclass
class _PendingMove:
    deadline: float
    generation: int


class GameSession:
    """
    Owns the single live Omokgame and republishes a full snapshot after every command.

    The opponent reply is deferred by `ai_delay` seconds and run by `tick()`, which the
    front end calls from its loop. A pending reply is tied to the generation it was
    scheduled in; undo and restart advance the generation so a stale reply is dropped.
    """

    def __init__(self, ai_delay=AI_DELAY_SECONDS, logger=log_event, rng_seed=None, clock=time.time):
        self.ai_delay = ai_delay
        self.logger = logger
        self.rng_seed = rng_seed
        self.clock = clock
        self.generation = 0
        self._pending = None
        self._observers = []
        self._move_index = 0
        self.game = self._new_game()
        self._snapshot = self._build_snapshot()

    # --- Observation ---

    @property
    def snapshot(self):
        return self._snapshot

    @property
    def ai_pending(self):
        return self._pending is not None

    def subscribe(self, callback):
        """Register callback(snapshot); it is called on every publish. Returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def publish(self):
        self._snapshot = self._build_snapshot()
        for callback in list(self._observers):
            callback(self._snapshot)
        return self._snapshot

    # --- Commands ---

    def submit_move(self, row, col):
        """Human move. Returns True if it was applied."""
        game = self.game
        if game.outcome != PLAYING or game.current_player != HUMAN or self._pending is not None:
            return False
        if not game.apply_move(row, col):
            return False

        self._log_move(HUMAN, (row, col))
        self.publish()

        if game.current_player == AI and game.outcome == PLAYING:
            self._schedule_ai_move()
            self.publish()
        return True

    def undo(self):
        if not self.game.undo():
            self.logger("Undo rejected: need a full round to revert")
            return False

        self._cancel_pending()
        self._move_index = self.game.history_length
        self.logger(f"Undo: back to move {self._move_index}")
        if self.game.current_player == AI and self.game.outcome == PLAYING:
            self._schedule_ai_move()
        self.publish()
        return True

    def restart(self):
        self._cancel_pending()
        self.game = self._new_game()
        self._move_index = 0
        self.logger("Restart: new game")
        return self.publish()

    def tick(self, now=None):
        """Run the pending opponent reply once its deadline has passed. Returns the move or None."""
        if self._pending is None:
            return None
        now = self.clock() if now is None else now
        if not timer.is_due(self._pending.deadline, now):
            return None
        return self.run_pending()

    def run_pending(self):
        """Run the pending opponent reply immediately, if it still belongs to the live game."""
        pending, self._pending = self._pending, None
        if pending is None:
            return None
        if pending.generation != self.generation:
            self.logger("Dropped stale opponent move")
            return None

        move = self.game.ai_move()
        if move is not None:
            self._log_move(AI, move, reason=self.game.opponent.last_reason)
        self.publish()
        return move

    # --- Internals ---

    def _new_game(self):
        opponent = RuleBasedAI(color=AI, seed=self.rng_seed)
        return Omokgame(opponent=opponent, logger=self.logger)

    def _schedule_ai_move(self):
        deadline = timer.deadline_after(self.ai_delay, now=self.clock())
        self._pending = _PendingMove(deadline=deadline, generation=self.generation)

    def _cancel_pending(self):
        self.generation += 1
        if self._pending is not None:
            self.logger("Cancelled pending opponent move")
        self._pending = None

    def _log_move(self, color, move, reason=None):
        self._move_index += 1
        suffix = f" ({reason})" if reason else ""
        self.logger(f"Move {self._move_index}: {PLAYER_NAMES[color]} {move}{suffix}")

    def _build_snapshot(self):
        game = self.game
        win_line = game.get_win_line()
        return GameSnapshot(
            board=game.board.snapshot(),
            current_player=game.current_player,
            outcome=game.outcome,
            last_move=game.last_move,
            win_line=tuple(win_line) if win_line else None,
            board_size=game.board_size,
            move_count=game.move_count,
            ai_pending=self._pending is not None,
            generation=self.generation,
        )
