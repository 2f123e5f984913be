"""Abstract player interface and the rule-based opponent."""

import random

try:
    from Board import AI
    from ai import move_selector
except ImportError:
    from Omok_Rule_AI.Board import AI
    from Omok_Rule_AI.ai import move_selector


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for next move, or None if no move exists."""
        raise NotImplementedError


class RuleBasedAI(Player):
    """Takes an immediate win, else blocks the human's immediate win, else plays randomly."""

    def __init__(self, color=AI, seed=None, rng=None):
        super().__init__(color)
        self.rng = rng or random.Random(seed)
        self.last_reason = None

    def next_move(self, board):
        move, self.last_reason = move_selector.choose_move_with_reason(board, self.color, rng=self.rng)
        return move
