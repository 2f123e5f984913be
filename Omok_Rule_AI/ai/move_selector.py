"""Rule-based move choice: immediate win, else immediate block, else random."""

import random

try:
    from Board import opponent_of
    from engine import rules
except ImportError:
    from Omok_Rule_AI.Board import opponent_of
    from Omok_Rule_AI.engine import rules


ATTACK = "attack"
BLOCK = "block"
RANDOM = "random"


def choose_move_with_reason(board, color, rng=None):
    """
    Return ((row, col), reason) for `color`, or (None, None) if the board is full.
    reason is one of ATTACK, BLOCK, RANDOM. The board is not mutated.
    """
    move = rules.find_winning_move(board, color)
    if move is not None:
        return move, ATTACK

    move = rules.find_winning_move(board, opponent_of(color))
    if move is not None:
        return move, BLOCK

    empty = board.empty_cells()
    if not empty:
        return None, None
    rng = rng or random
    return rng.choice(empty), RANDOM


def choose_move(board, color, rng=None):
    move, _ = choose_move_with_reason(board, color, rng=rng)
    return move
