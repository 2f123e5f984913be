"""Move validation for the game engine."""

try:
    from Board import PLAYING
except ImportError:
    from Omok_Rule_AI.Board import PLAYING


def check_move(board, row, col, outcome):
    """
    Validate a move against game state, bounds, and occupancy.
    Returns None if the move is legal, otherwise a short rejection reason.
    """
    if outcome != PLAYING:
        return "game is over"
    if not board.in_bounds(row, col):
        return "move out of bounds"
    if not board.is_empty(row, col):
        return "cell already occupied"
    return None
