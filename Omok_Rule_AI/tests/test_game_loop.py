"""Tests for Omokgame move application, outcomes, history, and paired undo."""

import pytest

from Omok_Rule_AI.Board import AI, AI_WIN, DRAW, EMPTY, HUMAN, HUMAN_WIN, PLAYING
from Omok_Rule_AI.Omokgame import Omokgame
from Omok_Rule_AI.Player import Player, RuleBasedAI


class SeqPlayer(Player):
    """Deterministic opponent that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            return None
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def _state(game):
    return game.board_state(), game.current_player, game.outcome, game.history_length


@pytest.fixture
def game():
    return Omokgame(opponent=RuleBasedAI(seed=0))


def test_initial_state(game):
    assert game.board_size == 15
    assert game.current_player == HUMAN
    assert game.outcome == PLAYING
    assert game.last_move is None
    assert game.get_win_line() is None
    assert game.history_length == 0


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (15, 0), (0, 15), (20, 20)])
def test_out_of_bounds_move_changes_nothing(game, row, col):
    before = _state(game)
    assert game.apply_move(row, col) is False
    assert _state(game) == before


def test_occupied_cell_rejected_without_history(game):
    assert game.apply_move(7, 7)
    before = _state(game)
    assert game.apply_move(7, 7) is False
    assert _state(game) == before
    assert game.history_length == 1


def test_successful_move_changes_one_cell_and_alternates(game):
    before = game.board_state()
    assert game.apply_move(3, 4)
    after = game.board_state()
    changed = [(r, c) for r in range(15) for c in range(15) if before[r][c] != after[r][c]]
    assert changed == [(3, 4)]
    assert after[3][4] == HUMAN
    assert game.current_player == AI
    assert game.last_move == (3, 4)
    assert game.history_length == 1


def test_board_state_is_a_copy(game):
    state = game.board_state()
    state[0][0] = AI
    assert game.board.cells[0][0] == EMPTY


def test_human_completes_top_row_five():
    # Opponent answers on row 5 so it never blocks row 0.
    game = Omokgame(opponent=SeqPlayer(AI, [(5, c) for c in range(4)]))
    for c in range(4):
        assert game.apply_move(0, c)
        assert game.ai_move() == (5, c)
    assert game.apply_move(0, 4)
    assert game.outcome == HUMAN_WIN
    assert game.get_win_line() == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    assert game.current_player == HUMAN
    # terminal: nothing else is accepted
    assert game.apply_move(10, 10) is False
    assert game.ai_move() is None


def test_ai_wins_with_its_own_five():
    game = Omokgame(opponent=RuleBasedAI(seed=3))
    for c in range(4):
        game.board.place(c, 10, AI)
    assert game.apply_move(14, 0)
    assert game.ai_move() == (4, 10)
    assert game.outcome == AI_WIN
    assert game.get_win_line() == [(r, 10) for r in range(5)]


def test_ai_move_only_on_ai_turn(game):
    assert game.ai_move() is None
    game.apply_move(7, 7)
    mv = game.ai_move()
    assert mv is not None and mv != (7, 7)
    assert game.board.cells[mv[0]][mv[1]] == AI
    assert game.current_player == HUMAN
    assert game.history_length == 2


def test_first_opponent_reply_is_one_of_224_empty_cells():
    for seed in range(10):
        game = Omokgame(opponent=RuleBasedAI(seed=seed))
        game.apply_move(7, 7)
        empties = set(game.board.empty_cells())
        assert len(empties) == 224
        mv = game.ai_move()
        assert mv in empties


def test_draw_when_board_fills_without_five(game):
    # Period-4 stripes: no run longer than two in any direction.
    def owner(r, c):
        return HUMAN if (c + 2 * r) % 4 < 2 else AI

    cells = [(r, c) for r in range(15) for c in range(15)]
    last = cells[-1]
    for r, c in cells[:-1]:
        game.board.place(r, c, owner(r, c))
    game.current_player = owner(*last)
    assert game.apply_move(*last)
    assert game.outcome == DRAW
    assert game.get_win_line() is None
    assert game.apply_move(0, 0) is False


def test_undo_needs_a_full_round(game):
    assert game.undo() is False
    game.apply_move(7, 7)
    before = _state(game)
    assert game.undo() is False
    assert _state(game) == before


def test_undo_restores_board_and_turn_from_two_moves_back(game):
    game.apply_move(7, 7)
    game.ai_move()
    snapshot_before = (game.board_state(), game.current_player)
    target = next(cell for cell in [(0, 0), (0, 1)] if game.board.is_empty(*cell))
    assert game.apply_move(*target)
    game.ai_move()
    assert game.history_length == 4

    assert game.undo() is True
    assert (game.board_state(), game.current_player) == snapshot_before
    assert game.history_length == 2
    assert game.outcome == PLAYING
    assert game.last_move is None
    assert game.get_win_line() is None


def test_undo_after_win_resumes_play():
    game = Omokgame(opponent=SeqPlayer(AI, [(5, c) for c in range(4)]))
    for c in range(4):
        game.apply_move(0, c)
        game.ai_move()
    game.apply_move(0, 4)
    assert game.outcome == HUMAN_WIN

    assert game.undo() is True
    assert game.outcome == PLAYING
    assert game.current_player == AI
    assert game.board.cells[0][4] == EMPTY
    assert game.board.cells[5][3] == EMPTY
    assert game.history_length == game.move_count == 7


def test_history_length_tracks_successful_moves(game):
    attempts = [(7, 7), (7, 7), (-1, 3), (3, 3)]
    for row, col in attempts:
        if game.current_player == HUMAN:
            game.apply_move(row, col)
        else:
            game.ai_move()
    assert game.history_length == game.move_count


def test_logger_receives_rejections_and_results():
    messages = []
    game = Omokgame(opponent=SeqPlayer(AI, [(5, c) for c in range(4)]), logger=messages.append)
    game.apply_move(-1, -1)
    assert any("out of bounds" in m for m in messages)
    for c in range(4):
        game.apply_move(0, c)
        game.ai_move()
    game.apply_move(0, 4)
    assert any(m.startswith("Winner: Human") for m in messages)
