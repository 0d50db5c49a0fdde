"""Tests for the heuristic evaluator."""

import sys
sys.path.insert(0, '.')

from connect4.game import Board, RED, YELLOW
from connect4.ai.heuristic import Evaluator, WIN_SCORE, LOSE_SCORE


def put(board, color, *positions):
    for row, col in positions:
        board.set_cell(board.to_index(row, col), color)


class TestEvaluator:
    """Test static evaluation."""

    def test_empty_board_is_zero(self):
        assert Evaluator().evaluate(Board(), RED) == 0

    def test_sentinels(self):
        """Won boards score the 32-bit bounds."""
        assert WIN_SCORE == 2 ** 31 - 1
        assert LOSE_SCORE == -2 ** 31

        board = Board()
        put(board, RED, (0, 0), (0, 1), (0, 2), (0, 3))
        evaluator = Evaluator()
        assert evaluator.evaluate(board, RED) == WIN_SCORE
        assert evaluator.evaluate(board, YELLOW) == LOSE_SCORE
        assert evaluator.is_terminal_score(WIN_SCORE)
        assert not evaluator.is_terminal_score(0)

    def test_streaks_are_cubed(self):
        """A pair is worth 2**3 for its owner and against the opponent."""
        board = Board()
        put(board, RED, (0, 0), (0, 1))
        put(board, YELLOW, (0, 3))

        evaluator = Evaluator()
        assert evaluator.evaluate(board, RED) == 8
        assert evaluator.evaluate(board, YELLOW) == -8

    def test_longer_streaks_dominate(self):
        """A three outweighs a pair."""
        board = Board()
        put(board, RED, (0, 0), (0, 1), (0, 2))
        put(board, YELLOW, (0, 5), (0, 6))

        assert Evaluator().evaluate(board, RED) == 27 - 8

    def test_perspective_is_antisymmetric(self):
        board = Board()
        put(board, RED, (0, 2), (1, 2), (0, 3))
        put(board, YELLOW, (0, 4), (1, 3))

        evaluator = Evaluator()
        assert evaluator.evaluate(board, RED) == -evaluator.evaluate(board, YELLOW)
