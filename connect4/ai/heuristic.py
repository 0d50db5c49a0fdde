"""
Heuristic evaluation function for connect-four.
Scores a board from one player's perspective using exact-length streak counts.
"""

from ..game.board import Board
from ..game.colors import opposite
from ..game.rules import Rules

# 32-bit signed bounds, used as win/loss sentinels
WIN_SCORE = 2_147_483_647
LOSE_SCORE = -2_147_483_648


class Evaluator:
    """
    Static board evaluator.

    A won board scores WIN_SCORE / LOSE_SCORE. Otherwise every streak of
    length k (win_length down to 2) is worth k**3, added for the player and
    subtracted for the opponent, so longer runs dominate. There is no
    look-ahead for threats; the search supplies that.
    """

    WIN_SCORE = WIN_SCORE
    LOSE_SCORE = LOSE_SCORE

    def evaluate(self, board: Board, color: int) -> int:
        """
        Evaluate the board position from color's perspective.

        Returns:
            WIN_SCORE if color has won, LOSE_SCORE if the opponent has,
            otherwise the streak score (positive = good for color)
        """
        opp_color = opposite(color)

        winner = board.determine_winner()
        if winner == color:
            return self.WIN_SCORE
        if winner == opp_color:
            return self.LOSE_SCORE

        score = 0
        for streak in range(board.win_length, 1, -1):
            score_for = self.count_streaks(board, color, streak)
            score_against = self.count_streaks(board, opp_color, streak)
            score += (score_for - score_against) * streak ** 3

        return score

    def count_streaks(self, board: Board, color: int, streak: int) -> int:
        """Count streaks of exactly `streak` pieces in every direction."""
        return Rules.count_streaks(board, color, streak)

    @classmethod
    def is_terminal_score(cls, score: int) -> bool:
        """Check if a score is a win/loss sentinel."""
        return score == cls.WIN_SCORE or score == cls.LOSE_SCORE
