"""
Minimax search for connect-four.

Single-perspective minimax: every leaf is scored from the same player's point
of view, with the mover alternating between that player (maximizing) and the
opponent (minimizing). The board is mutated in place with set_cell/undo and
restored after every child, so a search leaves the board as it found it.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..game.board import Board
from ..game.colors import opposite
from .heuristic import Evaluator

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Statistics from the last solve."""
    thinking_time: float = 0.0
    search_depth: int = 0
    nodes_visited: int = 0
    nodes_per_second: float = 0.0
    best_cell: int = -1
    best_column: int = -1
    best_score: int = 0


class SearchEngine:
    """
    Depth-bounded minimax over a shared board.

    Candidate cells are always tried in descending index order, and the best
    move only changes on a strict improvement, so ties keep the highest index
    and results are deterministic.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator if evaluator is not None else Evaluator()
        self.node_count = 0
        self.last_best_score = Evaluator.LOSE_SCORE

    def reset_counters(self):
        self.node_count = 0

    def minimax(self, board: Board, depth: int, color: int, maximizing: bool) -> int:
        """
        Score the position for `color`, searching `depth` plies.

        Args:
            board: Board to search, restored before returning
            depth: Remaining plies
            color: Player whose perspective every score is taken from
            maximizing: True if `color` is to move, False for the opponent

        Returns:
            Score from color's perspective
        """
        score = self.evaluator.evaluate(board, color)
        if self.evaluator.is_terminal_score(score):
            return score
        if board.is_full() or depth == 0:
            return score

        mover = color if maximizing else opposite(color)

        if maximizing:
            best = Evaluator.LOSE_SCORE
            for index in board.legal_cells():
                board.set_cell(index, mover)
                self.node_count += 1
                best = max(best, self.minimax(board, depth - 1, color, False))
                board.undo(index)
        else:
            best = Evaluator.WIN_SCORE
            for index in board.legal_cells():
                board.set_cell(index, mover)
                self.node_count += 1
                best = min(best, self.minimax(board, depth - 1, color, True))
                board.undo(index)

        return best

    def find_best_move(self, board: Board, color: int, max_depth: int,
                       time_limit: float = 0.0, start_time: float = None) -> int:
        """
        Pick the best cell for `color`.

        With a positive time_limit the deadline is checked before each root
        candidate. A candidate already being searched is never interrupted,
        so one call can run past the deadline.

        Returns:
            Cell index, or -1 if the board has no legal cell
        """
        if board.is_full():
            return -1

        if start_time is None:
            start_time = time.time()

        candidates = board.legal_cells()
        if not candidates:
            return -1

        best_cell = -1
        best_score = Evaluator.LOSE_SCORE

        for index in candidates:
            if time_limit > 0 and time.time() - start_time >= time_limit:
                logger.debug("Deadline reached at depth %d, stopping root scan", max_depth)
                break

            board.set_cell(index, color)
            self.node_count += 1
            score = self.minimax(board, max_depth, color, False)
            board.undo(index)

            if score > best_score:
                best_score = score
                best_cell = index

        # Every searched move loses (or none was searched): take the first legal cell
        if best_cell == -1:
            best_cell = candidates[0]

        self.last_best_score = best_score
        return best_cell
