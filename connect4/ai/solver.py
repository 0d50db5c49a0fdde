"""
Solver facade.
Owns one board and one search engine, and picks moves by iterative deepening
under a cooperative time budget.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict

from ..game.board import Board, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_WIN_LENGTH
from ..game.colors import EMPTY, NAMES
from .engine import SearchEngine, SearchStats
from .heuristic import Evaluator
from .parallel import ParallelEvaluator, ParallelWinDetector, DEFAULT_NUM_THREADS

logger = logging.getLogger(__name__)


class Solver:
    """
    Connect-four solver.

    Sequential mode scans the board on the calling thread. Parallel mode
    creates one thread pool shared by the win detector and the evaluator;
    call close() (or use the solver as a context manager) to shut it down.
    """

    # Search settings
    DEFAULT_MAX_DEPTH = 6
    DEFAULT_TIME_LIMIT = 2.0   # seconds; <= 0 means a single fixed-depth search
    START_DEPTH = 2
    DEPTH_STEP = 2
    DEFAULT_NUM_THREADS = DEFAULT_NUM_THREADS

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 win_length: int = DEFAULT_WIN_LENGTH, parallel: bool = False,
                 num_threads: int = DEFAULT_NUM_THREADS):
        self.parallel = parallel
        self.num_threads = num_threads
        self._executor = None

        # Validate everything before a pool exists
        self._board = Board(width, height, win_length)
        if parallel and num_threads < 1:
            raise ValueError(f"num_threads must be at least 1, got {num_threads}")

        if parallel:
            self._executor = ThreadPoolExecutor(max_workers=num_threads,
                                                thread_name_prefix='connect4')
            self._board.win_detector = ParallelWinDetector(self._executor, num_threads)
            evaluator = ParallelEvaluator(self._executor, num_threads)
        else:
            evaluator = Evaluator()

        self.engine = SearchEngine(evaluator)

        self._nodes_visited = 0
        self._total_nodes_visited = 0
        self.stats = SearchStats()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def is_game_over(self) -> bool:
        return self._board.is_game_over

    @property
    def winner(self) -> int:
        return self._board.winner

    @property
    def nodes_visited(self) -> int:
        """Nodes counted for the move chosen by the last solve."""
        return self._nodes_visited

    @property
    def total_nodes_visited(self) -> int:
        return self._total_nodes_visited

    def solve(self, color: int, max_depth: int = DEFAULT_MAX_DEPTH,
              time_limit: float = DEFAULT_TIME_LIMIT) -> int:
        """
        Choose a move for `color` and play it on the solver's board.

        With time_limit > 0, searches depth 2, 4, 6, ... while time remains
        and keeps the deepest result that finished in time (depth 2 is kept
        regardless). A depth in progress is never interrupted, so a call can
        overrun the budget by up to one depth iteration. With time_limit <= 0,
        searches max_depth once.

        Returns:
            0-indexed column played, or -1 if the game is already decided,
            the board is full or no move was found
        """
        board = self._board
        if board.determine_winner() != EMPTY:
            return -1
        if board.is_full():
            logger.info("Board is full")
            return -1

        start_time = time.time()
        best_cell = -1
        nodes = 0
        completed_depth = 0

        if time_limit > 0:
            depth = self.START_DEPTH
            while True:
                self.engine.reset_counters()
                cell = self.engine.find_best_move(board, color, depth, time_limit, start_time)
                time_left = time.time() - start_time < time_limit

                if best_cell == -1 or time_left:
                    best_cell = cell
                    nodes = self.engine.node_count
                    completed_depth = depth
                    logger.debug("Depth %d: cell %d, %d nodes", depth, cell, nodes)

                if not time_left or depth >= board.count_empty():
                    break
                depth += self.DEPTH_STEP
        else:
            self.engine.reset_counters()
            best_cell = self.engine.find_best_move(board, color, max_depth)
            nodes = self.engine.node_count
            completed_depth = max_depth

        elapsed = time.time() - start_time
        self._nodes_visited = nodes

        column = -1
        if best_cell > -1:
            column = best_cell % board.width
            board.place(column, color)
            self._total_nodes_visited += nodes

        self.stats = SearchStats(
            thinking_time=elapsed,
            search_depth=completed_depth,
            nodes_visited=nodes,
            nodes_per_second=nodes / elapsed if elapsed > 0 else 0.0,
            best_cell=best_cell,
            best_column=column,
            best_score=self.engine.last_best_score,
        )

        logger.debug("%s plays column %d (depth %d, %d nodes, %.3fs)",
                     NAMES[color], column + 1, completed_depth, nodes, elapsed)
        if board.winner != EMPTY:
            logger.info("%s wins with column %d", NAMES[board.winner], column + 1)

        return column

    def play_move(self, column: int, color: int) -> int:
        """
        Apply an opponent's move, 1-indexed column.
        Returns 0; illegal moves raise an IllegalMoveError subclass.
        """
        self._board.play_move(column, color)
        return 0

    def reset_solver(self):
        """Clear the board and both node counters."""
        self._board.reset()
        self._nodes_visited = 0
        self._total_nodes_visited = 0
        self.stats = SearchStats()

    def get_total_nodes_traversed(self) -> int:
        return self._total_nodes_visited

    def print_board(self):
        print(self._board.render())

    def print_stats(self) -> int:
        """Log the node count of the last solve and return it."""
        logger.info("Nodes visited: %d", self._nodes_visited)
        return self._nodes_visited

    def get_debug_info(self) -> dict:
        """Get statistics of the last solve as a dictionary."""
        return asdict(self.stats)

    def close(self):
        """Shut down the thread pool, if any."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
