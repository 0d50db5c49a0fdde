"""
Thread-pool variants of the evaluator and the win detector.

Only the board-sized scans run on the pool. Every call forks its tasks and
blocks until all of them have finished (fork-join), and tasks only ever read
the board. The minimax recursion, which mutates the board in place, stays on
the calling thread, so a scan never overlaps a mutation.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..game.board import Board
from ..game.colors import EMPTY
from ..game.errors import NoPlayerSpecifiedError
from ..game.rules import Rules
from .heuristic import Evaluator

DEFAULT_NUM_THREADS = 11

# Independent direction scanners; their counts are summed after the join
STREAK_SCANNERS = (
    Rules.count_horizontal_streaks,
    Rules.count_vertical_streaks,
    Rules.count_diagonal_streaks,
)


def split_range(count: int, parts: int) -> list:
    """Split range(count) into at most `parts` contiguous, near-equal ranges."""
    parts = max(1, min(parts, count))
    base, extra = divmod(count, parts)

    ranges = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        ranges.append(range(start, stop))
        start = stop
    return ranges


class PooledStrategy:
    """
    Holds the executor a parallel strategy submits to.
    An executor passed in is shared and left running on close().
    """

    def __init__(self, executor: Optional[ThreadPoolExecutor] = None,
                 num_threads: int = DEFAULT_NUM_THREADS):
        if num_threads < 1:
            raise ValueError(f"num_threads must be at least 1, got {num_threads}")

        self.num_threads = num_threads
        self._owns_executor = executor is None
        if executor is None:
            executor = ThreadPoolExecutor(max_workers=num_threads,
                                          thread_name_prefix='connect4')
        self.executor = executor

    def close(self):
        """Shut down the executor if this strategy created it."""
        if self._owns_executor and self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ParallelWinDetector(PooledStrategy):
    """
    Win detection split into row/column tiles, one pool task per tile.

    All tasks share one `found` event. It only ever goes from unset to set,
    so concurrent writers need no ordering, and tasks that see it set stop
    early.
    """

    def tiles(self, board: Board) -> list:
        """Partition the board into (rows, cols) tiles, about one per thread."""
        row_parts = min(board.height, self.num_threads)
        col_parts = max(1, min(board.width, self.num_threads // row_parts))
        return [
            (rows, cols)
            for rows in split_range(board.height, row_parts)
            for cols in split_range(board.width, col_parts)
        ]

    def is_winner(self, board: Board, color: int) -> bool:
        """Check if `color` has a winning line. Same result as Rules.is_winner."""
        if color == EMPTY:
            raise NoPlayerSpecifiedError("check the win condition of")

        found = threading.Event()
        futures = [
            self.executor.submit(self._scan_tile, board, color, rows, cols, found)
            for rows, cols in self.tiles(board)
        ]
        # Join; result() also re-raises anything a worker raised
        for future in futures:
            future.result()

        return found.is_set()

    @staticmethod
    def _scan_tile(board: Board, color: int, rows: range, cols: range,
                   found: threading.Event):
        for row in rows:
            for col in cols:
                if found.is_set():
                    return
                if Rules.is_winning_cell(board, row, col, color):
                    found.set()
                    return


class ParallelEvaluator(PooledStrategy, Evaluator):
    """
    Evaluator whose streak counting runs the horizontal, vertical and
    diagonal scanners as three concurrent tasks and sums their counts.
    """

    def count_streaks(self, board: Board, color: int, streak: int) -> int:
        """Count streaks of exactly `streak` pieces. Same result as Rules.count_streaks."""
        if color == EMPTY:
            raise NoPlayerSpecifiedError("count the streaks of")

        futures = [
            self.executor.submit(scan, board, color, streak)
            for scan in STREAK_SCANNERS
        ]
        return sum(future.result() for future in futures)
