"""
Connect-four rules implementation.
Win detection and exact-length streak counting. Every scan is bounded by the
board edges; nothing wraps around to the next row or column.
"""

from typing import TYPE_CHECKING

from .colors import EMPTY
from .errors import NoPlayerSpecifiedError

if TYPE_CHECKING:
    from .board import Board

# Directions checked from the first cell of a winning line: (d_row, d_col)
WIN_DIRECTIONS = [
    (0, 1),    # horizontal →
    (1, 0),    # vertical ↑
    (1, 1),    # diagonal ↗
    (1, -1),   # diagonal ↖
]

# Directions walked from each origin cell when counting diagonal streaks
DIAGONAL_DIRECTIONS = [
    (-1, 1),   # down-right ↘
    (-1, -1),  # down-left ↙
]


def _count_exact_runs(line, color: int, streak: int) -> int:
    """
    Count runs of `color` in a sequence whose total length is exactly `streak`.
    A run is only judged when it ends, so a run of 5 never counts as a 4.
    """
    count = 0
    current = 0
    for slot in line:
        if slot == color:
            current += 1
        else:
            if current == streak:
                count += 1
            current = 0
    if current == streak:
        count += 1
    return count


class Rules:
    """Win detection and streak counting for a connect-four board."""

    @staticmethod
    def has_line_from(board: 'Board', row: int, col: int, color: int,
                      d_row: int, d_col: int) -> bool:
        """
        Check for win_length consecutive pieces of `color` starting at (row, col)
        and stepping by (d_row, d_col).
        """
        length = board.win_length
        if not board.is_valid_pos(row + (length - 1) * d_row,
                                  col + (length - 1) * d_col):
            return False

        cells = board.cells
        width = board.width
        for i in range(length):
            if cells[(row + i * d_row) * width + col + i * d_col] != color:
                return False
        return True

    @staticmethod
    def is_winning_cell(board: 'Board', row: int, col: int, color: int) -> bool:
        """Check if a winning line of `color` starts at (row, col)."""
        if board.cells[row * board.width + col] != color:
            return False
        for d_row, d_col in WIN_DIRECTIONS:
            if Rules.has_line_from(board, row, col, color, d_row, d_col):
                return True
        return False

    @staticmethod
    def is_winner(board: 'Board', color: int) -> bool:
        """Check if `color` has win_length in a row anywhere on the board."""
        if color == EMPTY:
            raise NoPlayerSpecifiedError("check the win condition of")

        for row in range(board.height):
            for col in range(board.width):
                if Rules.is_winning_cell(board, row, col, color):
                    return True
        return False

    @staticmethod
    def count_horizontal_streaks(board: 'Board', color: int, streak: int) -> int:
        """Count row runs of exactly `streak` pieces."""
        width = board.width
        return sum(
            _count_exact_runs(board.cells[row * width:(row + 1) * width], color, streak)
            for row in range(board.height)
        )

    @staticmethod
    def count_vertical_streaks(board: 'Board', color: int, streak: int) -> int:
        """Count column runs of exactly `streak` pieces."""
        width = board.width
        return sum(
            _count_exact_runs(board.cells[col::width], color, streak)
            for col in range(width)
        )

    @staticmethod
    def count_diagonal_streaks(board: 'Board', color: int, streak: int) -> int:
        """
        Count diagonal runs of exactly `streak` pieces.

        Each piece of `color` walks down-right and down-left. A walk only
        starts at the first piece of a run (the cell behind it holds something
        else), so every maximal run is counted at most once per direction.
        """
        count = 0
        for row in range(board.height):
            for col in range(board.width):
                if board.get(row, col) != color:
                    continue

                for d_row, d_col in DIAGONAL_DIRECTIONS:
                    prev_r, prev_c = row - d_row, col - d_col
                    if board.is_valid_pos(prev_r, prev_c) and board.get(prev_r, prev_c) == color:
                        continue

                    length = 1
                    r, c = row + d_row, col + d_col
                    while board.is_valid_pos(r, c) and board.get(r, c) == color:
                        length += 1
                        r, c = r + d_row, c + d_col

                    if length == streak:
                        count += 1
        return count

    @staticmethod
    def count_streaks(board: 'Board', color: int, streak: int) -> int:
        """Count streaks of exactly `streak` pieces in all four directions."""
        if color == EMPTY:
            raise NoPlayerSpecifiedError("count the streaks of")

        return (Rules.count_horizontal_streaks(board, color, streak) +
                Rules.count_vertical_streaks(board, color, streak) +
                Rules.count_diagonal_streaks(board, color, streak))
