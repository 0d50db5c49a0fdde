"""
Connect-four board.
Gravity-drop grid stored as a flat row-major list, row 0 at the bottom.
"""

import logging

from .colors import EMPTY, RED, YELLOW, SYMBOLS, NAMES
from .errors import (
    ColumnOutOfRangeError, ColumnFullError, GameAlreadyOverError,
    InvalidCoordinateError, DoubleWinnerError, InvalidBoardError
)
from .rules import Rules

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
DEFAULT_WIN_LENGTH = 4


class Board:
    """
    Connect-four board state.

    Tracks the slot of every cell, the next free row of every column and the
    game-over/winner flags. Win detection is delegated to `win_detector`
    (anything with an `is_winner(board, color)` method), so a parallel
    detector can be swapped in without changing the board.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 win_length: int = DEFAULT_WIN_LENGTH, win_detector=None):
        if width < 1 or height < 1:
            raise InvalidBoardError(f"Board must be at least 1x1, got {width}x{height}")
        if not 2 <= win_length <= min(width, height):
            raise InvalidBoardError(
                f"Winning streak {win_length} does not fit a {width}x{height} board"
            )

        self.width = width
        self.height = height
        self.win_length = win_length
        self.win_detector = win_detector if win_detector is not None else Rules

        self.cells = [EMPTY] * (width * height)
        self.column_height = [0] * width  # Next free row per column
        self.is_game_over = False
        self.winner = EMPTY

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_valid_pos(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def to_index(self, row: int, col: int) -> int:
        """Convert (row, col) to cell index."""
        return row * self.width + col

    def to_row_col(self, index: int) -> tuple:
        """Convert cell index to (row, col)."""
        return (index // self.width, index % self.width)

    def get(self, row: int, col: int) -> int:
        """Get slot at position. Returns EMPTY, RED, or YELLOW."""
        if not self.is_valid_pos(row, col):
            return EMPTY
        return self.cells[row * self.width + col]

    def place(self, column: int, color: int):
        """
        Drop a piece of `color` into a 0-indexed column.
        Returns the cell index the piece landed on.

        Raises GameAlreadyOverError, ColumnOutOfRangeError or ColumnFullError,
        leaving the board untouched. On success only the mover is checked for
        a win, since the opponent cannot have won with this move.
        """
        if self.is_game_over:
            logger.debug("Rejected move in column %d: game is over", column)
            raise GameAlreadyOverError()
        if not 0 <= column < self.width:
            logger.debug("Rejected move in column %d: out of range", column)
            raise ColumnOutOfRangeError(column, self.width)
        if self.column_height[column] >= self.height:
            logger.debug("Rejected move in column %d: column full", column)
            raise ColumnFullError(column)

        index = self.to_index(self.column_height[column], column)
        self.cells[index] = color
        self.column_height[column] += 1

        is_winner = self.is_winner(color)
        if is_winner:
            self.winner = color
        self.is_game_over = is_winner or self.is_full()

        return index

    def play_move(self, column: int, color: int) -> int:
        """
        Drop a piece into a 1-indexed column.
        Returns the cell index the piece landed on.
        """
        if not 1 <= column <= self.width:
            logger.debug("Rejected column %d: outside 1..%d", column, self.width)
            raise InvalidCoordinateError(
                f"Column must be between 1 and {self.width}, got {column}"
            )
        return self.place(column - 1, color)

    def check_index(self, index: int):
        """Reject cell indices outside 0..size-1; negative ones would wrap."""
        if not 0 <= index < self.size:
            raise InvalidCoordinateError(
                f"Cell index must be between 0 and {self.size - 1}, got {index}"
            )

    def set_cell(self, index: int, color: int):
        """
        Put a piece directly on a cell, bypassing the column bookkeeping.
        Used by search together with undo().
        """
        self.check_index(index)
        self.cells[index] = color

    def undo(self, index: int):
        """Empty a cell set by set_cell(). Column heights are not touched."""
        self.check_index(index)
        self.cells[index] = EMPTY

    def is_legal_move(self, index: int) -> bool:
        """A cell is playable if it is empty and resting on the floor or a piece."""
        self.check_index(index)
        if self.cells[index] != EMPTY:
            return False
        if index < self.width:
            return True
        return self.cells[index - self.width] != EMPTY

    def legal_cells(self) -> list:
        """Get playable cells in descending index order."""
        return [i for i in range(self.size - 1, -1, -1) if self.is_legal_move(i)]

    def is_winner(self, color: int) -> bool:
        """Check if `color` has a winning line."""
        return self.win_detector.is_winner(self, color)

    def determine_winner(self) -> int:
        """
        Returns RED, YELLOW, or EMPTY (no winner).
        Two winners at once means the board was corrupted.
        """
        red_wins = self.is_winner(RED)
        yellow_wins = self.is_winner(YELLOW)
        if red_wins and yellow_wins:
            logger.error("Both players have a winning line:\n%s", self.render())
            raise DoubleWinnerError()
        if red_wins:
            return RED
        if yellow_wins:
            return YELLOW
        return EMPTY

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return EMPTY not in self.cells

    def count_empty(self) -> int:
        """Count empty cells."""
        return self.cells.count(EMPTY)

    def count_pieces(self, color: int) -> int:
        """Count pieces of a color."""
        return self.cells.count(color)

    def reset(self):
        """Clear the board in place."""
        self.cells[:] = [EMPTY] * self.size
        self.column_height[:] = [0] * self.width
        self.winner = EMPTY
        self.is_game_over = False

    def render(self) -> str:
        """Diagnostic dump, top row first. Rows and columns are numbered from 1."""
        lines = ['Current Board:', '']
        lines.append('  ' + ' '.join(str(col + 1) for col in range(self.width)))

        for label, row in enumerate(range(self.height - 1, -1, -1), start=1):
            slots = ' '.join(SYMBOLS[self.get(row, col)] for col in range(self.width))
            lines.append(f'{label} {slots}')

        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f'Board({self.width}x{self.height}, win_length={self.win_length}, '
                f'winner={NAMES[self.winner]}, game_over={self.is_game_over})')
