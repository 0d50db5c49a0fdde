from .colors import EMPTY, RED, YELLOW, opposite
from .board import Board
from .rules import Rules
from .errors import (
    Connect4Error, IllegalMoveError, ColumnOutOfRangeError, ColumnFullError,
    GameAlreadyOverError, InvalidCoordinateError, NoPlayerSpecifiedError,
    InvariantViolation, DoubleWinnerError, InvalidBoardError
)

__all__ = [
    'Board', 'Rules', 'EMPTY', 'RED', 'YELLOW', 'opposite',
    'Connect4Error', 'IllegalMoveError', 'ColumnOutOfRangeError', 'ColumnFullError',
    'GameAlreadyOverError', 'InvalidCoordinateError', 'NoPlayerSpecifiedError',
    'InvariantViolation', 'DoubleWinnerError', 'InvalidBoardError',
]
