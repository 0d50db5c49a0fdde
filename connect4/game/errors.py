"""
Error types raised by the connect-four board and solver.
"""


class Connect4Error(Exception):
    """Base class for every error raised by this package."""


class IllegalMoveError(Connect4Error):
    """A piece could not be placed."""


class ColumnOutOfRangeError(IllegalMoveError, IndexError):
    def __init__(self, column: int, width: int):
        super().__init__(f"Column {column} does not exist on a {width}-wide board")
        self.column = column
        self.width = width


class ColumnFullError(IllegalMoveError):
    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class GameAlreadyOverError(IllegalMoveError):
    def __init__(self):
        super().__init__("Game is over, reset the board before playing any more")


class InvalidCoordinateError(IllegalMoveError, ValueError):
    """Row or column outside the 1-indexed bounds of the board."""


class NoPlayerSpecifiedError(Connect4Error, ValueError):
    def __init__(self, action: str = "use"):
        super().__init__(f"Cannot {action} the empty player")


class InvariantViolation(Connect4Error):
    """Board state that no sequence of legal moves can reach."""


class DoubleWinnerError(InvariantViolation):
    def __init__(self):
        super().__init__("Both players satisfy the win condition")


class InvalidBoardError(Connect4Error, ValueError):
    """Board dimensions or streak length are unusable."""
