"""
Slot colors and players.
A player is identified by the color of its pieces; EMPTY is also "no player".
"""

from .errors import NoPlayerSpecifiedError

EMPTY = 0
RED = 1
YELLOW = 2

PLAYERS = (RED, YELLOW)

SYMBOLS = {EMPTY: '_', RED: 'R', YELLOW: 'Y'}
NAMES = {EMPTY: 'None', RED: 'Red', YELLOW: 'Yellow'}


def opposite(color: int) -> int:
    """Get the opponent of a player."""
    if color == RED:
        return YELLOW
    if color == YELLOW:
        return RED
    raise NoPlayerSpecifiedError("find the opponent of")
