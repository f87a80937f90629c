"""
Result values returned by the rules engine.
"""
from collections import namedtuple

from .marks import DRAW

# Reasons a move attempt can be declined
REJECT_GAME_OVER = 'game_over'
REJECT_OUT_OF_RANGE = 'out_of_range'
REJECT_OCCUPIED = 'occupied'


class MatchResult(namedtuple('MatchResult', [
    'winner',   # 'X', 'O' or 'draw'
    'pattern',  # Winning index tuple, None for a draw
])):
    """Terminal result of a game. A game still in progress has no MatchResult."""

    __slots__ = ()

    @property
    def is_draw(self):
        return self.winner == DRAW

    @property
    def message(self):
        """Human-readable announcement for the result."""
        if self.is_draw:
            return "It's a draw"
        return f"Player {self.winner} wins"


class MoveOutcome(namedtuple('MoveOutcome', [
    'accepted',  # Whether the board changed
    'index',     # Requested cell index
    'mark',      # Symbol placed, None if rejected
    'result',    # MatchResult after the move, None if the game continues
    'reason',    # Rejection reason, None if accepted
])):
    """
    Outcome of a single move attempt.

    Rejected moves never change the board or the turn. The outcome is
    truthy only when the move was accepted.
    """

    __slots__ = ()

    def __bool__(self):
        return bool(self.accepted)

    @property
    def is_terminal(self):
        return self.result is not None

    @classmethod
    def rejected(cls, index, reason):
        return cls(False, index, None, None, reason)
