"""
Rules engine for a single tic-tac-toe game.
"""
from .board import Board
from .marks import DRAW, opposite, to_symbol, from_symbol
from .patterns import patterns_for_cells
from .results import (
    MatchResult,
    MoveOutcome,
    REJECT_GAME_OVER,
    REJECT_OUT_OF_RANGE,
    REJECT_OCCUPIED,
)


class Game:
    """
    Manages one tic-tac-toe game.

    Handles turn management and win/draw detection on top of the board.
    A finished game stays finished; the session starts a new Game to play
    again.
    """

    def __init__(self, cell_count=9, patterns=None, starting_player='X'):
        """
        Initialize a new game.

        Args:
            cell_count (int): Number of cells on the board
            patterns (tuple, optional): Winning patterns to check. Generated
                from the grid shape of ``cell_count`` when omitted.
            starting_player (str): Mark that moves first ('X' or 'O')
        """
        self.board = Board(cell_count)
        self.patterns = patterns if patterns is not None else patterns_for_cells(cell_count)
        self.current_player = from_symbol(starting_player)
        self._winner = None
        self._is_draw = False

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self._winner is not None:
            return 'win'
        elif self._is_draw:
            return 'draw'
        else:
            return 'ongoing'

    @property
    def is_over(self):
        return self.game_state != 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            str or None: 'X' or 'O', None if nobody has won
        """
        if self._winner is None:
            return None
        return to_symbol(self._winner)

    @property
    def turn(self):
        """Symbol of the player to move."""
        return to_symbol(self.current_player)

    def evaluate(self):
        """
        Compute the result of the current position.

        The first completed pattern in generation order decides the winner,
        so a move completing two lines at once still reports one pattern.

        Returns:
            MatchResult or None: None while the game continues
        """
        match = self.board.find_winning_pattern(self.patterns)
        if match is not None:
            player, pattern = match
            return MatchResult(to_symbol(player), pattern)

        if self.board.is_full():
            return MatchResult(DRAW, None)

        return None

    def apply_move(self, index):
        """
        Make a move for the current player.

        Invalid moves are declined without touching the board or the turn.

        Args:
            index (int): Cell index

        Returns:
            MoveOutcome: Accepted outcome with the resulting MatchResult, or
            a rejected outcome carrying the reason
        """
        if self.is_over:
            return MoveOutcome.rejected(index, REJECT_GAME_OVER)

        if not self.board.is_valid_index(index):
            return MoveOutcome.rejected(index, REJECT_OUT_OF_RANGE)

        player = self.current_player
        if not self.board.apply_move(index, player):
            return MoveOutcome.rejected(index, REJECT_OCCUPIED)

        result = self.evaluate()
        if result is None:
            # Game continues, switch to next player
            self.current_player = opposite(player)
        elif result.is_draw:
            self._is_draw = True
        else:
            self._winner = player

        return MoveOutcome(True, int(index), to_symbol(player), result, None)
