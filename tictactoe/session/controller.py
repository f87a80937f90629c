"""
Session controller for hotseat tic-tac-toe.

Owns the lifecycle of consecutive games on one device: starting, restarting,
replaying with the starting player alternated, and picking which mark the
primary player uses. Presentation layers drive it through commands and
listen to its events; they never touch the engine directly.
"""
from typing import Optional, Tuple

from ..config import GameConfig
from ..core.game import Game
from ..core.marks import from_symbol, normalize_symbol, opposite, to_symbol
from ..core.patterns import generate_patterns
from ..core.results import MatchResult, MoveOutcome
from .events import EventEmitter, CELL_UPDATED, TURN_CHANGED, GAME_OVER, RESET


class Session:
    """
    A sequence of games between two players sharing one device.

    The winning patterns are generated once for the configured grid and
    reused by every game. Each reset replaces the game wholesale.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a session and start its first game.

        Args:
            config: Session configuration (defaults to a 3x3 board, human plays X)
        """
        self.config = config or GameConfig()
        self.patterns = generate_patterns(self.config.rows, self.config.cols,
                                          self.config.win_length)
        self.events = EventEmitter()

        self.human_mark = self.config.human_mark
        self.starting_player = self.human_mark
        self.game: Game = None
        self.reset()

    # Commands

    def reset(self):
        """Start a fresh game with the current starting player."""
        self.game = Game(cell_count=self.config.cell_count,
                         patterns=self.patterns,
                         starting_player=self.starting_player)
        self.events.emit(RESET, self.starting_player)

    def restart(self):
        """Play again with the same starting player."""
        self.reset()

    def replay(self):
        """Play again, giving the first move to the other player."""
        self.starting_player = to_symbol(opposite(from_symbol(self.starting_player)))
        self.reset()

    def choose_mark(self, mark: str):
        """
        Set the primary player's mark. The chosen mark also moves first.

        Raises:
            ValueError: If ``mark`` is not 'X' or 'O'
        """
        mark = normalize_symbol(mark)
        self.human_mark = mark
        self.starting_player = mark
        self.reset()

    def select_cell(self, index: int) -> MoveOutcome:
        """
        Attempt a move for the player whose turn it is.

        Rejected moves leave the session untouched and notify nobody.

        Args:
            index: Cell index

        Returns:
            The engine's MoveOutcome
        """
        outcome = self.game.apply_move(index)
        if not outcome.accepted:
            return outcome

        self.events.emit(CELL_UPDATED, outcome.index, outcome.mark)
        if outcome.result is not None:
            self.events.emit(GAME_OVER, outcome.result)
        else:
            self.events.emit(TURN_CHANGED, self.game.turn)
        return outcome

    # Queries

    @property
    def board(self) -> Tuple[Optional[str], ...]:
        return self.game.board.snapshot()

    @property
    def turn(self) -> str:
        return self.game.turn

    @property
    def over(self) -> bool:
        return self.game.is_over

    @property
    def result(self) -> Optional[MatchResult]:
        return self.game.evaluate()

    @property
    def cell_count(self) -> int:
        return self.config.cell_count

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    def turn_indicator(self) -> str:
        """Label describing whose move it is, from the primary player's view."""
        if self.over:
            return 'Game over'
        whose = 'Your move' if self.turn == self.human_mark else 'Other player'
        return f"Turn: {self.turn} - {whose}"

    def status_message(self) -> str:
        result = self.result
        if self.over and result is not None:
            return result.message
        return f"You are {self.human_mark}"
