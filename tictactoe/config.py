"""
Configuration for a hotseat tic-tac-toe session.
"""
from typing import Dict, Tuple

from .core.marks import normalize_symbol
from .core.patterns import WIN_LENGTH, grid_shape


class GameConfig:
    """Configuration for a game session."""

    def __init__(self,
                 # Board
                 cell_count: int = 9,

                 # Players
                 human_mark: str = 'X'):

        self.rows, self.cols = grid_shape(cell_count)
        self.cell_count = cell_count
        self.human_mark = normalize_symbol(human_mark)

    @property
    def win_length(self) -> int:
        return WIN_LENGTH

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {'cell_count': self.cell_count, 'human_mark': self.human_mark}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict)

    def __repr__(self):
        return (f"GameConfig(cell_count={self.cell_count}, "
                f"human_mark={self.human_mark!r}, shape={self.rows}x{self.cols})")
