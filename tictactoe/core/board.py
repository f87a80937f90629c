"""
Board implementation for tic-tac-toe.
"""
import numbers

import numpy as np

from .marks import EMPTY, X, O, to_symbol


class Board:
    """
    Represents a flat tic-tac-toe board of ``cell_count`` cells.

    Board state representation:
    - 0: empty cell
    - 1: X
    - -1: O

    Cells are addressed by row-major index; the grid layout only matters
    to the winning patterns checked against the board.
    """

    def __init__(self, cell_count=9):
        """
        Initialize an empty board.

        Args:
            cell_count (int): Number of cells on the board
        """
        if not isinstance(cell_count, numbers.Integral) or cell_count <= 0:
            raise ValueError(f"Cell count must be a positive integer, got {cell_count!r}")
        self.size = int(cell_count)
        self.state = np.zeros(self.size, dtype=np.int8)

    def is_valid_index(self, index):
        """Check that ``index`` is an integer addressing a cell on this board."""
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            return False
        return 0 <= index < self.size

    def is_empty(self, index):
        return self.is_valid_index(index) and self.state[index] == EMPTY

    def apply_move(self, index, player):
        """
        Apply a move to the board.

        Args:
            index (int): Cell index (0 to size-1)
            player (int): Player (1 for X, -1 for O)

        Returns:
            bool: True if move was applied successfully, False if invalid
        """
        if not self.is_valid_index(index):
            return False

        # A filled cell is never overwritten
        if self.state[index] != EMPTY:
            return False

        if player not in (X, O):
            return False

        self.state[index] = player
        return True

    def get_legal_moves(self):
        """
        Get all empty cell indices.

        Returns:
            list: Indices of empty cells in ascending order
        """
        return [int(i) for i in np.flatnonzero(self.state == EMPTY)]

    def is_full(self):
        return bool(np.all(self.state != EMPTY))

    def snapshot(self):
        """
        Get a read-only view of the board.

        Returns:
            tuple: One entry per cell, 'X', 'O' or None
        """
        return tuple(to_symbol(value) for value in self.state)

    def find_winning_pattern(self, patterns):
        """
        Find the first completed line, in pattern order.

        Patterns holding an index outside the board can never complete and
        are skipped.

        Args:
            patterns (iterable): Index tuples to check

        Returns:
            tuple or None: (player, pattern) for the first completed line
        """
        for pattern in patterns:
            if not all(self.is_valid_index(i) for i in pattern):
                continue

            line = self.state[list(pattern)]
            if line[0] != EMPTY and np.all(line == line[0]):
                return int(line[0]), tuple(pattern)

        return None

