"""
Winning-line enumeration for rectangular tic-tac-toe grids.
"""
import math
import numbers
from typing import Tuple

WIN_LENGTH = 3

Pattern = Tuple[int, ...]


def grid_shape(cell_count: int) -> Tuple[int, int]:
    """
    Derive the (rows, cols) layout used for a board with the given cell count.

    12 cells are laid out 3x4 and 9 cells 3x3. Any other count uses a
    near-square grid that may hold more positions than the board has cells.

    Args:
        cell_count: Number of playable cells

    Returns:
        (rows, cols) with rows * cols >= cell_count
    """
    if isinstance(cell_count, bool) or not isinstance(cell_count, numbers.Integral) or cell_count <= 0:
        raise ValueError(f"Cell count must be a positive integer, got {cell_count!r}")

    if cell_count == 12:
        return (3, 4)
    if cell_count == 9:
        return (3, 3)

    rows = math.ceil(math.sqrt(cell_count))
    cols = math.ceil(cell_count / rows)
    return (rows, cols)


def generate_patterns(rows: int, cols: int, win_len: int = WIN_LENGTH) -> Tuple[Pattern, ...]:
    """
    Enumerate every straight line of ``win_len`` cells on a rows x cols grid.

    Lines are emitted in a fixed order: horizontal, vertical, diagonal
    down-right, then diagonal down-left. Indices are row-major.

    Args:
        rows: Number of grid rows
        cols: Number of grid columns
        win_len: Length of a winning line

    Returns:
        Tuple of index tuples, one per winning line
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
    if win_len < 1:
        raise ValueError(f"Win length must be positive, got {win_len}")

    patterns = []

    # Horizontal
    for r in range(rows):
        for c in range(cols - win_len + 1):
            patterns.append(tuple(r * cols + c + k for k in range(win_len)))

    # Vertical
    for c in range(cols):
        for r in range(rows - win_len + 1):
            patterns.append(tuple((r + k) * cols + c for k in range(win_len)))

    # Diagonal (↘)
    for r in range(rows - win_len + 1):
        for c in range(cols - win_len + 1):
            patterns.append(tuple((r + k) * cols + (c + k) for k in range(win_len)))

    # Anti-diagonal (↙)
    for r in range(rows - win_len + 1):
        for c in range(win_len - 1, cols):
            patterns.append(tuple((r + k) * cols + (c - k) for k in range(win_len)))

    return tuple(patterns)


def patterns_for_cells(cell_count: int, win_len: int = WIN_LENGTH) -> Tuple[Pattern, ...]:
    """Generate the winning patterns for a board of ``cell_count`` cells."""
    rows, cols = grid_shape(cell_count)
    return generate_patterns(rows, cols, win_len)
