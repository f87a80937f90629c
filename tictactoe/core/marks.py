"""
Mark encoding for the tic-tac-toe board.

Board cells are stored as small integers:
- 0: empty cell
- 1: X
- -1: O
"""

EMPTY = 0
X = 1
O = -1

DRAW = 'draw'

_SYMBOLS = {X: 'X', O: 'O'}
_VALUES = {'X': X, 'O': O}


def opposite(player):
    """Return the other player (1 <-> -1)."""
    return -player


def to_symbol(player):
    """
    Convert a stored cell value to its public symbol.

    Args:
        player (int): Cell value (1, -1 or 0)

    Returns:
        str or None: 'X', 'O', or None for an empty cell
    """
    return _SYMBOLS.get(int(player))


def from_symbol(symbol):
    """
    Convert a mark symbol ('X' or 'O', case-insensitive) to its cell value.

    Raises:
        ValueError: If the symbol is not a mark
    """
    if isinstance(symbol, str) and symbol.upper() in _VALUES:
        return _VALUES[symbol.upper()]
    raise ValueError(f"Unknown mark: {symbol!r} (expected 'X' or 'O')")


def normalize_symbol(symbol):
    """Return the canonical upper-case symbol for a mark."""
    return to_symbol(from_symbol(symbol))
