"""
Cell occupancy states.
"""
from enum import IntEnum


class TileState(IntEnum):
    """Occupancy of a single board cell."""
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @property
    def opponent(self) -> 'TileState':
        """The other playing colour."""
        if self is TileState.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return TileState.BLACK if self is TileState.WHITE else TileState.WHITE

    @property
    def symbol(self) -> str:
        """Single-character token used when printing the board."""
        return _SYMBOLS[self]


_SYMBOLS = {TileState.EMPTY: '.', TileState.WHITE: 'W', TileState.BLACK: 'B'}
