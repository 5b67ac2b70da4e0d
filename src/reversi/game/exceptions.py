"""
Errors raised by the rules engine.
"""
from typing import Optional

from .position import Position
from .tile_state import TileState


class IllegalMove(Exception):
    """Raised when a move is taken that the rules do not allow."""

    def __init__(self, position: Position, colour: Optional[TileState] = None):
        self.position = position
        self.colour = colour
        message = f"Illegal move at {position}"
        if colour is not None:
            message += f" for {colour.name}"
        super().__init__(message)
