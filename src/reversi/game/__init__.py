"""
Reversi game module.
This package contains the core rules for Reversi.
"""

from .board import Board
from .exceptions import IllegalMove
from .position import DIRECTIONS, Position
from .tile_state import TileState

__all__ = ['Board', 'IllegalMove', 'Position', 'TileState', 'DIRECTIONS']
