"""
Reversi rules engine.
"""

from .game import Board, IllegalMove, Position, TileState

__version__ = "0.1"

__all__ = ['Board', 'IllegalMove', 'Position', 'TileState']
