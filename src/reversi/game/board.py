"""
Board module for Reversi.
Handles the board grid, the directional capture scan, move validation and
move application.
"""
import logging
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple, Union

import numpy as np

from .exceptions import IllegalMove
from .position import DIRECTIONS, Position, is_integral
from .tile_state import TileState

logger = logging.getLogger(__name__)

PositionLike = Union[Position, Tuple[int, int]]


def _as_position(value) -> Optional[Position]:
    try:
        position = Position.of(value)
    except (TypeError, ValueError):
        return None
    if not is_integral(position.x) or not is_integral(position.y):
        return None
    return position


def _as_colour(value) -> Optional[TileState]:
    try:
        return TileState(value)
    except (TypeError, ValueError):
        return None


class Board:
    """
    Represents a square Reversi board as a mapping of Position -> TileState.
    Every in-range position always has a state; nothing outside the grid
    is ever stored.
    """

    DEFAULT_SIZE = 8

    def __init__(self, size: int = DEFAULT_SIZE):
        """
        Initialize a new board with the four centre pieces placed.

        Args:
            size: Side length of the board, a positive even integer
        """
        if not isinstance(size, int) or size <= 0 or size % 2 != 0:
            raise ValueError(f"Board size must be a positive even integer, got {size!r}")

        self.size = size
        self._cells: Dict[Position, TileState] = {
            Position(x, y): TileState.EMPTY
            for y in range(size)
            for x in range(size)
        }

        mid = size // 2
        self._cells[Position(mid - 1, mid - 1)] = TileState.WHITE
        self._cells[Position(mid, mid)] = TileState.WHITE
        self._cells[Position(mid - 1, mid)] = TileState.BLACK
        self._cells[Position(mid, mid - 1)] = TileState.BLACK

    @property
    def width(self) -> int:
        return self.size

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board(self.size)
        new_board._cells = dict(self._cells)
        return new_board

    def __contains__(self, position: PositionLike) -> bool:
        position = _as_position(position)
        if position is None:
            return False
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def __getitem__(self, position: PositionLike) -> TileState:
        position = Position.of(position)
        if position not in self:
            raise IndexError(f"Position {position} is outside a {self.size}x{self.size} board")
        return self._cells[position]

    def __iter__(self) -> Iterator[Position]:
        """Iterate over positions row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield Position(x, y)

    def _captured_in_direction(self, start: Position, delta: Position,
                               colour: TileState) -> List[Position]:
        """
        Walk from start along delta until leaving the board, reaching an
        empty cell, or reaching a cell of the capturing colour. Only the
        last case captures the traversed run.
        """
        traversed = []
        current = start + delta
        while current in self:
            state = self._cells[current]
            if state == TileState.EMPTY:
                return []
            if state == colour:
                return traversed
            traversed.append(current)
            current = current + delta
        return []

    def captured_pieces(self, position: PositionLike, colour: TileState) -> FrozenSet[Position]:
        """
        Get the set of pieces that would be flipped by placing colour at
        position. Does not modify the board.

        Args:
            position: Target cell
            colour: Colour of the piece being placed

        Returns:
            Union of the captured runs over all 8 directions
        """
        position = _as_position(position)
        colour = _as_colour(colour)
        if position is None or colour is None or position not in self:
            return frozenset()

        captured: Set[Position] = set()
        for delta in DIRECTIONS:
            captured.update(self._captured_in_direction(position, delta, colour))
        return frozenset(captured)

    def is_legal_move(self, position: PositionLike, colour: TileState) -> bool:
        """A move is legal if the cell is empty and a capture would result."""
        position = _as_position(position)
        if position is None or position not in self or self._cells[position] != TileState.EMPTY:
            return False
        return bool(self.captured_pieces(position, colour))

    def take_move(self, position: PositionLike, colour: TileState) -> None:
        """
        Place colour at position and flip every captured piece.

        Args:
            position: Target cell
            colour: Colour of the piece being placed

        Raises:
            IllegalMove: if the move is not legal; the board is left untouched
        """
        target = _as_position(position)
        tile = _as_colour(colour)
        if target is None or tile is None or not self.is_legal_move(target, tile):
            logger.debug("Rejected move %s for %r", position, colour)
            raise IllegalMove(target if target is not None else position, tile)

        captured = self.captured_pieces(target, tile)
        for piece in captured:
            self._cells[piece] = tile
        self._cells[target] = tile
        logger.debug("%s played %s, flipped %d", tile.name, target, len(captured))

    def legal_moves(self, colour: TileState) -> List[Position]:
        """
        Get all legal moves for the given colour.

        Returns:
            Positions sorted by (y, x)
        """
        return [position for position in self if self.is_legal_move(position, colour)]

    def has_legal_move(self, colour: TileState) -> bool:
        return any(self.is_legal_move(position, colour) for position in self)

    def count(self, colour: TileState) -> int:
        return sum(1 for state in self._cells.values() if state == colour)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.count(TileState.BLACK), self.count(TileState.WHITE)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [y, x] holding TileState values
        """
        board = np.zeros((self.size, self.size), dtype=int)
        for position, state in self._cells.items():
            board[position.y, position.x] = int(state)
        return board

    def dump(self) -> str:
        """Render the board row by row, one token per cell."""
        rows = []
        for y in range(self.size):
            row = [self._cells[Position(x, y)].symbol for x in range(self.size)]
            rows.append("-- " + ' '.join(row))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.dump()
