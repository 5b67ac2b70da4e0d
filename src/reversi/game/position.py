"""
Grid coordinates for the Reversi board.
"""
import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class Position:
    """
    An (x, y) cell coordinate.

    Positions compare and hash by value, so two independently built
    positions with the same coordinates address the same board cell.
    """
    x: int
    y: int

    @classmethod
    def of(cls, value: Union['Position', Tuple[int, int]]) -> 'Position':
        """Build a Position from either a Position or an (x, y) pair."""
        if isinstance(value, Position):
            return value
        x, y = value
        if not is_integral(x) or not is_integral(y):
            raise TypeError(f"Coordinates must be integers, got {value!r}")
        return cls(int(x), int(y))

    def __add__(self, other: 'Position') -> 'Position':
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# The 8 compass directions, (0, 0) excluded
DIRECTIONS = tuple(
    Position(dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if dx != 0 or dy != 0
)
