"""Grid coordinates and compass directions.

Rows grow southwards and columns grow eastwards, so NORTH of (r, c) is
(r - 1, c) and EAST of it is (r, c + 1).
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Coordinate:
    """An immutable (row, column) position in the cave grid."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.column < 0:
            raise ValueError(f"Coordinate values cannot be negative: {self.row}, {self.column}")

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class Direction(Enum):
    """A compass direction, valued by its (row, column) step."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_offset(cls, offset: tuple[int, int]) -> "Direction":
        """Look up the direction for a unit step, raising ValueError otherwise."""
        return cls(offset)


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def wrap_offset(delta: int, size: int) -> int:
    """Fold a wrap-around difference back onto -1/0/+1.

    A step from the last row to the first shows up as -(size - 1); on a
    toroidal grid that is really +1.
    """
    if delta < -1:
        delta += size
    elif delta > 1:
        delta -= size
    return delta


def offset_between(
    source: Coordinate, target: Coordinate, rows: int, columns: int
) -> tuple[int, int]:
    """Return the normalised (row, column) step leading from source to target."""
    return (
        wrap_offset(target.row - source.row, rows),
        wrap_offset(target.column - source.column, columns),
    )


def step(coordinate: Coordinate, offset: tuple[int, int], rows: int, columns: int) -> Coordinate:
    """Apply an offset to a coordinate, wrapping modulo the grid dimensions."""
    return Coordinate(
        (coordinate.row + offset[0]) % rows,
        (coordinate.column + offset[1]) % columns,
    )
