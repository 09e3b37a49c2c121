"""The cave grid: a fixed rows x columns array of caves addressed by Coordinate.

Each cave knows its exits (at most one per compass direction) and what it
currently holds. Exits are wired once by the maze builder and never change;
contents are filled by the placement routines and cleared on reset.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..errors import ConfigurationError
from .arrow import Arrow
from .coordinates import Coordinate, Direction, wrap_offset
from .monster import Monster
from .treasure import Treasure

# A cave with exactly this many exits is a tunnel
TUNNEL_EXITS = 2


@dataclass
class Cave:
    """A location in the grid and everything lying in it."""

    coordinate: Coordinate
    exits: dict[Direction, Coordinate] = field(default_factory=dict)
    treasure: list[Treasure] = field(default_factory=list)
    arrow: Arrow | None = None
    monster: Monster | None = None

    @property
    def neighbours(self) -> list[Coordinate]:
        return [self.exits[d] for d in Direction if d in self.exits]

    @property
    def is_tunnel(self) -> bool:
        return len(self.exits) == TUNNEL_EXITS

    @property
    def has_monster(self) -> bool:
        """True only while the monster here is still alive."""
        return self.monster is not None and self.monster.is_alive

    def link(self, direction: Direction, other: Coordinate) -> None:
        existing = self.exits.get(direction)
        if existing is not None and existing != other:
            raise ValueError(
                f"{self.coordinate} already has a {direction.name.lower()} exit to {existing}"
            )
        self.exits[direction] = other

    def add_treasure(self, treasure: Treasure) -> None:
        if self.is_tunnel:
            raise ValueError(f"Treasure cannot be added to tunnel {self.coordinate}")
        self.treasure.append(treasure)

    def take_treasure(self) -> list[Treasure]:
        taken, self.treasure = self.treasure, []
        return taken

    def add_arrow(self, arrow: Arrow) -> None:
        if self.arrow is not None:
            raise ValueError(f"Arrow already lies in {self.coordinate}")
        self.arrow = arrow

    def take_arrow(self) -> Arrow | None:
        taken, self.arrow = self.arrow, None
        return taken

    def add_monster(self, monster: Monster) -> None:
        if self.monster is not None:
            raise ValueError(f"Monster already present in {self.coordinate}")
        if monster.location != self.coordinate:
            raise ValueError(
                f"Monster at {monster.location} cannot be placed in {self.coordinate}"
            )
        self.monster = monster

    def clear(self) -> None:
        """Empty the cave, leaving its exits untouched."""
        self.treasure = []
        self.arrow = None
        self.monster = None


class CaveGrid:
    """A rows x columns grid of caves, optionally wrapping at the edges."""

    def __init__(self, rows: int, columns: int, wrapping: bool = False):
        if rows <= 0 or columns <= 0:
            raise ConfigurationError(
                f"Rows and columns must be positive, got {rows}x{columns}"
            )
        self.rows = rows
        self.columns = columns
        self.wrapping = wrapping
        self._caves = [
            [Cave(Coordinate(row, column)) for column in range(columns)]
            for row in range(rows)
        ]

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __len__(self) -> int:
        return self.rows * self.columns

    def __iter__(self) -> Iterator[Cave]:
        for row in self._caves:
            yield from row

    def __contains__(self, coordinate: object) -> bool:
        return (
            isinstance(coordinate, Coordinate)
            and coordinate.row < self.rows
            and coordinate.column < self.columns
        )

    def __getitem__(self, coordinate: Coordinate) -> Cave:
        return self.cave(coordinate)

    def cave(self, coordinate: Coordinate) -> Cave:
        if coordinate not in self:
            raise ValueError(
                f"{coordinate} is outside the {self.rows}x{self.columns} grid"
            )
        return self._caves[coordinate.row][coordinate.column]

    def direction_between(self, source: Coordinate, target: Coordinate) -> Direction:
        """Return the compass direction of a grid step from source to target.

        Steps across the grid edge only count when the grid wraps.
        """
        delta_row = target.row - source.row
        delta_column = target.column - source.column
        if self.wrapping:
            delta_row = wrap_offset(delta_row, self.rows)
            delta_column = wrap_offset(delta_column, self.columns)
        try:
            return Direction.from_offset((delta_row, delta_column))
        except ValueError:
            raise ValueError(f"{source} and {target} cannot be adjacent") from None

    def connect(self, first: Coordinate, second: Coordinate) -> None:
        """Open a passage between two neighbouring caves, in both directions."""
        direction = self.direction_between(first, second)
        self.cave(first).link(direction, second)
        self.cave(second).link(direction.opposite, first)

    def neighbours(self, coordinate: Coordinate) -> list[Coordinate]:
        return self.cave(coordinate).neighbours

    def neighbour(self, coordinate: Coordinate, direction: Direction) -> Coordinate | None:
        return self.cave(coordinate).exits.get(direction)

    def is_adjacent(self, source: Coordinate, target: Coordinate) -> bool:
        return target in self.cave(source).exits.values()

    def is_tunnel(self, coordinate: Coordinate) -> bool:
        return self.cave(coordinate).is_tunnel

    def caves_not_tunnels(self) -> list[Cave]:
        return [cave for cave in self if not cave.is_tunnel]

    def edges(self) -> set[frozenset[Coordinate]]:
        """Every open passage as an unordered pair of coordinates."""
        return {
            frozenset((cave.coordinate, other))
            for cave in self
            for other in cave.neighbours
        }

    def clear_contents(self) -> None:
        for cave in self:
            cave.clear()
