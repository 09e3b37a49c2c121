"""The dungeon: a generated cave grid with its start, end and contents.

This is the surface callers build and query. Adjacency, start and end are
fixed at construction; ``reset`` only reshuffles what lies in the caves.
"""

import random

from ..config import Config
from ..errors import ConfigurationError
from ..logging import get_logger
from .arrow import Arrow
from .caves import CaveGrid
from .coordinates import Coordinate, Direction
from .maze import build_maze
from .paths import select_start_and_end, shortest_distance
from .placement import populate, validate_monster_count, validate_percent
from .smell import Smell, smell_at
from .treasure import Treasure

logger = get_logger(__name__)


class Dungeon:
    """A connected grid of caves holding treasure, arrows and monsters."""

    def __init__(
        self,
        rows: int,
        columns: int,
        interconnectivity: int = 0,
        wrapping: bool = False,
        percent: int = 50,
        monster_count: int = 1,
        rng: random.Random | None = None,
    ):
        if rows <= 0 or columns <= 0:
            raise ConfigurationError(
                f"Rows and columns must be positive, got {rows}x{columns}"
            )
        if interconnectivity < 0:
            raise ConfigurationError(
                f"Interconnectivity cannot be negative, got {interconnectivity}"
            )
        validate_percent(percent)
        validate_monster_count(monster_count)

        self.rng = rng if rng is not None else random.Random()
        self.interconnectivity = interconnectivity
        self.percent = percent
        self.monster_count = monster_count

        self.grid: CaveGrid = build_maze(
            rows, columns, interconnectivity, wrapping, self.rng
        )
        self._start, self._end = select_start_and_end(self.grid, self.rng)
        populate(self.grid, self._start, self._end, percent, monster_count, self.rng)

        logger.info(
            "dungeon_generated",
            rows=rows,
            columns=columns,
            interconnectivity=interconnectivity,
            wrapping=wrapping,
            start=self._start,
            end=self._end,
        )

    @classmethod
    def from_config(cls, config: Config) -> "Dungeon":
        return new_dungeon(
            config.rows,
            config.columns,
            config.interconnectivity,
            config.wrapping,
            config.percent,
            config.monster_count,
            seed=config.seed,
        )

    # --- Layout ---

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def columns(self) -> int:
        return self.grid.columns

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.grid.dimensions

    @property
    def wrapping(self) -> bool:
        return self.grid.wrapping

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def end(self) -> Coordinate:
        return self._end

    def neighbours(self, coordinate: Coordinate) -> list[Coordinate]:
        return self.grid.neighbours(coordinate)

    def neighbour(self, coordinate: Coordinate, direction: Direction) -> Coordinate | None:
        """The cave reached by leaving ``coordinate`` in ``direction``, if any."""
        return self.grid.neighbour(coordinate, direction)

    def exits(self, coordinate: Coordinate) -> dict[Direction, Coordinate]:
        return dict(self.grid.cave(coordinate).exits)

    def is_tunnel(self, coordinate: Coordinate) -> bool:
        return self.grid.is_tunnel(coordinate)

    def distance(self, source: Coordinate, target: Coordinate) -> int | None:
        return shortest_distance(self.grid, source, target)

    # --- Contents ---

    def treasure_at(self, coordinate: Coordinate) -> list[Treasure]:
        return list(self.grid.cave(coordinate).treasure)

    def pick_up_treasure(self, coordinate: Coordinate) -> list[Treasure]:
        """Remove and return all treasure lying in a cave."""
        return self.grid.cave(coordinate).take_treasure()

    def has_arrow(self, coordinate: Coordinate) -> bool:
        return self.grid.cave(coordinate).arrow is not None

    def pick_up_arrow(self, coordinate: Coordinate) -> Arrow | None:
        """Remove and return the arrow lying in a cave, or None if there is none."""
        return self.grid.cave(coordinate).take_arrow()

    def has_monster(self, coordinate: Coordinate) -> bool:
        """True when a living monster occupies the cave."""
        return self.grid.cave(coordinate).has_monster

    def monster_hits(self, coordinate: Coordinate) -> int:
        monster = self.grid.cave(coordinate).monster
        return monster.hits if monster is not None else 0

    def smell(self, coordinate: Coordinate) -> Smell:
        return smell_at(self.grid, coordinate)

    # --- Actions ---

    def shoot_arrow(
        self,
        source: Coordinate,
        target: Coordinate,
        distance: int,
        arrow: Arrow | None = None,
    ) -> Arrow:
        """Shoot an arrow and register any strike. Returns the spent arrow."""
        arrow = arrow if arrow is not None else Arrow()
        if arrow.shoot(self.grid, source, target, distance):
            monster = self.grid.cave(arrow.location).monster
            logger.info(
                "monster_hit",
                location=arrow.location,
                hits=monster.hits,
                killed=not monster.is_alive,
            )
        return arrow

    def reset(self) -> None:
        """Clear every cave and scatter fresh contents over the same maze."""
        self.grid.clear_contents()
        populate(
            self.grid,
            self._start,
            self._end,
            self.percent,
            self.monster_count,
            self.rng,
        )
        logger.info("dungeon_reset", start=self._start, end=self._end)


def new_dungeon(
    rows: int,
    columns: int,
    interconnectivity: int = 0,
    wrapping: bool = False,
    percent: int = 50,
    monster_count: int = 1,
    seed: int | None = None,
) -> Dungeon:
    """Build a dungeon whose randomness is driven by ``seed``."""
    return Dungeon(
        rows,
        columns,
        interconnectivity,
        wrapping,
        percent,
        monster_count,
        rng=random.Random(seed),
    )
