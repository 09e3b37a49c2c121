"""Scattering arrows, treasure and monsters through a generated grid."""

import random

from ..errors import ConfigurationError
from ..logging import get_logger
from .arrow import Arrow
from .caves import CaveGrid
from .coordinates import Coordinate
from .monster import Monster
from .treasure import all_treasures

logger = get_logger(__name__)


def _share(percent: int, total: int) -> int:
    return int(percent / 100 * total)


def validate_percent(percent: int) -> None:
    if percent <= 0 or percent > 100:
        raise ConfigurationError(f"Percent must be in (0, 100], got {percent}")


def validate_monster_count(monster_count: int) -> None:
    if monster_count <= 0:
        raise ConfigurationError(
            f"Number of monsters must be positive, got {monster_count}"
        )


def place_arrows(grid: CaveGrid, percent: int, rng: random.Random) -> int:
    """Drop one arrow in ``percent`` of all caves, tunnels included."""
    caves = list(grid)
    rng.shuffle(caves)
    count = _share(percent, len(caves))
    for cave in caves[:count]:
        cave.add_arrow(Arrow())
    return count


def place_treasure(grid: CaveGrid, percent: int, rng: random.Random) -> int:
    """Fill ``percent`` of the non-tunnel caves with at least one gem each.

    A cave never holds the whole gem set: it gets between one and eight
    distinct gems, with a single gem twice as likely as any other count.
    """
    caves = grid.caves_not_tunnels()
    rng.shuffle(caves)
    count = _share(percent, len(caves))
    pool = all_treasures()
    for cave in caves[:count]:
        rng.shuffle(pool)
        for treasure in pool[: max(1, rng.randrange(len(pool)))]:
            cave.add_treasure(treasure)
    return count


def place_monsters(
    grid: CaveGrid,
    monster_count: int,
    start: Coordinate,
    end: Coordinate,
    rng: random.Random,
) -> list[Coordinate]:
    """Put a monster in the end cave and the rest in random non-tunnel caves.

    The start cave never gets a monster. Raises ConfigurationError when
    there are not enough non-tunnel caves.
    """
    validate_monster_count(monster_count)
    available = [
        cave
        for cave in grid.caves_not_tunnels()
        if cave.coordinate not in (start, end)
    ]
    if len(available) < monster_count - 1:
        raise ConfigurationError(
            f"{monster_count} monsters do not fit in {len(available) + 1} "
            "available caves"
        )

    grid.cave(end).add_monster(Monster(end))
    rng.shuffle(available)
    lairs = [end]
    for cave in available[: monster_count - 1]:
        cave.add_monster(Monster(cave.coordinate))
        lairs.append(cave.coordinate)
    return lairs


def populate(
    grid: CaveGrid,
    start: Coordinate,
    end: Coordinate,
    percent: int,
    monster_count: int,
    rng: random.Random,
) -> None:
    """Fill an empty grid with treasure, arrows and monsters."""
    validate_percent(percent)
    lairs = place_monsters(grid, monster_count, start, end, rng)
    treasure_caves = place_treasure(grid, percent, rng)
    arrow_caves = place_arrows(grid, percent, rng)
    logger.debug(
        "dungeon_populated",
        treasure_caves=treasure_caves,
        arrow_caves=arrow_caves,
        monsters=lairs,
    )
