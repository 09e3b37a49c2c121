"""How strongly a cave smells of nearby living monsters."""

from enum import Enum

from .caves import CaveGrid
from .coordinates import Coordinate


class Smell(Enum):
    NONE = "none"
    WEAK = "weak"
    STRONG = "strong"


def smell_at(grid: CaveGrid, coordinate: Coordinate) -> Smell:
    """Smell a cave.

    STRONG when a living monster is here or one move away, or when two or
    more are exactly two moves away; WEAK when exactly one is two moves
    away; otherwise NONE.
    """
    if grid.cave(coordinate).has_monster:
        return Smell.STRONG

    near = grid.neighbours(coordinate)
    if any(grid.cave(c).has_monster for c in near):
        return Smell.STRONG

    two_away = {far for c in near for far in grid.neighbours(c)}
    two_away -= {coordinate, *near}
    count = sum(1 for c in two_away if grid.cave(c).has_monster)
    if count >= 2:
        return Smell.STRONG
    if count == 1:
        return Smell.WEAK
    return Smell.NONE
