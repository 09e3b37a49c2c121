"""Monsters lurking in the caves."""

from dataclasses import dataclass

from .coordinates import Coordinate

# Arrow hits needed to kill a monster
HITS_TO_KILL = 2


@dataclass
class Monster:
    """A stationary monster. Two arrow hits kill it; one wounds it."""

    location: Coordinate
    hits: int = 0

    @property
    def is_alive(self) -> bool:
        return self.hits < HITS_TO_KILL

    @property
    def is_wounded(self) -> bool:
        return self.hits == 1

    def strike(self, arrow_location: Coordinate) -> bool:
        """Register a hit if the arrow came to rest on this monster."""
        if arrow_location != self.location:
            return False
        self.hits += 1
        return True
