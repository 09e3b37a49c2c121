"""The player: moving through a dungeon, collecting loot and shooting arrows.

The player holds no references into the grid. Everything it knows about
its surroundings comes from coordinate lookups on the dungeon.
"""

import random
from dataclasses import dataclass, field

from ..errors import DeadPlayerError, InvalidMoveError, InvalidShotError
from ..logging import get_logger
from .arrow import Arrow
from .coordinates import Coordinate, Direction
from .dungeon import Dungeon
from .smell import Smell
from .treasure import Treasure, total_value

logger = get_logger(__name__)

STARTING_ARROWS = 3


@dataclass
class Player:
    """A player exploring a dungeon, starting in its start cave."""

    dungeon: Dungeon
    name: str = "Player"
    rng: random.Random | None = None
    location: Coordinate = field(init=False)
    arrows: list[Arrow] = field(init=False)
    treasure: list[Treasure] = field(init=False)
    is_alive: bool = field(init=False)
    has_won: bool = field(init=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Player name cannot be blank")
        if self.rng is None:
            self.rng = self.dungeon.rng
        self._start_over()

    def _start_over(self) -> None:
        self.location = self.dungeon.start
        self.arrows = [Arrow() for _ in range(STARTING_ARROWS)]
        self.treasure = []
        self.is_alive = True
        self.has_won = False

    def _require_alive(self) -> None:
        if not self.is_alive:
            raise DeadPlayerError(f"{self.name} is dead and cannot act")

    def _resolve(self, target: Direction | Coordinate) -> Coordinate | None:
        if isinstance(target, Direction):
            return self.dungeon.neighbour(self.location, target)
        return target

    # --- Queries ---

    @property
    def arrow_count(self) -> int:
        return len(self.arrows)

    @property
    def treasure_value(self) -> float:
        return total_value(self.treasure)

    @property
    def possible_moves(self) -> list[Coordinate]:
        return self.dungeon.neighbours(self.location)

    @property
    def exits(self) -> dict[Direction, Coordinate]:
        return self.dungeon.exits(self.location)

    def view_treasure(self) -> list[Treasure]:
        return self.dungeon.treasure_at(self.location)

    def sees_arrow(self) -> bool:
        return self.dungeon.has_arrow(self.location)

    def smell(self) -> Smell:
        return self.dungeon.smell(self.location)

    # --- Actions ---

    def move(self, target: Direction | Coordinate) -> Coordinate:
        """Walk into a neighbouring cave and face whatever lives there.

        An unharmed monster always kills the player; a wounded one kills
        it half of the time. Reaching the end cave alive wins the game.
        """
        self._require_alive()
        destination = self._resolve(target)
        if destination is None or destination not in self.possible_moves:
            raise InvalidMoveError(f"Cannot move from {self.location} to {target}")

        self.location = destination
        logger.debug("player_moved", player=self.name, location=destination)

        if self.dungeon.has_monster(destination):
            if self.dungeon.monster_hits(destination) == 0:
                self.is_alive = False
            elif self.rng.randrange(2) == 1:
                self.is_alive = False
            else:
                logger.info("player_escaped", player=self.name, location=destination)

            if not self.is_alive:
                logger.info("player_killed", player=self.name, location=destination)

        if self.is_alive and destination == self.dungeon.end:
            self.has_won = True
            logger.info("player_won", player=self.name, treasure=self.treasure_value)

        return destination

    def pick_up_treasure(self) -> list[Treasure]:
        """Take all treasure in the current cave and return what was taken."""
        self._require_alive()
        taken = self.dungeon.pick_up_treasure(self.location)
        self.treasure.extend(taken)
        return taken

    def pick_up_arrow(self) -> bool:
        self._require_alive()
        arrow = self.dungeon.pick_up_arrow(self.location)
        if arrow is None:
            return False
        self.arrows.append(arrow)
        return True

    def shoot(self, target: Direction | Coordinate, distance: int) -> Coordinate:
        """Shoot an arrow through a neighbouring cave. Returns where it landed.

        The arrow is only used up when the shot itself is valid.
        """
        self._require_alive()
        if not self.arrows:
            raise InvalidShotError(f"{self.name} has no arrows left")
        if target is None:
            raise InvalidShotError("Direction can't be empty")
        through = self._resolve(target)
        if through is None:
            raise InvalidShotError(f"No passage {target.name.lower()} of {self.location}")

        arrow = self.dungeon.shoot_arrow(self.location, through, distance, self.arrows[0])
        self.arrows.pop(0)
        return arrow.location

    def reset(self) -> None:
        """Start over from the start cave, reshuffling the dungeon contents."""
        self.dungeon.reset()
        self._start_over()
        logger.info("player_reset", player=self.name, location=self.location)
