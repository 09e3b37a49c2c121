"""Crooked arrows and their flight through the caves.

An arrow flies straight, except that it follows the bend of any tunnel
(a cave with exactly two exits) it passes through. Caves with one, three
or four exits do not turn it. On a wrapping grid it crosses the edges.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import InvalidShotError
from ..logging import get_logger
from .coordinates import Coordinate, offset_between, step

if TYPE_CHECKING:
    from .caves import CaveGrid

logger = get_logger(__name__)


@dataclass(eq=False)
class Arrow:
    """An arrow. Lying in a cave or in a quiver it has no location.

    Once shot, ``location`` tracks where it came to rest and ``travelled``
    how many caves it crossed on the way.
    """

    location: Coordinate | None = None
    travelled: int = 0

    def shoot(
        self,
        grid: "CaveGrid",
        source: Coordinate,
        target: Coordinate,
        distance: int,
    ) -> bool:
        """Shoot from ``source`` through the neighbouring cave ``target``.

        The arrow must cover exactly ``distance`` caves to hit anything; if
        it runs into a wall first it drops where it is. Returns True when a
        monster was struck.
        """
        if distance <= 0:
            raise InvalidShotError(f"Distance must be positive, got {distance}")
        if source is None or target is None:
            raise InvalidShotError("Source and target must be given")
        if source not in grid or not grid.is_adjacent(source, target):
            raise InvalidShotError(f"No passage from {source} to {target}")

        rows, columns = grid.dimensions
        current = source
        following = target
        offset = offset_between(current, following, rows, columns)
        travelled = 0

        for _ in range(distance):
            if not grid.is_adjacent(current, following):
                break
            if grid.is_tunnel(following):
                bend = [c for c in grid.neighbours(following) if c != current][0]
                offset = offset_between(following, bend, rows, columns)
                current, following = following, bend
            else:
                current = following
                following = step(following, offset, rows, columns)
            travelled += 1

        self.location = current
        self.travelled = travelled

        struck = False
        if travelled == distance:
            monster = grid.cave(current).monster
            if monster is not None:
                struck = monster.strike(current)

        logger.debug(
            "arrow_shot",
            source=source,
            target=target,
            distance=distance,
            travelled=travelled,
            landed=current,
            struck=struck,
        )
        return struck
