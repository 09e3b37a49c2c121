"""Breadth-first search over the cave grid."""

import random
from collections import deque

from ..errors import GenerationError
from ..logging import get_logger
from .caves import CaveGrid
from .coordinates import Coordinate

logger = get_logger(__name__)

# Fewest moves allowed between the start and end caves
MIN_PATH_LENGTH = 5


def distances_from(grid: CaveGrid, source: Coordinate) -> dict[Coordinate, int]:
    """Map every cave reachable from source to its distance in moves."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for neighbour in grid.neighbours(current):
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return distances


def shortest_distance(grid: CaveGrid, source: Coordinate, target: Coordinate) -> int | None:
    """Fewest moves from source to target, or None when target is unreachable."""
    return distances_from(grid, source).get(target)


def is_connected(grid: CaveGrid) -> bool:
    """True when every cave can be reached from every other."""
    return len(distances_from(grid, Coordinate(0, 0))) == len(grid)


def select_start_and_end(
    grid: CaveGrid,
    rng: random.Random,
    min_length: int = MIN_PATH_LENGTH,
) -> tuple[Coordinate, Coordinate]:
    """Pick a start and an end cave at least ``min_length`` moves apart.

    Start candidates are tried in shuffled order; for each, the other
    non-tunnel caves are shuffled and the first far enough away wins.
    Raises GenerationError when no pair of non-tunnel caves qualifies.
    """
    candidates = [cave.coordinate for cave in grid.caves_not_tunnels()]
    starts = list(candidates)
    rng.shuffle(starts)

    for start in starts:
        distances = distances_from(grid, start)
        ends = [c for c in candidates if c != start]
        rng.shuffle(ends)
        for end in ends:
            if distances.get(end, -1) >= min_length:
                logger.debug(
                    "start_and_end_selected",
                    start=start,
                    end=end,
                    distance=distances[end],
                )
                return start, end

    raise GenerationError(
        f"No pair of caves at least {min_length} moves apart in a "
        f"{grid.rows}x{grid.columns} grid"
    )
