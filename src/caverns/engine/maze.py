"""Maze generation: a randomised Kruskal spanning tree plus extra passages.

Every grid-adjacent pair of caves (and, on a wrapping grid, every pair of
opposite border caves) is a candidate passage. Candidates are taken in
random order and kept only when they join two separate parts of the maze,
which yields a spanning tree. ``interconnectivity`` of the rejected
candidates are then opened as well, creating loops.
"""

import random

from ..errors import ConfigurationError
from ..logging import get_logger
from .caves import CaveGrid
from .coordinates import Coordinate

logger = get_logger(__name__)

Edge = tuple[Coordinate, Coordinate]


class DisjointSet:
    """Union-find over coordinates, with path halving and union by size."""

    def __init__(self, items=()):
        self._parent: dict[Coordinate, Coordinate] = {}
        self._size: dict[Coordinate, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: Coordinate) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1

    def find(self, item: Coordinate) -> Coordinate:
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, first: Coordinate, second: Coordinate) -> bool:
        """Merge the sets holding both items. False if they already shared one."""
        root_a, root_b = self.find(first), self.find(second)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        return True

    def connected(self, first: Coordinate, second: Coordinate) -> bool:
        return self.find(first) == self.find(second)


def candidate_edges(rows: int, columns: int, wrapping: bool) -> list[Edge]:
    """List every possible passage once, in row-major order.

    Wrap-around pairs that collapse onto a single cave (a 1-wide dimension)
    or repeat an interior pair (a 2-wide dimension) are left out.
    """
    edges: list[Edge] = []
    for row in range(rows):
        for column in range(columns):
            here = Coordinate(row, column)
            if row + 1 < rows:
                edges.append((here, Coordinate(row + 1, column)))
            if column + 1 < columns:
                edges.append((here, Coordinate(row, column + 1)))

    if wrapping:
        seen = {frozenset(edge) for edge in edges}
        wrap_edges = [
            (Coordinate(0, column), Coordinate(rows - 1, column))
            for column in range(columns)
        ] + [
            (Coordinate(row, 0), Coordinate(row, columns - 1))
            for row in range(rows)
        ]
        for first, second in wrap_edges:
            key = frozenset((first, second))
            if first == second or key in seen:
                continue
            seen.add(key)
            edges.append((first, second))
    return edges


def build_maze(
    rows: int,
    columns: int,
    interconnectivity: int,
    wrapping: bool,
    rng: random.Random,
) -> CaveGrid:
    """Generate a connected cave grid.

    Raises ConfigurationError for non-positive dimensions, negative
    interconnectivity, or more interconnectivity than there are leftover
    candidate passages.
    """
    if interconnectivity < 0:
        raise ConfigurationError(
            f"Interconnectivity cannot be negative, got {interconnectivity}"
        )
    grid = CaveGrid(rows, columns, wrapping)

    edges = candidate_edges(rows, columns, wrapping)
    rng.shuffle(edges)

    components = DisjointSet(cave.coordinate for cave in grid)
    discarded: list[Edge] = []
    for first, second in edges:
        if components.union(first, second):
            grid.connect(first, second)
        else:
            discarded.append((first, second))

    if interconnectivity > len(discarded):
        raise ConfigurationError(
            f"Interconnectivity {interconnectivity} not possible for a "
            f"{rows}x{columns} grid (at most {len(discarded)})"
        )

    for first, second in rng.sample(discarded, interconnectivity):
        grid.connect(first, second)

    logger.debug(
        "maze_built",
        rows=rows,
        columns=columns,
        wrapping=wrapping,
        tree_edges=len(edges) - len(discarded),
        extra_edges=interconnectivity,
    )
    return grid
