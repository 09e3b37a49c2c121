"""Tests for maze generation."""

import random

import pytest

from caverns.engine.coordinates import Coordinate
from caverns.engine.maze import DisjointSet, build_maze, candidate_edges
from caverns.engine.paths import is_connected
from caverns.errors import ConfigurationError


def _crosses_border(edge, rows: int, columns: int) -> bool:
    first, second = sorted(edge)
    return (first.row == 0 and second.row == rows - 1 and rows > 2) or (
        first.column == 0 and second.column == columns - 1 and columns > 2
    )


def test_disjoint_set_union_and_find():
    a, b, c, d = (Coordinate(0, i) for i in range(4))
    components = DisjointSet([a, b, c, d])
    assert not components.connected(a, b)
    assert components.union(a, b)
    assert components.union(c, d)
    assert components.connected(a, b)
    assert not components.connected(b, c)
    assert components.union(b, d)
    assert components.connected(a, c)
    assert not components.union(a, d)


def test_candidate_edges_without_wrapping():
    edges = candidate_edges(4, 5, wrapping=False)
    assert len(edges) == 4 * 4 + 5 * 3
    assert len({frozenset(edge) for edge in edges}) == len(edges)


def test_candidate_edges_with_wrapping():
    """Wrapping adds one passage per row and one per column."""
    edges = candidate_edges(4, 5, wrapping=True)
    assert len(edges) == 4 * 4 + 5 * 3 + 4 + 5
    assert (Coordinate(0, 2), Coordinate(3, 2)) in edges
    assert (Coordinate(1, 0), Coordinate(1, 4)) in edges


def test_candidate_edges_skip_degenerate_wraps():
    """A 1-wide or 2-wide dimension has no extra wrap-around passages."""
    assert len(candidate_edges(1, 4, wrapping=True)) == 3 + 1
    assert len(candidate_edges(2, 4, wrapping=True)) == 2 * 3 + 4 + 2


@pytest.mark.parametrize("wrapping", [False, True])
@pytest.mark.parametrize("interconnectivity", [0, 3, 7])
def test_maze_is_connected(wrapping, interconnectivity):
    """Every cave can reach every other cave."""
    rng = random.Random(interconnectivity)
    for rows, columns in [(5, 5), (6, 9), (12, 7), (19, 19)]:
        grid = build_maze(rows, columns, interconnectivity, wrapping, rng)
        assert is_connected(grid)


@pytest.mark.parametrize("wrapping", [False, True])
def test_passage_count(wrapping):
    """A spanning tree plus exactly the requested extra passages."""
    rng = random.Random(5)
    for interconnectivity in (0, 1, 4, 10):
        grid = build_maze(7, 8, interconnectivity, wrapping, rng)
        assert len(grid.edges()) == 7 * 8 - 1 + interconnectivity


def test_full_interconnectivity_opens_everything(rng):
    """5x5 has 40 passages; a tree uses 24, leaving 16 to add back."""
    grid = build_maze(5, 5, 16, False, rng)
    assert len(grid.edges()) == 40
    assert all(len(cave.exits) in (2, 3, 4) for cave in grid)


def test_too_much_interconnectivity(rng):
    with pytest.raises(ConfigurationError):
        build_maze(5, 5, 30, True, rng)
    with pytest.raises(ConfigurationError):
        build_maze(5, 5, 17, False, rng)


def test_negative_interconnectivity(rng):
    with pytest.raises(ConfigurationError):
        build_maze(5, 5, -2, True, rng)


@pytest.mark.parametrize(("rows", "columns"), [(0, 5), (5, 0), (-1, 3)])
def test_bad_dimensions(rng, rows, columns):
    with pytest.raises(ConfigurationError):
        build_maze(rows, columns, 0, False, rng)


def test_wrapping_mazes_cross_the_border():
    rng = random.Random(11)
    for _ in range(30):
        grid = build_maze(8, 8, 0, True, rng)
        assert any(_crosses_border(edge, 8, 8) for edge in grid.edges())


def test_non_wrapping_mazes_never_cross_the_border():
    rng = random.Random(11)
    for _ in range(30):
        grid = build_maze(8, 8, 5, False, rng)
        assert not any(_crosses_border(edge, 8, 8) for edge in grid.edges())


def test_same_seed_same_maze():
    first = build_maze(9, 9, 4, True, random.Random(99))
    second = build_maze(9, 9, 4, True, random.Random(99))
    assert first.edges() == second.edges()
