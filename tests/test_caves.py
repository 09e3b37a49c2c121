"""Tests for caves and the cave grid."""

import pytest

from caverns.engine.arrow import Arrow
from caverns.engine.caves import Cave, CaveGrid
from caverns.engine.coordinates import Coordinate, Direction
from caverns.engine.monster import Monster
from caverns.engine.treasure import GemQuality, GemType, Treasure
from caverns.errors import ConfigurationError
from grid_helpers import wire


@pytest.mark.parametrize(("rows", "columns"), [(0, 5), (5, 0), (-1, 5), (5, -5)])
def test_grid_rejects_non_positive_dimensions(rows, columns):
    with pytest.raises(ConfigurationError):
        CaveGrid(rows, columns)


def test_grid_holds_every_cave():
    grid = CaveGrid(3, 4)
    assert len(grid) == 12
    assert grid.dimensions == (3, 4)
    assert [cave.coordinate for cave in grid][:5] == [
        Coordinate(0, 0),
        Coordinate(0, 1),
        Coordinate(0, 2),
        Coordinate(0, 3),
        Coordinate(1, 0),
    ]
    assert all(not cave.exits for cave in grid)


def test_lookup_outside_grid():
    grid = CaveGrid(3, 3)
    assert Coordinate(2, 2) in grid
    assert Coordinate(3, 0) not in grid
    with pytest.raises(ValueError):
        grid.cave(Coordinate(0, 3))


def test_connect_sets_both_directions():
    grid = wire(3, 3, [((1, 1), (0, 1)), ((1, 1), (1, 2))])
    centre = Coordinate(1, 1)
    assert grid.neighbour(centre, Direction.NORTH) == Coordinate(0, 1)
    assert grid.neighbour(centre, Direction.EAST) == Coordinate(1, 2)
    assert grid.neighbour(centre, Direction.SOUTH) is None
    assert grid.neighbour(Coordinate(0, 1), Direction.SOUTH) == centre
    assert grid.neighbour(Coordinate(1, 2), Direction.WEST) == centre
    assert grid.is_adjacent(centre, Coordinate(0, 1))
    assert not grid.is_adjacent(centre, Coordinate(2, 1))


def test_connect_rejects_non_neighbours():
    grid = CaveGrid(4, 4)
    with pytest.raises(ValueError):
        grid.connect(Coordinate(0, 0), Coordinate(1, 1))
    with pytest.raises(ValueError):
        grid.connect(Coordinate(0, 0), Coordinate(0, 2))
    with pytest.raises(ValueError):
        grid.connect(Coordinate(2, 2), Coordinate(2, 2))


def test_connect_across_edge_needs_wrapping():
    """Opposite border caves are only neighbours on a wrapping grid."""
    with pytest.raises(ValueError):
        CaveGrid(4, 4).connect(Coordinate(0, 1), Coordinate(3, 1))

    grid = wire(4, 4, [((0, 1), (3, 1)), ((2, 0), (2, 3))], wrapping=True)
    assert grid.neighbour(Coordinate(0, 1), Direction.NORTH) == Coordinate(3, 1)
    assert grid.neighbour(Coordinate(3, 1), Direction.SOUTH) == Coordinate(0, 1)
    assert grid.neighbour(Coordinate(2, 0), Direction.WEST) == Coordinate(2, 3)
    assert grid.neighbour(Coordinate(2, 3), Direction.EAST) == Coordinate(2, 0)


def test_exit_slot_set_only_once():
    cave = Cave(Coordinate(1, 1))
    cave.link(Direction.NORTH, Coordinate(0, 1))
    cave.link(Direction.NORTH, Coordinate(0, 1))
    with pytest.raises(ValueError):
        cave.link(Direction.NORTH, Coordinate(5, 5))


def test_tunnel_has_exactly_two_exits():
    grid = wire(3, 3, [((1, 0), (1, 1)), ((1, 1), (1, 2)), ((1, 1), (0, 1))])
    assert grid.is_tunnel(Coordinate(1, 1)) is False
    assert grid.is_tunnel(Coordinate(1, 0)) is False

    grid = wire(3, 3, [((1, 0), (1, 1)), ((1, 1), (0, 1))])
    assert grid.is_tunnel(Coordinate(1, 1))
    assert grid.caves_not_tunnels()[0].coordinate == Coordinate(0, 0)


def test_tunnels_refuse_treasure():
    grid = wire(1, 3, [((0, 0), (0, 1)), ((0, 1), (0, 2))])
    with pytest.raises(ValueError):
        grid.cave(Coordinate(0, 1)).add_treasure(Treasure(GemType.RUBY, GemQuality.HIGH))
    grid.cave(Coordinate(0, 0)).add_treasure(Treasure(GemType.RUBY, GemQuality.HIGH))


def test_take_treasure_empties_cave():
    cave = Cave(Coordinate(0, 0))
    gems = [Treasure(GemType.RUBY, GemQuality.HIGH), Treasure(GemType.RUBY, GemQuality.HIGH)]
    for gem in gems:
        cave.add_treasure(gem)
    assert cave.take_treasure() == gems
    assert cave.treasure == []
    assert cave.take_treasure() == []


def test_one_arrow_per_cave():
    cave = Cave(Coordinate(0, 0))
    arrow = Arrow()
    cave.add_arrow(arrow)
    with pytest.raises(ValueError):
        cave.add_arrow(Arrow())
    assert cave.take_arrow() is arrow
    assert cave.take_arrow() is None


def test_monster_placement_rules():
    cave = Cave(Coordinate(2, 2))
    with pytest.raises(ValueError):
        cave.add_monster(Monster(Coordinate(1, 1)))
    cave.add_monster(Monster(Coordinate(2, 2)))
    assert cave.has_monster
    with pytest.raises(ValueError):
        cave.add_monster(Monster(Coordinate(2, 2)))


def test_dead_monster_does_not_count():
    cave = Cave(Coordinate(0, 0))
    cave.add_monster(Monster(Coordinate(0, 0), hits=2))
    assert cave.monster is not None
    assert not cave.has_monster


def test_clear_keeps_exits():
    grid = wire(1, 2, [((0, 0), (0, 1))])
    cave = grid.cave(Coordinate(0, 0))
    cave.add_arrow(Arrow())
    cave.add_treasure(Treasure(GemType.DIAMOND, GemQuality.POOR))
    cave.add_monster(Monster(Coordinate(0, 0)))
    grid.clear_contents()
    assert cave.arrow is None
    assert cave.treasure == []
    assert cave.monster is None
    assert cave.neighbours == [Coordinate(0, 1)]


def test_edges_are_unordered_pairs():
    grid = wire(2, 2, [((0, 0), (0, 1)), ((0, 1), (1, 1))])
    assert grid.edges() == {
        frozenset((Coordinate(0, 0), Coordinate(0, 1))),
        frozenset((Coordinate(0, 1), Coordinate(1, 1))),
    }
