"""Shared test fixtures for Caverns."""

import random

import pytest

from caverns.engine.dungeon import Dungeon, new_dungeon
from caverns.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logs():
    """Keep generation chatter out of the test output."""
    configure_logging(log_level="WARNING")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def dungeon() -> Dungeon:
    return new_dungeon(6, 8, 2, False, 50, 3, seed=7)


@pytest.fixture
def empty_dungeon(dungeon: Dungeon) -> Dungeon:
    """A generated dungeon with every cave emptied."""
    dungeon.grid.clear_contents()
    return dungeon
