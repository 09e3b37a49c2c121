"""Procedurally generated caves, monsters and crooked arrows."""

from .config import Config
from .engine.coordinates import Coordinate, Direction
from .engine.dungeon import Dungeon, new_dungeon
from .engine.player import Player
from .engine.smell import Smell
from .errors import (
    CavernsError,
    ConfigurationError,
    DeadPlayerError,
    GenerationError,
    InvalidMoveError,
    InvalidShotError,
)
from .logging import configure_logging, get_logger

__all__ = [
    "main",
    "CavernsError",
    "Config",
    "ConfigurationError",
    "Coordinate",
    "DeadPlayerError",
    "Direction",
    "Dungeon",
    "GenerationError",
    "InvalidMoveError",
    "InvalidShotError",
    "Player",
    "Smell",
    "configure_logging",
    "get_logger",
    "new_dungeon",
]


def main() -> None:
    """Entry point: generate a dungeon from the environment and log a summary."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "generation_starting",
        rows=config.rows,
        columns=config.columns,
        interconnectivity=config.interconnectivity,
        wrapping=config.wrapping,
        seed=config.seed,
    )

    dungeon = Dungeon.from_config(config)
    tunnels = sum(1 for cave in dungeon.grid if cave.is_tunnel)
    logger.info(
        "dungeon_ready",
        start=dungeon.start,
        end=dungeon.end,
        path_length=dungeon.distance(dungeon.start, dungeon.end),
        tunnels=tunnels,
        passages=len(dungeon.grid.edges()),
    )
