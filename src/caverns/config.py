"""Configuration for Caverns."""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Dungeon construction and logging configuration."""

    rows: int = 6
    columns: int = 8
    interconnectivity: int = 2
    wrapping: bool = False
    percent: int = 50
    monster_count: int = 3
    seed: int | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        seed = os.getenv("CAVERNS_SEED")
        log_file = os.getenv("CAVERNS_LOG_FILE")

        return cls(
            rows=int(os.getenv("CAVERNS_ROWS", str(cls.rows))),
            columns=int(os.getenv("CAVERNS_COLUMNS", str(cls.columns))),
            interconnectivity=int(
                os.getenv("CAVERNS_INTERCONNECTIVITY", str(cls.interconnectivity))
            ),
            wrapping=_env_flag("CAVERNS_WRAPPING"),
            percent=int(os.getenv("CAVERNS_PERCENT", str(cls.percent))),
            monster_count=int(os.getenv("CAVERNS_MONSTERS", str(cls.monster_count))),
            seed=int(seed) if seed else None,
            log_level=os.getenv("CAVERNS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("CAVERNS_JSON_LOGS"),
        )
