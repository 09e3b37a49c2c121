"""Gems that can be found lying in caves.

A gem's value is its quality's base value scaled by its type's rarity
multiplier; the value is derived, never stored.
"""

from dataclasses import dataclass
from enum import Enum


class GemType(Enum):
    DIAMOND = "diamond"
    RUBY = "ruby"
    SAPPHIRE = "sapphire"


class GemQuality(Enum):
    POOR = "poor"
    AVERAGE = "average"
    HIGH = "high"


BASE_VALUES: dict[GemQuality, int] = {
    GemQuality.POOR: 50,
    GemQuality.AVERAGE: 100,
    GemQuality.HIGH: 200,
}

# Diamonds are rarest, sapphires most common
MULTIPLIERS: dict[GemType, float] = {
    GemType.DIAMOND: 2,
    GemType.RUBY: 1.5,
    GemType.SAPPHIRE: 1,
}


@dataclass(frozen=True)
class Treasure:
    """A single gem of some type and quality."""

    type: GemType
    quality: GemQuality

    @property
    def value(self) -> float:
        return BASE_VALUES[self.quality] * MULTIPLIERS[self.type]

    def __str__(self) -> str:
        return f"{self.type.name}, Value: {int(self.value)}, Quality: {self.quality.name}"


def all_treasures() -> list[Treasure]:
    """Return one of every gem variant (three types x three qualities)."""
    return [
        Treasure(gem_type, quality)
        for quality in GemQuality
        for gem_type in GemType
    ]


def total_value(treasures: list[Treasure]) -> float:
    return sum(treasure.value for treasure in treasures)
