"""Error kinds raised by the Caverns engine."""


class CavernsError(Exception):
    """Base class for every engine failure."""


class ConfigurationError(CavernsError, ValueError):
    """Construction parameters are invalid or cannot be satisfied."""


class GenerationError(CavernsError):
    """No start/end pair of caves meets the minimum path length."""


class InvalidShotError(CavernsError, ValueError):
    """An arrow cannot be shot with the given distance or direction."""


class InvalidMoveError(CavernsError, ValueError):
    """The player tried to move to a cave it is not connected to."""


class DeadPlayerError(CavernsError):
    """A dead player attempted an action other than reset."""
