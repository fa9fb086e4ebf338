"""Exception hierarchy for the gallery mover."""


class MoverError(Exception):
    """Base exception for all gallery mover errors."""


class ConfigError(MoverError):
    """Missing, unreadable, or invalid mapping file."""

    def __init__(self, message: str, source: object = None) -> None:
        super().__init__(message)
        self.source = source


class InventoryError(MoverError):
    """The inbox cannot be listed (missing, not a directory, unreadable)."""

    def __init__(self, message: str, directory: object = None) -> None:
        super().__init__(message)
        self.directory = directory


class MoveError(MoverError):
    """A batch move could not start (destination cannot be prepared)."""

    def __init__(self, message: str, destination: object = None) -> None:
        super().__init__(message)
        self.destination = destination


class WatchError(MoverError):
    """The underlying watch mechanism failed (not a stop request)."""
