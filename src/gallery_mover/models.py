"""Core enums and value types for the gallery mover.

Enums:
    CommandKind  -- Classification of one operator input line (exit, empty,
                    reload, open_folder, builtin, move).
    Builtin      -- Built-in console commands (status, help).
    WatchKind    -- Filesystem notification kind (only "created" is consumed).
    WatcherState -- FileWatcher lifecycle (idle, armed, draining, stopped).
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class CommandKind(StrEnum):
    EXIT = "exit"
    EMPTY = "empty"
    RELOAD = "reload"
    OPEN_FOLDER = "open_folder"
    BUILTIN = "builtin"
    MOVE = "move"


class Builtin(StrEnum):
    STATUS = "status"
    HELP = "help"


class WatchKind(StrEnum):
    CREATED = "created"


class WatcherState(StrEnum):
    IDLE = "idle"
    ARMED = "armed"
    DRAINING = "draining"
    STOPPED = "stopped"


# Registered built-in tokens (lowercase) and what they run
BUILTIN_COMMANDS: dict[str, Builtin] = {
    "check": Builtin.STATUS,
    "list": Builtin.STATUS,
    "ls": Builtin.STATUS,
    "help": Builtin.HELP,
}

EXIT_WORDS: frozenset[str] = frozenset({"exit", "quit"})

OPEN_FOLDER_PREFIX = "open -s"


@dataclass(frozen=True)
class Command:
    """One classified operator input line."""

    kind: CommandKind
    argument: str = ""
    raw: str = ""


@dataclass(frozen=True)
class InventoryFile:
    """A regular file found in the inbox at scan time."""

    name: str
    path: Path
    size_bytes: int | None = None


@dataclass(frozen=True)
class WatchNotification:
    kind: WatchKind
    entry_name: str


@dataclass(frozen=True)
class MoveFailure:
    file: InventoryFile
    reason: str


@dataclass
class MoveResult:
    """Outcome of a batch move.

    `moved` holds the final destination paths, `failed` the files whose move
    raised, `skipped` the collisions left in place when overwrite is off.
    """

    destination: Path
    moved: list[Path] = field(default_factory=list)
    failed: list[MoveFailure] = field(default_factory=list)
    skipped: list[InventoryFile] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.moved)

    @property
    def total(self) -> int:
        return len(self.moved) + len(self.failed) + len(self.skipped)
