"""Operator command classification and the foreground dispatch loop."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from loguru import logger

from .console import Console
from .desktop import open_in_explorer
from .errors import ConfigError, InventoryError, MoverError
from .inventory import scan, status_line
from .models import (
    BUILTIN_COMMANDS,
    EXIT_WORDS,
    OPEN_FOLDER_PREFIX,
    Builtin,
    Command,
    CommandKind,
    MoveResult,
)
from .mover import batch_move, ensure_directory
from .store import ConfigStore, DeliveryConfig

log = logger.bind(component="commands")

GUIDE = (
    "User Guide:",
    "  [alias]           -> Batch move files to destination",
    "  open -s [alias]   -> Open folder in file explorer",
    "  check | list | ls -> Show delivery car file count",
    "  reload            -> Refresh configuration mappings",
    "  help              -> Show this guide",
    "  exit | quit       -> Terminate the application",
)


def classify(line: str | None) -> Command:
    """Classify one input line. `None` means end of input.

    First match wins: exit/quit, empty, reload, `open -s <alias>`,
    registered built-in, and finally a move alias.
    """
    if line is None:
        return Command(CommandKind.EXIT)

    text = line.strip()
    lowered = text.lower()

    if lowered in EXIT_WORDS:
        return Command(CommandKind.EXIT, raw=text)
    if not text:
        return Command(CommandKind.EMPTY)
    if lowered == "reload":
        return Command(CommandKind.RELOAD, raw=text)
    if lowered.startswith(OPEN_FOLDER_PREFIX):
        alias = text[len(OPEN_FOLDER_PREFIX):].strip()
        return Command(CommandKind.OPEN_FOLDER, alias, raw=text)
    if lowered in BUILTIN_COMMANDS:
        return Command(CommandKind.BUILTIN, BUILTIN_COMMANDS[lowered], raw=text)
    return Command(CommandKind.MOVE, text, raw=text)


class CommandDispatcher:
    """Read-evaluate loop on the main thread.

    Holds no configuration of its own: every alias and the inbox path are
    resolved through the store at the moment a command runs.
    """

    def __init__(
        self,
        store: ConfigStore,
        console: Console,
        mapping_file: Path,
        overwrite_existing: bool = True,
        on_reload: Callable[[DeliveryConfig], None] | None = None,
    ) -> None:
        self.store = store
        self.console = console
        self.mapping_file = mapping_file
        self.overwrite_existing = overwrite_existing
        self.on_reload = on_reload

    def run(self, stream: TextIO) -> None:
        """Prompt, read, dispatch until exit/quit or end of input."""
        while True:
            self.console.prompt()
            try:
                raw = stream.readline()
            except UnicodeDecodeError as e:
                self.console.input_received()
                log.warning(f"Ignoring input that could not be decoded: {e}")
                continue
            self.console.input_received()
            if not self.dispatch(classify(raw if raw else None)):
                break

    def dispatch(self, command: Command) -> bool:
        """Run one command. Returns False only when the loop should end."""
        if command.kind == CommandKind.EXIT:
            log.info("Terminating application...")
            return False
        if command.kind == CommandKind.EMPTY:
            return True

        try:
            if command.kind == CommandKind.RELOAD:
                self.reload()
            elif command.kind == CommandKind.OPEN_FOLDER:
                self.open_folder(command.argument)
            elif command.kind == CommandKind.BUILTIN:
                self.run_builtin(Builtin(command.argument))
            else:
                self.move(command.argument)
        except (MoverError, OSError) as e:
            log.error(f"Command [{command.raw}] failed: {e}")
        return True

    # -- Commands --

    def reload(self) -> DeliveryConfig | None:
        log.info(f"Reloading configuration from {self.mapping_file}...")
        try:
            snapshot = self.store.load(self.mapping_file)
        except ConfigError as e:
            log.warning(f"Reload failed, keeping previous configuration: {e}")
            return None

        if self.on_reload is not None:
            self.on_reload(snapshot)
        return snapshot

    def open_folder(self, alias: str) -> Path | None:
        if not alias:
            log.warning("Cannot open folder: no alias given. Usage: open -s [alias]")
            return None
        path = self.store.resolve_destination(alias)
        if path is None:
            log.warning(f"Cannot open folder: Alias [{alias}] not recognized.")
            return None

        ensure_directory(path)
        open_in_explorer(path)
        return path

    def run_builtin(self, builtin: Builtin) -> None:
        if builtin == Builtin.HELP:
            self.console.echo(*GUIDE)
            return

        inbox = self.store.inbox_path()
        if inbox is None:
            log.error("Execution failed: Delivery car path is not configured.")
            return
        self.console.echo(status_line(inbox))

    def move(self, alias: str) -> MoveResult | None:
        destination = self.store.resolve_destination(alias)
        if destination is None:
            log.warning(f"Invalid alias [{alias}]: No mapping exists in configuration.")
            return None

        inbox = self.store.inbox_path()
        if inbox is None:
            log.warning("Delivery car path is not configured; nothing to move.")
            return None

        try:
            files = scan(inbox)
        except InventoryError as e:
            log.error(str(e))
            return None
        if not files:
            log.info("No files found in delivery car. Movement sequence aborted.")
            return None

        result = batch_move(files, destination, overwrite=self.overwrite_existing)

        log.info(
            f"Success: {result.count} of {result.total} file(s) moved to "
            f"destination [{destination.name}]"
        )
        for failure in result.failed:
            log.warning(f"Not moved: {failure.file.name} ({failure.reason})")
        for skipped in result.skipped:
            log.warning(f"Not moved: {skipped.name} (already exists at destination)")
        return result
