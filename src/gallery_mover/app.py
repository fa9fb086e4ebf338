"""Application wiring -- config load, watcher lifecycle, command loop."""

from __future__ import annotations

from typing import TextIO

from loguru import logger

from .commands import GUIDE, CommandDispatcher
from .config import MoverSettings
from .console import Console
from .errors import ConfigError
from .inventory import status_line
from .store import ConfigStore, DeliveryConfig
from .watcher import FileWatcher

log = logger.bind(component="app")

BANNER_RULE = "=" * 61


class MoverApp:
    """Runs one interactive session.

    A failed initial load is not fatal: the loop still starts, aliases just
    don't resolve until a `reload` succeeds, at which point the watcher is
    started (or moved to a new delivery car).
    """

    def __init__(
        self,
        settings: MoverSettings,
        console: Console | None = None,
        store: ConfigStore | None = None,
        watch: bool = True,
    ) -> None:
        self.settings = settings
        self.console = console or Console(prompt=settings.console_prompt)
        self.store = store or ConfigStore()
        self.watch = watch
        self.watcher: FileWatcher | None = None

    def run(self, stdin: TextIO) -> int:
        try:
            self.store.load(self.settings.mapping_file)
        except ConfigError as e:
            log.error(
                f"Startup configuration failed: {e}. "
                "Fix the mapping file and type 'reload'."
            )

        snapshot = self.store.snapshot
        if snapshot is not None:
            self._start_watcher(snapshot)

        self.print_welcome()
        self.report_inventory()

        dispatcher = CommandDispatcher(
            store=self.store,
            console=self.console,
            mapping_file=self.settings.mapping_file,
            overwrite_existing=self.settings.overwrite_existing,
            on_reload=self._on_reload,
        )
        try:
            dispatcher.run(stdin)
        finally:
            self._stop_watcher()
        return 0

    def print_welcome(self) -> None:
        self.console.echo(
            BANNER_RULE,
            "              Gallery Organizer Engine Active",
            BANNER_RULE,
            *GUIDE,
            "",
        )
        if not self.settings.overwrite_existing:
            self.console.echo("Overwrite is OFF: same-named files stay in the delivery car.")

    def report_inventory(self) -> None:
        line = status_line(self.store.inbox_path())
        if line:
            self.console.echo(line)

    # -- Watcher lifecycle --

    def _start_watcher(self, snapshot: DeliveryConfig) -> None:
        if not self.watch:
            return
        # Counts the inbox this watcher observes, even after a reload moved it
        inbox = snapshot.inbox
        self.watcher = FileWatcher(inbox, self.console, lambda: status_line(inbox))
        self.watcher.start()

    def _stop_watcher(self) -> None:
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher = None

    def _on_reload(self, snapshot: DeliveryConfig) -> None:
        if self.watcher is not None and self.watcher.is_alive():
            if self.watcher.inbox == snapshot.inbox.absolute():
                return
            log.info(f"Delivery car changed, now watching {snapshot.inbox}")
        self._stop_watcher()
        self._start_watcher(snapshot)
