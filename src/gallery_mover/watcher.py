"""Background inbox watcher built on watchdog."""

from __future__ import annotations

import os
import queue
import threading
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .console import Console
from .errors import WatchError
from .models import WatcherState, WatchKind, WatchNotification

log = logger.bind(component="watcher")

_STOP = object()


class InboxEventHandler(FileSystemEventHandler):
    """Turns watchdog events for the inbox into WatchNotifications on a queue.

    A rename whose destination lands in the inbox (e.g. `photo.jpg.part` ->
    `photo.jpg`) counts as a new arrival.
    """

    def __init__(self, inbox: Path, events: queue.Queue) -> None:
        super().__init__()
        self.inbox = inbox
        self.events = events
        # Some backends report symlink-resolved paths
        self._parents = {inbox, inbox.resolve()}

    def _emit(self, path: str | bytes) -> None:
        entry = Path(os.fsdecode(path))
        if entry.parent not in self._parents:
            return
        self.events.put(WatchNotification(WatchKind.CREATED, entry.name))

    def on_created(self, event: FileSystemEvent) -> None:
        self._emit(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._emit(event.dest_path)


class FileWatcher:
    """Watches one inbox directory on a daemon thread.

    The thread blocks on the event queue, then drains everything queued so a
    burst of arrivals produces one notification block and one inventory
    rescan. `status` is called after each burst and its line (if any) is
    appended to the block.

    Lifecycle: idle -> armed -> draining -> armed ... -> stopped.
    """

    def __init__(
        self,
        inbox: Path,
        console: Console,
        status: Callable[[], str | None],
        observer_factory: Callable[[], object] = Observer,
    ) -> None:
        self.inbox = Path(inbox).absolute()
        self._console = console
        self._status = status
        self._observer_factory = observer_factory
        self._events: queue.Queue = queue.Queue()
        self._thread: threading.Thread | None = None
        self._state = WatcherState.IDLE

    @property
    def state(self) -> WatcherState:
        return self._state

    @property
    def events(self) -> queue.Queue:
        return self._events

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("FileWatcher can only be started once")
        self._thread = threading.Thread(
            target=self._run, name="inbox-watcher", daemon=True
        )
        self._thread.start()
        log.info(f"Watching delivery car: {self.inbox}")

    def stop(self, timeout: float | None = 5.0) -> None:
        """Request cancellation and wait for the thread to finish."""
        self._events.put(_STOP)
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        observer = None
        try:
            try:
                observer = self._observer_factory()
                observer.schedule(
                    InboxEventHandler(self.inbox, self._events),
                    str(self.inbox),
                    recursive=False,
                )
                observer.start()
            except OSError as e:
                raise WatchError(f"Cannot watch {self.inbox}: {e}") from e

            self._state = WatcherState.ARMED
            while True:
                first = self._events.get()
                self._state = WatcherState.DRAINING
                if self._drain(first):
                    break
                self._state = WatcherState.ARMED
            log.info("Background monitor stopped.")
        except Exception as e:
            log.error(f"Background monitor encountered an unexpected failure: {e}")
        finally:
            self._release(observer)
            self._state = WatcherState.STOPPED

    @staticmethod
    def _release(observer) -> None:
        if observer is not None and observer.is_alive():
            observer.stop()
            observer.join()

    def _drain(self, first: object) -> bool:
        """Handle `first` plus everything already queued.

        Returns True when a stop request was among the drained items.
        """
        stop_requested = False
        arrivals: list[str] = []
        item = first
        while True:
            if item is _STOP:
                stop_requested = True
            elif item.kind == WatchKind.CREATED:
                arrivals.append(item.entry_name)
            try:
                item = self._events.get_nowait()
            except queue.Empty:
                break

        if arrivals:
            lines = [f"[Notification] New asset detected: {name}" for name in arrivals]
            status = self._status()
            if status:
                lines.append(status)
            self._console.notify(*lines)
            log.debug(f"Drained {len(arrivals)} arrival(s)")

        return stop_requested
