"""Inbox inventory scanning."""

import os
from pathlib import Path

from loguru import logger

from .errors import InventoryError
from .models import InventoryFile

log = logger.bind(component="inventory")


def scan(directory: Path) -> list[InventoryFile]:
    """List the regular files directly inside `directory`.

    Symlinks and subdirectories are excluded. Order is whatever the
    filesystem enumerates; callers must not rely on it.
    Raises InventoryError if the directory is missing or not a directory.
    """
    log.debug(f"scan(directory={directory})")

    files: list[InventoryFile] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if not entry.is_file(follow_symlinks=False):
                    continue
                try:
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError:
                    # Removed between listing and stat
                    size = None
                files.append(InventoryFile(entry.name, Path(entry.path), size))
    except FileNotFoundError as e:
        raise InventoryError(f"Delivery car does not exist: {directory}", directory) from e
    except NotADirectoryError as e:
        raise InventoryError(f"Delivery car is not a directory: {directory}", directory) from e
    except OSError as e:
        raise InventoryError(f"Could not scan delivery car {directory}: {e}", directory) from e

    log.debug(f"Scanned {len(files)} file(s) in {directory}")
    return files


def count_files(directory: Path) -> int:
    """Number of regular files in `directory`; scan errors are logged and count as zero."""
    try:
        return len(scan(directory))
    except InventoryError as e:
        log.error(str(e))
        return 0


def status_line(directory: Path | None) -> str | None:
    """Console status line for the inbox, or None when no inbox is configured."""
    if directory is None:
        return None
    return f"[Status] Inventory Update - Current file count: {count_files(directory)}"
