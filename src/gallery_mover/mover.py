"""Batch move of inbox files into a destination directory."""

from __future__ import annotations

import errno
import shutil
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from .errors import MoveError
from .models import InventoryFile, MoveFailure, MoveResult

log = logger.bind(component="mover")


def ensure_directory(path: Path) -> None:
    """Create `path` (with parents) if it does not exist yet."""
    path.mkdir(parents=True, exist_ok=True)


def _move_file(source: Path, dest_file: Path) -> Path:
    """Move one file, replacing `dest_file` if present.

    Same-filesystem moves are a single rename. Across devices rename fails
    with EXDEV and shutil.move copies then unlinks.
    """
    if dest_file.is_dir():
        raise IsADirectoryError(errno.EISDIR, "Destination is a directory", str(dest_file))
    try:
        return source.replace(dest_file)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
    log.debug(f"Cross-device move, copying {source.name}")
    return Path(shutil.move(str(source), str(dest_file)))


def batch_move(
    files: Sequence[InventoryFile],
    destination: Path,
    overwrite: bool = True,
) -> MoveResult:
    """Move every file in `files` into `destination`.

    `files` must be a snapshot taken right before the call. Each file is moved
    on its own: a failure is logged and recorded, and the rest of the batch is
    still attempted. Nothing is rolled back.

    When a same-named file already exists at the destination it is replaced
    if `overwrite` is True (last write wins), otherwise the inbox copy is left
    in place and reported in `skipped`.

    Raises MoveError if the destination directory cannot be created.
    """
    log.debug(
        f"batch_move(files={len(files)}, destination={destination}, overwrite={overwrite})"
    )

    try:
        ensure_directory(destination)
    except OSError as e:
        raise MoveError(
            f"Cannot prepare destination {destination}: {e}", destination
        ) from e

    result = MoveResult(destination=destination)
    for item in files:
        dest_file = destination / item.name

        if dest_file.exists() and not dest_file.is_dir():
            if not overwrite:
                log.warning(f"Skip {item.name}: already exists in {destination}")
                result.skipped.append(item)
                continue
            log.warning(f"Overwriting existing {dest_file}")

        try:
            moved = _move_file(item.path, dest_file)
        except OSError as e:
            log.error(f"Failed to move {item.name}: {e}")
            result.failed.append(MoveFailure(item, str(e)))
            continue

        log.debug(f"Move {item.path} -> {moved}")
        result.moved.append(moved)

    return result
