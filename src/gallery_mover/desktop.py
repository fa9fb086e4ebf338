"""Best-effort desktop launchers (file explorer, web browser)."""

import os
import platform
import subprocess
import webbrowser
from pathlib import Path

from loguru import logger

log = logger.bind(component="desktop")


def open_in_explorer(path: Path) -> bool:
    """Open `path` in the system file explorer. Never raises."""
    system = platform.system()
    try:
        if system == "Darwin":
            subprocess.run(["open", str(path)], check=True)
        elif system == "Windows":
            os.startfile(str(path))  # type: ignore[attr-defined]
        else:
            subprocess.run(["xdg-open", str(path)], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        log.error(f"Failed to launch system explorer: {e} ({type(e).__name__})")
        return False

    log.info(f"System explorer triggered for path: {path}")
    return True


def open_in_browser(url: str) -> bool:
    """Open `url` in the default web browser. Never raises."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        log.error(f"Could not open {url} in a browser: {e}")
        return False

    if not opened:
        log.warning("Automatic browsing is not supported here; copy the link manually.")
    return opened
