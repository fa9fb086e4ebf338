"""Application settings via pydantic-settings (.env + env vars)."""

import sys
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class MoverSettings(BaseSettings):
    """All application settings with layered resolution:
    .env file < environment variables < constructor kwargs.

    The YAML mapping file itself (delivery_car + mappings) is not a setting;
    it is loaded and reloaded by ConfigStore. Settings only say where it is.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -- Files --
    mapping_file: Path = Path("delivery-guide-config.yaml")
    log_dir: Path = Path.home() / ".local" / "state" / "gallery-mover"

    # -- Behavior --
    overwrite_existing: bool = True
    console_prompt: str = ">> "
    verbose: bool = False
    log_level: str = "INFO"

    @property
    def log_file(self) -> Path:
        """Path to the rotating application log."""
        return self.log_dir / "gallery-mover.log"

    def setup_logging(self, sink: Callable[[str], None] | None = None) -> None:
        """Configure loguru for the application.

        `sink` receives console-bound records; the interactive app passes the
        Console's lock-guarded writer so log lines never split the prompt.
        """
        logger.remove()  # Remove default stderr handler

        def _default_extra(record):
            record["extra"].setdefault("component", "")
            return True

        logger.add(
            sink if sink is not None else sys.stderr,
            format="{level:<8} | {message}",
            level="DEBUG" if self.verbose else self.log_level.upper(),
            filter=_default_extra,
        )

        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(self.log_file),
            format=(
                "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
                "{extra[component]:<10} | {thread.name:<13} | {message}"
            ),
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            filter=_default_extra,
        )
