"""CLI entry point for the gallery mover (gallery-mover command)."""

import sys
from pathlib import Path

import click
from loguru import logger

from .app import MoverApp
from .config import MoverSettings
from .console import Console

log = logger.bind(component="cli")


@click.command()
@click.argument("mapping_file", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file with settings (default: ./.env).",
)
@click.option(
    "--no-overwrite",
    is_flag=True,
    help="Leave files in the delivery car when the destination already has that name.",
)
@click.option("--no-watch", is_flag=True, help="Do not watch the delivery car for arrivals.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    mapping_file: str | None,
    env_file: str | None,
    no_overwrite: bool,
    no_watch: bool,
    verbose: bool,
) -> None:
    """Watch the delivery car and move its files by typing a destination alias."""
    # Pass CLI flags as kwargs to avoid env pollution
    settings_kwargs: dict[str, object] = {}
    if mapping_file:
        settings_kwargs["mapping_file"] = Path(mapping_file)
    if no_overwrite:
        settings_kwargs["overwrite_existing"] = False
    if verbose:
        settings_kwargs["verbose"] = True
    if env_file:
        settings_kwargs["_env_file"] = env_file

    settings = MoverSettings(**settings_kwargs)  # type: ignore[arg-type]
    console = Console(prompt=settings.console_prompt)
    settings.setup_logging(sink=console.log_sink)

    log.debug(
        f"Starting: mapping_file={settings.mapping_file} "
        f"overwrite={settings.overwrite_existing} watch={not no_watch}"
    )
    app = MoverApp(settings, console=console, watch=not no_watch)
    sys.exit(app.run(sys.stdin))
