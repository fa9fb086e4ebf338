"""CLI entry point for the filename parser (gallery-parse command)."""

import sys

import click
from loguru import logger

from .desktop import open_in_browser
from .parser import parse_filename

log = logger.bind(component="parse-cli")

PROMPT = "[Input] Please input the filename: "


def _handle(raw: str, browse: bool) -> bool:
    url = parse_filename(raw)
    if not url:
        click.echo(f"No known pattern matches: {raw.strip()}", err=True)
        return False

    click.echo(f"URL: {url}")
    if browse:
        open_in_browser(url)
    return True


@click.command()
@click.argument("inputs", nargs=-1)
@click.option("--no-browser", is_flag=True, help="Print URLs without opening them.")
def main(inputs: tuple[str, ...], no_browser: bool) -> None:
    """Turn saved-image filenames back into their source URLs.

    With INPUTS, parse each and exit (status 1 if any did not match).
    Without, read filenames interactively until exit, quit, or end of input.
    """
    logger.remove()
    logger.add(lambda msg: click.echo(msg, err=True, nl=False), format="{level:<8} | {message}")

    browse = not no_browser
    if inputs:
        results = [_handle(raw, browse) for raw in inputs]
        sys.exit(0 if all(results) else 1)

    click.echo("=" * 45)
    click.echo("||    Pix Filename Parser Utility          ||")
    click.echo("||    (Type 'exit' or 'quit' to stop)      ||")
    click.echo("=" * 45)

    while True:
        click.echo(f"\n{PROMPT}", nl=False)
        line = sys.stdin.readline()
        if not line or line.strip().lower() in ("exit", "quit"):
            click.echo("Exiting...")
            break
        if not line.strip():
            continue
        _handle(line.strip(), browse)
