"""Shared console writer.

The watcher thread, the command loop and the log sink all write to the same
terminal. Every write happens under one lock; while the command loop is
blocked on input, a background write is framed as carriage return, lines,
then the prompt again so the operator's prompt is never split.
"""

import threading
from typing import TextIO

import click


class Console:
    def __init__(
        self,
        prompt: str = ">> ",
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
    ) -> None:
        self.prompt_text = prompt
        self._stream = stream
        self._err_stream = err_stream
        self._lock = threading.Lock()
        self._awaiting_input = False

    @property
    def awaiting_input(self) -> bool:
        return self._awaiting_input

    def prompt(self) -> None:
        """Print the prompt and mark the console as waiting for input."""
        with self._lock:
            click.echo(self.prompt_text, nl=False, file=self._stream)
            self._awaiting_input = True

    def input_received(self) -> None:
        with self._lock:
            self._awaiting_input = False

    def echo(self, *lines: str) -> None:
        """Foreground output from the command loop."""
        with self._lock:
            for line in lines:
                click.echo(line, file=self._stream)

    def notify(self, *lines: str) -> None:
        """Background output; redraws the prompt if the operator is mid-read."""
        if not lines:
            return
        with self._lock:
            if self._awaiting_input:
                click.echo("\r", nl=False, file=self._stream)
            for line in lines:
                click.echo(line, file=self._stream)
            if self._awaiting_input:
                click.echo(self.prompt_text, nl=False, file=self._stream)

    def log_sink(self, message: str) -> None:
        """loguru sink; `message` already ends with a newline."""
        with self._lock:
            if self._awaiting_input:
                click.echo("\r", nl=False, file=self._stream)
            click.echo(message, nl=False, file=self._err_stream, err=True)
            if self._awaiting_input:
                click.echo(self.prompt_text, nl=False, file=self._stream)
