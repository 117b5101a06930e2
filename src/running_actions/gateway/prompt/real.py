"""Click-backed Prompter."""

from collections.abc import Sequence
from typing import TypeVar

import click
from rich.console import Console
from rich.table import Table

from running_actions.gateway.prompt.abc import Prompter

T = TypeVar("T")


def _non_empty(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise click.BadParameter("Value is required!")
    return stripped


class RealPrompter(Prompter):
    def text(self, message: str) -> str | None:
        try:
            return click.prompt(message, value_proc=_non_empty, err=True)
        except (KeyboardInterrupt, click.Abort):
            return None

    def select(self, message: str, options: Sequence[tuple[str, T]]) -> T | None:
        console = Console(stderr=True)

        table = Table(show_header=False, box=None)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("option", style="cyan")
        for i, (label, _value) in enumerate(options, 1):
            table.add_row(str(i), label)

        console.print(table)

        try:
            selection = click.prompt(message, type=click.IntRange(1, len(options)), err=True)
        except (KeyboardInterrupt, click.Abort):
            return None
        return options[selection - 1][1]
