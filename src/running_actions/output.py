"""User-facing output helpers."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message for the operator to stderr."""
    click.echo(message, err=True, nl=nl)
