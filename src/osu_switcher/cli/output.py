"""Output utilities for CLI commands with clear intent.

Human-facing messages go to stderr via user_output(); machine-readable data
(JSON) goes to stdout via machine_output() so it can be piped.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a human-readable message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str) -> None:
    """Print machine-readable data to stdout."""
    click.echo(message)
