"""Console progress reporting."""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)


class Display:
    """Styled terminal output for pipeline progress.

    Purely observational: nothing here feeds back into control flow.
    """

    def success(self, message: str) -> None:
        logger.debug("success: %s", message)
        click.echo("  " + click.style("✓  ", fg="green") + message)

    def warn(self, message: str) -> None:
        logger.debug("warning: %s", message)
        click.echo(click.style("  ⚠  ", fg="yellow") + message)

    def error(self, message: str) -> None:
        logger.debug("error: %s", message)
        click.echo("  " + click.style("✗  ", fg="red") + message)

    def header(self, message: str) -> None:
        logger.debug("section: %s", message)
        click.echo("")
        click.echo(" " + click.style(message, fg="cyan", underline=True))
        click.echo("")
