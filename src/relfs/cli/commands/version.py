"""Version command - show relfs version."""

import click
from ... import __version__


@click.command()
def version():
    """Show relfs version."""
    click.echo(f"relfs version {__version__}")
