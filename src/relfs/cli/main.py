"""Main CLI entry point for relfs."""

import click
from .commands.config import config
from .commands.dirs import dirs
from .commands.find import find
from .commands.version import version
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="relfs", message="%(prog)s version %(version)s")
def cli():
    """relfs - Filesystem helpers relative to a base directory."""
    pass


cli.add_command(find)
cli.add_command(dirs)
cli.add_command(config)
cli.add_command(version)
