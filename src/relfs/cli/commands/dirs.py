"""Dirs command - list the entries of a directory in host order."""

import sys
import click
from ...search.lister import get_file_list, list_subdirectories
from ..utils import format_error, resolve_base_dir


@click.command()
@click.argument('path', default='.')
@click.option('--base-dir', '-b', type=click.Path(), help='Directory relative paths are resolved against (default: cwd)')
@click.option('--all', 'show_all', is_flag=True, help='List files as well as directories')
def dirs(path, base_dir, show_all):
    """List the subdirectories of PATH, one per line."""
    try:
        base = resolve_base_dir(base_dir)
        names = get_file_list(path, base) if show_all else list_subdirectories(path, base)
    except OSError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    for name in names:
        click.echo(name)
