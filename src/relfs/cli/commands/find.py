"""Find command - breadth-first search for a file under a directory."""

import json
import sys
import click
from ...config import load_settings
from ...search.finder import FileFinder
from ...utils.errors import RelfsError
from ...utils.logging import get_logger
from ..utils import configure_verbosity, format_error, resolve_base_dir

logger = get_logger("cli.find")


@click.command()
@click.argument('start_dir')
@click.argument('target')
@click.option('--base-dir', '-b', type=click.Path(), help='Directory relative paths are resolved against (default: cwd)')
@click.option('--json', 'as_json', is_flag=True, help='Output the search result as JSON')
@click.option('--detect-cycles/--no-detect-cycles', default=None, help='Do not revisit directories reached through symlinks (default: from config)')
@click.option('--skip-unreadable/--no-skip-unreadable', default=None, help='Skip subdirectories that cannot be listed (default: from config)')
@click.option('--config', 'config_path', type=click.Path(), help='Config YAML file')
@click.option('--verbose', '-v', count=True, help='Log progress (-vv for every probe)')
def find(start_dir, target, base_dir, as_json, detect_cycles, skip_unreadable, config_path, verbose):
    """
    Find TARGET in START_DIR or the shallowest subdirectory holding it.

    Prints the path of the file relative to the base directory. Exits with
    status 1 when the file is not found or the tree cannot be read.
    """
    configure_verbosity(verbose)
    try:
        settings = load_settings(config_path)
        base = resolve_base_dir(base_dir)
    except (RelfsError, FileNotFoundError) as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    finder = FileFinder(
        base_dir=base,
        detect_cycles=settings.finder.detect_cycles if detect_cycles is None else detect_cycles,
        skip_unreadable=settings.finder.skip_unreadable if skip_unreadable is None else skip_unreadable,
    )
    result = finder.search(start_dir, target)

    if as_json:
        click.echo(json.dumps(result.model_dump(), indent=2))
    elif result.found:
        click.echo(result.path)
    elif result.error_kind:
        click.echo(format_error(f"{result.error_kind}: {result.message}"), err=True)
    else:
        click.echo(
            format_error(result.message, suggestion=f"Searched {result.visited} directories under {start_dir}"),
            err=True,
        )

    if not result.found:
        sys.exit(1)
