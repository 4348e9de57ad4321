"""Config commands - inspect and initialise relfs settings."""

import sys
from pathlib import Path
import click
import yaml
from ...config import load_settings, save_config
from ...config.paths import get_config_path, get_user_config_path
from ...utils.errors import ConfigError
from ..utils import format_error


@click.group()
def config():
    """Inspect relfs configuration."""
    pass


@config.command()
@click.option('--config', 'config_path', type=click.Path(), help='Config YAML file')
def show(config_path):
    """Print the effective settings as YAML."""
    try:
        settings = load_settings(config_path, apply=False)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    click.echo(yaml.safe_dump(settings.model_dump(), default_flow_style=False, sort_keys=False), nl=False)


@config.command()
def path():
    """Print the config file in effect (project first, then user)."""
    click.echo(str(get_config_path()))


@config.command()
@click.option('--project', is_flag=True, help='Write .relfs/config.yaml in the current directory')
@click.option('--force', is_flag=True, help='Replace an existing config file')
def init(project, force):
    """Write a config file holding the default settings."""
    target = Path.cwd() / ".relfs" / "config.yaml" if project else get_user_config_path()
    if target.exists() and not force:
        click.echo(format_error(f"Config file already exists: {target}", suggestion="Use --force to replace it"), err=True)
        sys.exit(1)

    try:
        save_config(load_settings(apply=False).model_dump(), target)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    click.echo(f"Wrote {target}")
