"""Configuration module: load file policy and finder settings."""

from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError
from ..contracts.file_properties import FileProperties, set_default_file_properties
from ..search.models import FinderSettings
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config, read_config_file, save_config, deep_merge
from .paths import get_config_path, get_defaults_path, get_user_config_path, get_project_config_path

logger = get_logger("config")


class Settings(BaseModel):
    """Validated relfs settings."""

    file_properties: FileProperties = Field(default_factory=FileProperties)
    finder: FinderSettings = Field(default_factory=FinderSettings)


def load_settings(config_path: Optional[str] = None, apply: bool = True) -> Settings:
    """
    Load settings from YAML.

    Packaged defaults are always read first. An explicit ``config_path`` is
    merged over them; otherwise the user and project configs are.
    The file policy of the result becomes the process-wide default unless
    ``apply`` is False.

    Args:
        config_path: Path to a config YAML file (optional)
        apply: Install the loaded file policy as the process-wide default

    Returns:
        Validated Settings

    Raises:
        ConfigError: If a config file cannot be loaded or is invalid
    """
    config = read_config_file(get_defaults_path())

    if config_path is not None:
        deep_merge(config, read_config_file(Path(config_path)))
        logger.info(f"Loaded configuration from {config_path}")
    else:
        deep_merge(config, load_config())

    settings = _validate(config)
    if apply:
        apply_settings(settings)
    return settings


def apply_settings(settings: Settings) -> None:
    """Make the settings' file policy the default for helpers called without one."""
    set_default_file_properties(settings.file_properties)
    logger.debug(f"Default file policy set to {settings.file_properties.model_dump()}")


def _validate(config: Dict[str, Any]) -> Settings:
    try:
        return Settings(**config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    except TypeError as e:
        raise ConfigError(f"Configuration sections must be mappings: {e}") from e


__all__ = [
    "Settings",
    "load_settings",
    "apply_settings",
    "load_config",
    "read_config_file",
    "save_config",
    "deep_merge",
    "get_config_path",
    "get_defaults_path",
    "get_user_config_path",
    "get_project_config_path",
]
