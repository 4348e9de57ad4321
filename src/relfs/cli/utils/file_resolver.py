"""Base directory resolution utilities for CLI."""

from pathlib import Path
from typing import Optional


def resolve_base_dir(base_dir: Optional[str]) -> Path:
    """
    Resolve the --base-dir option, defaulting to the current directory.

    Args:
        base_dir: User-provided directory, or None

    Returns:
        Resolved Path object

    Raises:
        FileNotFoundError: If the directory does not exist or is not a directory
    """
    if base_dir is None:
        return Path.cwd()

    path = Path(base_dir)
    if not path.is_absolute():
        path = Path.cwd() / path
    resolved_path = path.resolve()

    if not resolved_path.exists():
        raise FileNotFoundError(
            f"Base directory not found: {base_dir}. Please check the path and try again."
        )

    if not resolved_path.is_dir():
        raise FileNotFoundError(
            f"Base path is not a directory: {base_dir}. Please provide a directory."
        )

    return resolved_path
