"""Directory listing in host order."""

import os
from typing import List, Optional
from ..paths.resolver import PathLike, resolve_path
from ..utils.errors import DirectoryNotFoundError


def list_subdirectories(dir_path: PathLike, base_dir: Optional[PathLike] = None) -> List[str]:
    """
    List the names of the immediate subdirectories of a directory.

    Names come back in the order the filesystem reports them; no sorting is
    applied. Symlinks to directories count as directories.

    Args:
        dir_path: Directory path relative to the base directory
        base_dir: Base directory (defaults to the current working directory)

    Returns:
        Subdirectory base names

    Raises:
        DirectoryNotFoundError: If the directory does not exist
        PermissionError: If the directory cannot be read
    """
    resolved = resolve_path(dir_path, base_dir)
    try:
        with os.scandir(resolved) as entries:
            return [entry.name for entry in entries if _is_dir(entry)]
    except FileNotFoundError as e:
        raise DirectoryNotFoundError(os.fspath(dir_path)) from e


def get_file_list(dir_path: PathLike, base_dir: Optional[PathLike] = None) -> List[str]:
    """List every entry name (files and directories) of a directory, host order."""
    resolved = resolve_path(dir_path, base_dir)
    try:
        return os.listdir(resolved)
    except FileNotFoundError as e:
        raise DirectoryNotFoundError(os.fspath(dir_path)) from e


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        # Broken symlink or entry removed mid-scan
        return False
