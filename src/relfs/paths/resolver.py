"""Path resolution against a base directory.

Every helper in relfs takes paths relative to a base directory. The base is
the process working directory unless a caller passes ``base_dir`` explicitly.
"""

import importlib.util
import os
from typing import Optional, Union

PathLike = Union[str, os.PathLike]


def get_base_dir(base_dir: Optional[PathLike] = None) -> str:
    """Return the absolute base directory, reading the cwd when none is given."""
    if base_dir is None:
        return os.getcwd()
    return os.path.abspath(os.fspath(base_dir))


def join_path(*parts: PathLike) -> str:
    """Join path parts with the platform separator and normalize the result."""
    return os.path.normpath(os.path.join(*(os.fspath(p) for p in parts)))


def resolve_path(relative_path: PathLike, base_dir: Optional[PathLike] = None) -> str:
    """
    Resolve a relative path against the base directory.

    Args:
        relative_path: Path relative to the base directory
        base_dir: Base directory (defaults to the current working directory)

    Returns:
        Absolute, normalized path. Existence is not checked.
    """
    return join_path(get_base_dir(base_dir), relative_path)


def get_dir_name(file_path: PathLike, base_dir: Optional[PathLike] = None) -> str:
    """Absolute directory name of the resolved path."""
    return os.path.dirname(resolve_path(file_path, base_dir))


def get_relative_dir_name(file_path: PathLike, base_dir: Optional[PathLike] = None) -> str:
    """
    Directory name of a path with the base directory prefix stripped.

    ``sub/file.txt`` yields ``./sub``; a file directly in the base yields ``""``.
    A directory outside the base keeps its ``..`` prefix (``../other``).
    """
    base = get_base_dir(base_dir)
    dirname = get_dir_name(file_path, base)
    try:
        relative = os.path.relpath(dirname, base)
    except ValueError:
        # Different drive on Windows
        return dirname
    if relative == os.curdir:
        return ""
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return relative
    return f".{os.sep}{relative}"


def get_base_name(file_path: PathLike) -> str:
    """Final component of a path."""
    return os.path.basename(os.fspath(file_path))


def is_directory(dir_path: PathLike, base_dir: Optional[PathLike] = None) -> bool:
    """True only when the resolved path is an existing directory."""
    try:
        return os.path.isdir(resolve_path(dir_path, base_dir))
    except (OSError, ValueError):
        return False


def get_relative_to_workspace(file_path: str, base_dir: Optional[PathLike] = None) -> str:
    """
    Resolve a file path or importable module name relative to the base.

    A directory resolves to its ``__init__.py`` and a bare file name may omit
    the ``.py`` suffix. When no file matches, ``file_path`` is looked up as a
    module name.

    Returns:
        Path of the form ``./<relative path>``

    Raises:
        ModuleNotFoundError: If neither a file nor a module can be resolved
    """
    base = get_base_dir(base_dir)
    source = _resolve_source_file(resolve_path(file_path, base))
    if source is None:
        source = _resolve_module_origin(file_path)
    if source is None:
        raise ModuleNotFoundError(f"Cannot resolve file or module: {file_path}")
    return f"./{os.path.relpath(source, base)}"


def _resolve_source_file(path: str) -> Optional[str]:
    if os.path.isfile(path):
        return path
    if os.path.isdir(path):
        init_file = os.path.join(path, "__init__.py")
        if os.path.isfile(init_file):
            return init_file
        return None
    if os.path.isfile(f"{path}.py"):
        return f"{path}.py"
    return None


def _resolve_module_origin(name: str) -> Optional[str]:
    try:
        spec = importlib.util.find_spec(name)
    except (ImportError, ValueError):
        return None
    if spec is None or not spec.origin or not os.path.isfile(spec.origin):
        return None
    return spec.origin
