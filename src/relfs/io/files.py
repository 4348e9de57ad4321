"""Blocking file helpers working on paths relative to a base directory."""

import json
import os
from typing import Any, BinaryIO, Optional
from ..contracts.file_properties import FileProperties, get_default_file_properties
from ..paths.resolver import PathLike, join_path, resolve_path
from ..utils.errors import (
    DeletionError,
    FileExistsPolicyError,
    InvalidJSONTypeError,
    ScriptNameError,
)
from ..utils.logging import get_logger

logger = get_logger("io.files")


def _policy(properties: Optional[FileProperties]) -> FileProperties:
    if properties is None:
        return get_default_file_properties()
    return properties


def write_file(
    file_path: PathLike,
    src: str,
    properties: Optional[FileProperties] = None,
    base_dir: Optional[PathLike] = None,
) -> bool:
    """
    Write UTF-8 text, honouring the file policy when the file already exists.

    Args:
        file_path: File path relative to the base directory
        src: Text to write
        properties: File policy (defaults to the process-wide policy)
        base_dir: Base directory (defaults to the current working directory)

    Returns:
        True if the file was written, False if an existing file was left as is

    Raises:
        FileExistsPolicyError: If the file exists and the policy sets file_exists_error
    """
    properties = _policy(properties)
    resolved = resolve_path(file_path, base_dir)

    if os.path.exists(resolved):
        if properties.file_exists_error:
            raise FileExistsPolicyError(f"File {file_path} already exists.")
        if not properties.override_files:
            logger.debug(f"Keeping existing file {resolved}")
            return False

    with open(resolved, 'w', encoding='utf-8') as f:
        f.write(src)
    return True


def read_file(file_path: PathLike, base_dir: Optional[PathLike] = None) -> str:
    """Read a UTF-8 text file."""
    with open(resolve_path(file_path, base_dir), 'r', encoding='utf-8') as f:
        return f.read()


def get_json(file_path: PathLike, base_dir: Optional[PathLike] = None) -> Any:
    """Read and parse a JSON file."""
    return json.loads(read_file(file_path, base_dir))


def set_json(file_path: PathLike, value: Any, base_dir: Optional[PathLike] = None) -> None:
    """
    Write a JSON object or array with two-space indentation, replacing any existing file.

    Raises:
        InvalidJSONTypeError: If value is not a dict or list
    """
    if not isinstance(value, (dict, list)):
        raise InvalidJSONTypeError(f"json is not a correct type: {type(value).__name__}")
    write_file(file_path, json.dumps(value, indent=2), FileProperties(override_files=True), base_dir)


def create_file_if_not_exists(file_path: PathLike, base_dir: Optional[PathLike] = None) -> bool:
    """Create an empty file unless one exists. Returns True when a file was created."""
    resolved = resolve_path(file_path, base_dir)
    if os.path.exists(resolved):
        return False
    with open(resolved, 'w', encoding='utf-8'):
        pass
    return True


def create_dir(
    dir_path: PathLike,
    properties: Optional[FileProperties] = None,
    base_dir: Optional[PathLike] = None,
) -> bool:
    """
    Create a single directory level. The parent must already exist.

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        FileExistsPolicyError: If the path exists and the policy sets dir_exists_error
    """
    properties = _policy(properties)
    resolved = resolve_path(dir_path, base_dir)
    if os.path.exists(resolved):
        if properties.dir_exists_error:
            raise FileExistsPolicyError(f"Directory {resolved} already exists.")
        return False
    os.mkdir(resolved)
    return True


def create_script(
    element: Any,
    dir_path: PathLike,
    properties: Optional[FileProperties] = None,
    extension: str = ".js",
    base_dir: Optional[PathLike] = None,
) -> bool:
    """
    Create a placeholder script file named after an element's ``name`` attribute.

    ``element`` is anything with a ``get(attribute)`` method, such as an
    ``xml.etree.ElementTree.Element``.

    Raises:
        ScriptNameError: If the element has no name
    """
    name = element.get("name")
    if not name:
        raise ScriptNameError("<script name=undefined")
    return write_file(join_path(dir_path, f"{name}{extension}"), "empty", properties, base_dir)


def delete_file(
    file_path: PathLike,
    properties: Optional[FileProperties] = None,
    base_dir: Optional[PathLike] = None,
) -> None:
    """
    Delete a file.

    A missing file is ignored. Other failures are logged and ignored unless
    the policy sets file_exists_error, in which case they are raised.
    """
    _remove(os.unlink, file_path, _policy(properties), base_dir)


def delete_dir(
    dir_path: PathLike,
    properties: Optional[FileProperties] = None,
    base_dir: Optional[PathLike] = None,
) -> None:
    """Delete an empty directory, with the same error policy as :func:`delete_file`."""
    _remove(os.rmdir, dir_path, _policy(properties), base_dir)


def _remove(remover, path: PathLike, properties: FileProperties, base_dir: Optional[PathLike]) -> None:
    resolved = resolve_path(path, base_dir)
    try:
        remover(resolved)
    except FileNotFoundError:
        logger.debug(f"Nothing to delete at {resolved}")
    except OSError as e:
        if properties.file_exists_error:
            raise
        logger.warning(f"Could not delete {resolved}: {e}")


def ensure_deleting(file_path: PathLike, base_dir: Optional[PathLike] = None) -> None:
    """
    Delete a file if it exists.

    Raises:
        DeletionError: If the file exists but cannot be deleted
    """
    resolved = resolve_path(file_path, base_dir)
    if not os.path.exists(resolved):
        return
    try:
        os.unlink(resolved)
    except OSError as e:
        raise DeletionError(f"Could not delete the file: {e}") from e


def get_read_stream(file_path: PathLike, base_dir: Optional[PathLike] = None) -> BinaryIO:
    """Open a file for binary reading. The caller closes the stream."""
    return open(resolve_path(file_path, base_dir), 'rb')


def get_write_stream(file_path: PathLike, base_dir: Optional[PathLike] = None) -> BinaryIO:
    """Open a file for binary writing, truncating it. The caller closes the stream."""
    return open(resolve_path(file_path, base_dir), 'wb')
