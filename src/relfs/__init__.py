"""relfs - Filesystem helpers resolving paths against a base directory."""

from .contracts.file_properties import FileProperties, default_file_properties
from .paths.resolver import (
    join_path,
    resolve_path,
    get_dir_name,
    get_relative_dir_name,
    get_base_name,
    is_directory,
    get_relative_to_workspace,
)
from .search.finder import FileFinder, find_file, search_file
from .search.lister import list_subdirectories, get_file_list
from .search.models import SearchResult, SearchStatus
from .io.files import (
    write_file,
    read_file,
    get_json,
    set_json,
    create_file_if_not_exists,
    create_dir,
    create_script,
    delete_file,
    delete_dir,
    ensure_deleting,
    get_read_stream,
    get_write_stream,
)
from .io.async_files import (
    write_file_async,
    read_file_async,
    get_json_async,
    set_json_async,
    create_file_if_not_exists_async,
    list_subdirectories_async,
    find_file_async,
)
from .utils.errors import (
    RelfsError,
    DirectoryNotFoundError,
    TargetNotFoundError,
    FileExistsPolicyError,
)
from .utils.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "FileProperties",
    "default_file_properties",
    "join_path",
    "resolve_path",
    "get_dir_name",
    "get_relative_dir_name",
    "get_base_name",
    "is_directory",
    "get_relative_to_workspace",
    "FileFinder",
    "find_file",
    "search_file",
    "list_subdirectories",
    "get_file_list",
    "SearchResult",
    "SearchStatus",
    "write_file",
    "read_file",
    "get_json",
    "set_json",
    "create_file_if_not_exists",
    "create_dir",
    "create_script",
    "delete_file",
    "delete_dir",
    "ensure_deleting",
    "get_read_stream",
    "get_write_stream",
    "write_file_async",
    "read_file_async",
    "get_json_async",
    "set_json_async",
    "create_file_if_not_exists_async",
    "list_subdirectories_async",
    "find_file_async",
    "RelfsError",
    "DirectoryNotFoundError",
    "TargetNotFoundError",
    "FileExistsPolicyError",
]

setup_logging()
