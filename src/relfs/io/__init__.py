from .files import (
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
from .async_files import (
    write_file_async,
    read_file_async,
    get_json_async,
    set_json_async,
    create_file_if_not_exists_async,
    list_subdirectories_async,
    find_file_async,
)

__all__ = [
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
]
