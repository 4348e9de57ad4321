from .resolver import (
    get_base_dir,
    join_path,
    resolve_path,
    get_dir_name,
    get_relative_dir_name,
    get_base_name,
    is_directory,
    get_relative_to_workspace,
)

__all__ = [
    "get_base_dir",
    "join_path",
    "resolve_path",
    "get_dir_name",
    "get_relative_dir_name",
    "get_base_name",
    "is_directory",
    "get_relative_to_workspace",
]
