from .file_properties import (
    FileProperties,
    default_file_properties,
    get_default_file_properties,
    set_default_file_properties,
)

__all__ = [
    "FileProperties",
    "default_file_properties",
    "get_default_file_properties",
    "set_default_file_properties",
]
