"""Awaitable wrappers running the blocking helpers on a worker thread."""

import asyncio
from typing import Any, List, Optional
from ..contracts.file_properties import FileProperties
from ..paths.resolver import PathLike
from ..search.finder import find_file
from ..search.lister import list_subdirectories
from .files import (
    create_file_if_not_exists,
    get_json,
    read_file,
    set_json,
    write_file,
)


async def write_file_async(
    file_path: PathLike,
    src: str,
    properties: Optional[FileProperties] = None,
    base_dir: Optional[PathLike] = None,
) -> bool:
    return await asyncio.to_thread(write_file, file_path, src, properties, base_dir)


async def read_file_async(file_path: PathLike, base_dir: Optional[PathLike] = None) -> str:
    return await asyncio.to_thread(read_file, file_path, base_dir)


async def get_json_async(file_path: PathLike, base_dir: Optional[PathLike] = None) -> Any:
    return await asyncio.to_thread(get_json, file_path, base_dir)


async def set_json_async(file_path: PathLike, value: Any, base_dir: Optional[PathLike] = None) -> None:
    await asyncio.to_thread(set_json, file_path, value, base_dir)


async def create_file_if_not_exists_async(file_path: PathLike, base_dir: Optional[PathLike] = None) -> bool:
    return await asyncio.to_thread(create_file_if_not_exists, file_path, base_dir)


async def list_subdirectories_async(dir_path: PathLike, base_dir: Optional[PathLike] = None) -> List[str]:
    return await asyncio.to_thread(list_subdirectories, dir_path, base_dir)


async def find_file_async(
    start_dir: PathLike,
    target: PathLike,
    base_dir: Optional[PathLike] = None,
    detect_cycles: bool = False,
    skip_unreadable: bool = False,
) -> str:
    """Run :func:`relfs.search.find_file` on a worker thread."""
    return await asyncio.to_thread(
        find_file,
        start_dir,
        target,
        base_dir,
        detect_cycles,
        skip_unreadable,
    )
