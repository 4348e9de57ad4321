"""Breadth-first search for a relative file path inside a directory tree."""

import os
from typing import Callable, Dict, List, Optional, Tuple
from ..paths.resolver import PathLike, get_base_dir, join_path, resolve_path
from ..utils.errors import TargetNotFoundError
from ..utils.logging import get_logger
from .lister import list_subdirectories
from .models import SearchResult, SearchStatus

logger = get_logger("search.finder")

Lister = Callable[[str, Optional[str]], List[str]]


class FileFinder:
    """
    Find the shallowest directory under a start directory holding a file.

    The frontier is a plain list consumed by an index cursor: directories are
    appended at the end and probed from the front, so every directory at depth
    ``d`` is probed before any at depth ``d + 1``. Siblings follow the order in
    which the lister returns them.
    """

    def __init__(
        self,
        base_dir: Optional[PathLike] = None,
        exists: Optional[Callable[[str], bool]] = None,
        lister: Optional[Lister] = None,
        detect_cycles: bool = False,
        skip_unreadable: bool = False,
    ):
        """
        Args:
            base_dir: Base directory for relative paths (defaults to the cwd
                at the time of each search)
            exists: Existence probe taking an absolute path
            lister: Subdirectory lister taking ``(path, base_dir)``
            detect_cycles: Do not enqueue a directory whose real path was
                already enqueued
            skip_unreadable: Skip subdirectories that raise PermissionError
                when listed instead of aborting the search
        """
        self.base_dir = base_dir
        self.exists = exists or os.path.exists
        self.lister = lister or list_subdirectories
        self.detect_cycles = detect_cycles
        self.skip_unreadable = skip_unreadable

    def find(self, start_dir: PathLike, target: PathLike) -> str:
        """
        Search ``start_dir`` breadth-first for ``target``.

        Returns:
            Path to the file, relative to the base directory

        Raises:
            TargetNotFoundError: If no directory in the tree holds the target
            DirectoryNotFoundError: If a directory to list does not exist
            PermissionError: If a directory cannot be listed
        """
        path, _ = self._walk(start_dir, target)
        if path is None:
            raise TargetNotFoundError(os.fspath(target))
        return path

    def search(self, start_dir: PathLike, target: PathLike) -> SearchResult:
        """Like :meth:`find`, but report the outcome as a SearchResult."""
        target = os.fspath(target)
        progress = {"visited": 0}
        try:
            path, visited = self._walk(start_dir, target, progress)
        except OSError as e:
            return SearchResult(
                status=SearchStatus.ERROR,
                target=target,
                error_kind=type(e).__name__,
                message=str(e),
                visited=progress["visited"],
            )
        if path is None:
            return SearchResult(
                status=SearchStatus.NOT_FOUND,
                target=target,
                message=f"File not found: {target}",
                visited=visited,
            )
        return SearchResult(status=SearchStatus.FOUND, target=target, path=path, visited=visited)

    def _walk(
        self,
        start_dir: PathLike,
        target: PathLike,
        progress: Optional[Dict[str, int]] = None,
    ) -> Tuple[Optional[str], int]:
        base = get_base_dir(self.base_dir)
        start_dir = os.fspath(start_dir)
        target = os.fspath(target)

        frontier = [start_dir]
        seen = set()
        if self.detect_cycles:
            seen.add(os.path.realpath(resolve_path(start_dir, base)))

        index = 0
        while index < len(frontier):
            current = frontier[index]
            if progress is not None:
                progress["visited"] = index + 1
            relative = join_path(current, target)
            candidate = resolve_path(relative, base)
            logger.debug(f"Probing {candidate} (frontier index {index})")
            if self.exists(candidate):
                logger.info(f"Found {target} at {relative}")
                return relative, index + 1

            for name in self._list(current, base, index == 0):
                child = join_path(current, name)
                if self.detect_cycles:
                    real = os.path.realpath(resolve_path(child, base))
                    if real in seen:
                        logger.debug(f"Skipping already visited directory {child}")
                        continue
                    seen.add(real)
                frontier.append(child)
            index += 1

        logger.info(f"{target} not found under {start_dir} ({len(frontier)} directories searched)")
        return None, len(frontier)

    def _list(self, current: str, base: str, is_start: bool) -> List[str]:
        try:
            return self.lister(current, base)
        except PermissionError as e:
            if not self.skip_unreadable or is_start:
                raise
            logger.warning(f"Skipping unreadable directory {current}: {e}")
            return []


def find_file(
    start_dir: PathLike,
    target: PathLike,
    base_dir: Optional[PathLike] = None,
    detect_cycles: bool = False,
    skip_unreadable: bool = False,
) -> str:
    """Search ``start_dir`` breadth-first for ``target`` and return its relative path."""
    finder = FileFinder(base_dir=base_dir, detect_cycles=detect_cycles, skip_unreadable=skip_unreadable)
    return finder.find(start_dir, target)


def search_file(
    start_dir: PathLike,
    target: PathLike,
    base_dir: Optional[PathLike] = None,
    detect_cycles: bool = False,
    skip_unreadable: bool = False,
) -> SearchResult:
    """Search ``start_dir`` breadth-first for ``target`` without raising on failure."""
    finder = FileFinder(base_dir=base_dir, detect_cycles=detect_cycles, skip_unreadable=skip_unreadable)
    return finder.search(start_dir, target)
