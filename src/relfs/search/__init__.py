from .finder import FileFinder, find_file, search_file
from .lister import list_subdirectories, get_file_list
from .models import SearchResult, SearchStatus, FinderSettings

__all__ = [
    "FileFinder",
    "find_file",
    "search_file",
    "list_subdirectories",
    "get_file_list",
    "SearchResult",
    "SearchStatus",
    "FinderSettings",
]
