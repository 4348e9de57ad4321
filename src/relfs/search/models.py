"""Pydantic models for search outcomes."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class SearchStatus(str, Enum):
    """Outcome of a file search."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class SearchResult(BaseModel):
    """Result of a breadth-first file search."""

    status: SearchStatus = Field(..., description="Search outcome")
    target: str = Field(..., description="Relative file path that was searched for")
    path: Optional[str] = Field(None, description="Relative path to the file when found")
    error_kind: Optional[str] = Field(None, description="Exception class name when the traversal failed")
    message: Optional[str] = Field(None, description="Human-readable error message")
    visited: int = Field(default=0, description="Number of directories probed")

    class Config:
        use_enum_values = True

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND.value


class FinderSettings(BaseModel):
    """Optional traversal behaviour, all off by default."""

    detect_cycles: bool = Field(default=False, description="Skip directories already visited by real path")
    skip_unreadable: bool = Field(default=False, description="Skip subdirectories that cannot be listed")
