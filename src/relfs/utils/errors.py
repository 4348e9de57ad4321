"""Custom exception classes for relfs."""


class RelfsError(Exception):
    """Base exception for all relfs errors."""
    pass


class DirectoryNotFoundError(RelfsError, FileNotFoundError):
    """Raised when a directory expected to exist does not."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory not found: {path}")


class TargetNotFoundError(RelfsError, FileNotFoundError):
    """Raised when a search exhausts the tree without finding the target."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"File not found: {target}")


class FileExistsPolicyError(RelfsError, FileExistsError):
    """Raised when a path already exists and the file policy forbids it."""
    pass


class InvalidJSONTypeError(RelfsError, TypeError):
    """Raised when a value that is not a JSON object or array is written."""
    pass


class ScriptNameError(RelfsError, ValueError):
    """Raised when a script element carries no name attribute."""
    pass


class DeletionError(RelfsError):
    """Raised when an existing file cannot be deleted."""
    pass


class ConfigError(RelfsError):
    """Raised when configuration is invalid or missing."""
    pass
