"""CLI utilities package."""

import logging
from typing import Optional
from ...utils.logging import setup_logging
from .file_resolver import resolve_base_dir


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.

    Args:
        message: Error message
        suggestion: Optional suggestion or help text

    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def configure_verbosity(verbose: int) -> None:
    """Raise relfs log level for -v (INFO) and -vv (DEBUG)."""
    if verbose >= 2:
        setup_logging(logging.DEBUG)
    elif verbose == 1:
        setup_logging(logging.INFO)


__all__ = ["resolve_base_dir", "format_error", "configure_verbosity"]
