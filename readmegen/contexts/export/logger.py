"""
Export context logger.

Provides logging interface for export context with automatic [export] prefix.
All export modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[export]"


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [export] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_copy_result(length: int, error: Exception = None) -> None:
    """Log the outcome of a clipboard copy."""
    if error is None:
        _log_success(f"Copied README to clipboard ({length} chars)")
    else:
        _log_error(f"Failed to copy text: {error}")


def log_saved(path, length: int) -> None:
    """Log a written README file."""
    _log_success(f"Saved README ({length} chars)")
    _log_info(f"  Output: {path}")
