"""
Editor context logger.

Provides logging interface for editor context with automatic [editor] prefix.
All editor modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from readmegen.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[editor]"


def setup_editor_logger(log_dir: Path, mode: str = "edit", console: bool = False) -> Path:
    """
    Setup logger for an editor session.

    Args:
        log_dir: Directory for this session
        mode: Session mode for provenance ("edit" or "build")
        console: Also log INFO and above to stderr

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="editor",
        log_dir=log_dir,
        extra_provenance={"Mode": mode},
        console=console,
    )


def _log_info(message: str) -> None:
    """Log info message with [editor] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [editor] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [editor] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_command(line: str) -> None:
    _log_debug(f"> {line}")


def log_command_failed(line: str, error: Exception) -> None:
    """Log a command that was rejected without changing state."""
    _log_warning(f"Command failed: {line!r}")
    _log_debug(f"  {type(error).__name__}: {error}")
