"""
Composition context logger.

Provides logging interface for composition context with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[compose]"


# Wrapper functions with automatic [compose] prefix


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level composition-specific logging helpers


def log_registry_loaded(section_ids, types_path) -> None:
    """Log which predefined sections were discovered."""
    _log_debug(f"Loaded {len(section_ids)} section types from {types_path}")
    _log_debug(f"  Sections: {', '.join(section_ids)}")


def log_transition(action: str, key: str, changed: bool) -> None:
    """
    Log a state transition.

    Args:
        action: Transition name ("add", "delete", ...)
        key: Section key the transition targeted
        changed: False when the transition was a no-op
    """
    if changed:
        _log_debug(f"{action} {key}")
    else:
        _log_debug(f"{action} {key}: no change")


def log_render(section_count: int, length: int) -> None:
    """Log a completed render."""
    _log_debug(f"Rendered {section_count} section(s) after title block ({length} chars)")
