"""Custom exceptions for the export context."""

from pathlib import Path
from typing import Optional


class ExportError(Exception):
    """
    Exception raised when the rendered README cannot be written.

    Attributes:
        message: Error description
        path: Destination that failed
        original_error: Underlying OS error, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]
        if path:
            parts.append(f"Path: {path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
