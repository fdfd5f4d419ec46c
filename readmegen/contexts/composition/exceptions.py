"""Custom exceptions for the composition context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownSectionError(ValueError):
    """
    Exception raised when a key names neither a predefined nor a custom section.

    Attributes:
        key: The key that failed to resolve
        available: Keys that would have been accepted
    """

    def __init__(self, key: str, available: Optional[Iterable[str]] = None):
        self.key = key
        self.available = list(available) if available is not None else []

        message = f"Unknown section '{key}'"
        if self.available:
            message += f". Available sections: {', '.join(self.available)}"

        super().__init__(message)


class SectionTemplateError(Exception):
    """
    Exception raised when a section template fails to load or render.

    Attributes:
        message: Error description
        section_id: Section type whose template failed
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        section_id: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.section_id = section_id
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if section_id and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Section: {section_id}")

        if original_error:
            parts.append(f"\nOriginal error: {original_error}")

        super().__init__("\n".join(parts))
