"""
Export Context

Responsibilities:
- Copies rendered Markdown to the system clipboard with a transient status
- Saves rendered Markdown as README.md

Owns: Clipboard access, README.md output
Never: Renders or modifies README content
"""

from readmegen.contexts.export.clipboard import ClipboardExporter, CopyStatus
from readmegen.contexts.export.download import README_FILENAME, save_markdown
from readmegen.contexts.export.exceptions import ExportError

__all__ = [
    "ClipboardExporter",
    "CopyStatus",
    "README_FILENAME",
    "save_markdown",
    "ExportError",
]
