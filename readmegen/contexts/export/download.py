"""
README Download

Writes the rendered README to ``README.md`` in a target directory, byte-for-byte the
same text that is previewed and copied.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from readmegen.contexts.export.exceptions import ExportError
from readmegen.contexts.export.logger import log_saved

load_dotenv()
OUTPUT_DIR = Path(os.getenv("READMEGEN_OUTPUT_DIR", "."))

README_FILENAME = "README.md"


def save_markdown(
    markdown: str,
    output_dir: Path = None,
    filename: str = README_FILENAME,
    overwrite: bool = False,
) -> Path:
    """
    Save rendered Markdown as a UTF-8 file.

    Args:
        markdown: Rendered README text
        output_dir: Destination directory (defaults to READMEGEN_OUTPUT_DIR, else cwd).
                    Created if missing.
        filename: File name, README.md unless overridden
        overwrite: Replace an existing file

    Returns:
        Path to the written file

    Raises:
        ExportError: If the file exists and overwrite is False, or the write fails
    """
    if output_dir is None:
        output_dir = OUTPUT_DIR

    output_path = Path(output_dir) / filename

    if output_path.exists() and not overwrite:
        raise ExportError(f"{filename} already exists (use overwrite to replace it)", output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write {filename}", output_path, e) from e

    log_saved(output_path, len(markdown))
    return output_path
