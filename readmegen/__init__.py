"""
readmegen - README composition from ordered, templated sections

Users fill structured fields (title, description, features, installation, ...) and
readmegen assembles a Markdown document from fixed section templates. The result can be
previewed, copied to the clipboard, or saved as README.md.

Architecture:
- Composition Context: section registry, section ordering, Markdown rendering
- Export Context: clipboard copy and README.md download
- Editor Context: interactive session that owns the in-memory state
"""

__version__ = "0.1.0"
