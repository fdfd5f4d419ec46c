"""
Editor Context

Responsibilities:
- Owns the in-memory README state for one session
- Maps user commands to composition transitions and export actions

Owns: Session state, command dispatch
Never: Persists state between sessions
"""

from readmegen.contexts.editor.builder import build_state
from readmegen.contexts.editor.session import CommandResult, EditorSession

__all__ = ["CommandResult", "EditorSession", "build_state"]
