"""
One-shot State Builder

Builds a ReadmeState from the flat option lists of the ``build`` command. Section
entries are applied in the order given, and a ``custom:<title>`` entry adds a custom
section at that point, so custom and predefined sections can be interleaved.
"""

from typing import Iterable, Optional

from readmegen.contexts.composition import (
    ReadmeState,
    SectionRegistry,
    add_custom_section,
    add_section,
    initial_state,
    update_field,
)
from readmegen.contexts.editor.session import unescape_newlines

CUSTOM_ENTRY_PREFIX = "custom:"


def parse_value_option(item: str):
    """
    Split a KEY=TEXT option into its key and unescaped text.

    Raises:
        ValueError: If the item has no '='
    """
    key, sep, text = item.partition("=")
    if not sep:
        raise ValueError(f"Expected KEY=TEXT, got '{item}'")
    return key.strip(), unescape_newlines(text)


def build_state(
    title: str = "",
    description: str = "",
    sections: Iterable[str] = (),
    customs: Iterable[str] = (),
    values: Iterable[str] = (),
    registry: Optional[SectionRegistry] = None,
) -> ReadmeState:
    """
    Apply build options to a fresh state.

    Args:
        title: Project title
        description: Project description
        sections: Predefined ids or 'custom:<title>' entries, in output order
        customs: Custom section titles appended after all ``sections`` entries
        values: KEY=TEXT field assignments, applied last

    Raises:
        UnknownSectionError: If a section or value key names no section
        ValueError: If a value entry is not KEY=TEXT
    """
    state = initial_state({"title": title, "description": description})

    for entry in sections:
        if entry.startswith(CUSTOM_ENTRY_PREFIX):
            state = add_custom_section(state, entry[len(CUSTOM_ENTRY_PREFIX):])
        else:
            state = add_section(state, entry.strip(), registry)

    for custom_title in customs:
        state = add_custom_section(state, custom_title)

    for item in values:
        key, text = parse_value_option(item)
        state = update_field(state, key, text, registry)

    return state
