"""
Composition Context

Responsibilities:
- Owns the registry of predefined README sections (descriptor + Markdown template)
- Represents section identifiers (predefined and custom) and the active section order
- Applies state transitions: add, delete, reorder, update field, add custom section
- Renders the active sections to a single Markdown document

Owns: Section registry, README state, Markdown rendering
Never: Touches the clipboard or the filesystem outside the section types directory
"""

from readmegen.contexts.composition.exceptions import SectionTemplateError, UnknownSectionError
from readmegen.contexts.composition.registries import (
    InputShape,
    SectionDescriptor,
    SectionRegistry,
    TemplateRegistry,
    get_section_registry,
)
from readmegen.contexts.composition.renderer import render_markdown, render_state
from readmegen.contexts.composition.sections import (
    TITLE_BLOCK,
    CustomSection,
    PredefinedSection,
    SectionRef,
    parse_section_key,
)
from readmegen.contexts.composition.state import (
    ReadmeState,
    add_custom_section,
    add_section,
    available_sections,
    can_add_custom_section,
    delete_section,
    initial_state,
    reorder_sections,
    resolve_key,
    section_label,
    shift_section,
    update_field,
)

__all__ = [
    # Registry
    "InputShape",
    "SectionDescriptor",
    "SectionRegistry",
    "TemplateRegistry",
    "get_section_registry",
    # Section identifiers
    "TITLE_BLOCK",
    "CustomSection",
    "PredefinedSection",
    "SectionRef",
    "parse_section_key",
    # State and transitions
    "ReadmeState",
    "initial_state",
    "update_field",
    "add_section",
    "add_custom_section",
    "can_add_custom_section",
    "delete_section",
    "reorder_sections",
    "shift_section",
    "available_sections",
    "resolve_key",
    "section_label",
    # Rendering
    "render_markdown",
    "render_state",
    # Errors
    "SectionTemplateError",
    "UnknownSectionError",
]
