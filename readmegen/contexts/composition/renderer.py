"""
Markdown Renderer

Pure rendering of a README from field values, the active section order, and custom
section titles. The title block is always rendered first; every other fragment follows
in order. Fragments are concatenated and the result is trimmed.
"""

from typing import Mapping, Sequence

from readmegen.contexts.composition.defaults import (
    CUSTOM_TYPE_ID,
    DEFAULT_CUSTOM_TITLE,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    DESCRIPTION_FIELD,
    TITLE_BLOCK_ID,
    TITLE_FIELD,
)
from readmegen.contexts.composition.logger import log_render
from readmegen.contexts.composition.registries import SectionRegistry, get_section_registry
from readmegen.contexts.composition.sections import TITLE_BLOCK, CustomSection, SectionRef
from readmegen.contexts.composition.state import ReadmeState


def render_title_block(values: Mapping[str, str], registry: SectionRegistry) -> str:
    return registry.templates.render(
        TITLE_BLOCK_ID,
        title=values.get(TITLE_FIELD, ""),
        description=values.get(DESCRIPTION_FIELD, ""),
        default_title=DEFAULT_TITLE,
        default_description=DEFAULT_DESCRIPTION,
    )


def render_section(
    section: SectionRef,
    values: Mapping[str, str],
    custom_titles: Mapping[str, str],
    registry: SectionRegistry,
) -> str:
    """
    Render one active section's Markdown fragment.

    Predefined sections fall back to their descriptor's example when the field is empty.
    Custom sections emit their stored title (or the default title) and raw body.
    """
    content = values.get(section.key) or ""

    if isinstance(section, CustomSection):
        return registry.templates.render(
            CUSTOM_TYPE_ID,
            title=custom_titles.get(section.key, ""),
            content=content,
            default_title=DEFAULT_CUSTOM_TITLE,
        )

    descriptor = registry.get_descriptor(section.section_id)
    return registry.templates.render(
        descriptor.section_id,
        content=content,
        example=descriptor.example,
    )


def render_markdown(
    values: Mapping[str, str],
    sections: Sequence[SectionRef],
    custom_titles: Mapping[str, str],
    registry: SectionRegistry = None,
) -> str:
    """
    Render a complete README.

    Args:
        values: Field text keyed by 'title', 'description', or section key
        sections: Active sections in output order. A leading title block entry is
                  accepted and skipped, since the title block is always rendered first.
        custom_titles: Custom section titles keyed by section key
        registry: Section registry (defaults to the shared one)

    Returns:
        Markdown with leading and trailing whitespace removed

    Examples:
        >>> render_markdown({"title": "Demo", "description": "A demo app"}, [], {})
        '# Demo\\n\\nA demo app'
    """
    registry = registry or get_section_registry()

    parts = [render_title_block(values, registry)]
    body = [section for section in sections if section != TITLE_BLOCK]

    for section in body:
        parts.append(render_section(section, values, custom_titles, registry))

    markdown = "".join(parts).strip()
    log_render(len(body), len(markdown))
    return markdown


def render_state(state: ReadmeState, registry: SectionRegistry = None) -> str:
    """Render the README for a state."""
    return render_markdown(state.values, state.sections, state.custom_titles, registry)
