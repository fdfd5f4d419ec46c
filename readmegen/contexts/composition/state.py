"""
README State and Transitions

ReadmeState is the single in-memory model behind an editing session. It is immutable:
every transition below returns a new state (or the same object when nothing changes),
so callers can compare states by identity to skip re-rendering.

The title/description block is not stored in ``sections``; it is always first in
``active_order`` and cannot be deleted or moved.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Mapping, Optional, Tuple

from readmegen.contexts.composition.defaults import DESCRIPTION_FIELD, TITLE_FIELD
from readmegen.contexts.composition.exceptions import UnknownSectionError
from readmegen.contexts.composition.logger import log_transition
from readmegen.contexts.composition.registries import (
    SectionDescriptor,
    SectionRegistry,
    get_section_registry,
)
from readmegen.contexts.composition.sections import (
    TITLE_BLOCK,
    CustomSection,
    PredefinedSection,
    SectionRef,
    parse_section_key,
)
from readmegen.utils.ordering import move_item, shift_item

TITLE_FIELDS = (TITLE_FIELD, DESCRIPTION_FIELD)


@dataclass(frozen=True)
class ReadmeState:
    """
    Everything needed to render a README.

    Attributes:
        sections: Active sections after the title block, in output order
        values: Field text keyed by 'title', 'description', or a section key
        custom_titles: Custom section titles keyed by section key ('custom-0')
        next_custom_index: Counter for the next custom section
    """

    sections: Tuple[SectionRef, ...] = ()
    values: Mapping[str, str] = field(default_factory=dict)
    custom_titles: Mapping[str, str] = field(default_factory=dict)
    next_custom_index: int = 0

    @property
    def active_order(self) -> Tuple[SectionRef, ...]:
        """Full active order, title block first."""
        return (TITLE_BLOCK,) + self.sections

    @property
    def active_keys(self) -> List[str]:
        return [section.key for section in self.sections]

    def value(self, key: str) -> str:
        return self.values.get(key, "")

    def is_active(self, section: SectionRef) -> bool:
        return section in self.sections

    def custom_title(self, section: CustomSection) -> Optional[str]:
        return self.custom_titles.get(section.key)


def resolve_key(state: ReadmeState, key: str, registry: SectionRegistry = None) -> SectionRef:
    """
    Resolve a user-supplied key against the registry and this state's custom sections.

    The title block key resolves to TITLE_BLOCK so it can be used as a move target.

    Raises:
        UnknownSectionError: If the key is not a predefined id or a custom section that
                             exists (active or deleted) in this state
    """
    if key.strip() == TITLE_BLOCK.key:
        return TITLE_BLOCK

    registry = registry or get_section_registry()
    available = registry.section_ids + list(state.custom_titles)

    section = parse_section_key(key, registry.section_ids)
    if isinstance(section, CustomSection) and section.key not in state.custom_titles:
        raise UnknownSectionError(key, available=available)

    return section


def update_field(
    state: ReadmeState, key: str, value: str, registry: SectionRegistry = None
) -> ReadmeState:
    """
    Set the text of a field.

    Args:
        state: Current state
        key: 'title', 'description', or a section key
        value: New field text

    Raises:
        UnknownSectionError: If key names no field
    """
    if key not in TITLE_FIELDS:
        section = resolve_key(state, key, registry)
        if section == TITLE_BLOCK:
            raise UnknownSectionError(key, available=list(TITLE_FIELDS))
        key = section.key

    if state.values.get(key) == value:
        return state

    return replace(state, values={**state.values, key: value})


def add_section(
    state: ReadmeState, section_id: str, registry: SectionRegistry = None
) -> ReadmeState:
    """
    Append a predefined section. No-op if it is already active.

    Raises:
        UnknownSectionError: If section_id is not a predefined section
    """
    registry = registry or get_section_registry()
    registry.get_descriptor(section_id)

    section = PredefinedSection(section_id)
    if state.is_active(section):
        log_transition("add", section_id, changed=False)
        return state

    log_transition("add", section_id, changed=True)
    return replace(state, sections=state.sections + (section,))


def can_add_custom_section(title: str) -> bool:
    """Whether a custom section title would be accepted."""
    return bool(title and title.strip())


def add_custom_section(state: ReadmeState, title: str) -> ReadmeState:
    """
    Append a new custom section with an empty body.

    Empty or whitespace-only titles leave the state unchanged. The counter only moves
    forward, so keys of deleted custom sections are never handed out again.
    """
    if not can_add_custom_section(title):
        log_transition("add custom", repr(title), changed=False)
        return state

    section = CustomSection(state.next_custom_index)
    log_transition("add custom", section.key, changed=True)

    return replace(
        state,
        sections=state.sections + (section,),
        values={**state.values, section.key: ""},
        custom_titles={**state.custom_titles, section.key: title.strip()},
        next_custom_index=state.next_custom_index + 1,
    )


def delete_section(state: ReadmeState, section: SectionRef) -> ReadmeState:
    """
    Remove a section from the active order.

    Its stored value and title are kept, so re-adding a predefined section restores its
    text. Absent sections are a no-op.
    """
    if not state.is_active(section):
        log_transition("delete", section.key, changed=False)
        return state

    log_transition("delete", section.key, changed=True)
    return replace(state, sections=tuple(s for s in state.sections if s != section))


def reorder_sections(state: ReadmeState, source: SectionRef, target: SectionRef) -> ReadmeState:
    """
    Move source to target's position (drop source onto target).

    The move runs over the full active order, so dropping onto the title block puts
    the source first after it. The title block itself is not draggable. No-op if either
    section is not active.
    """
    if source == TITLE_BLOCK:
        log_transition("move", f"{source.key} -> {target.key}", changed=False)
        return state

    order = move_item(state.active_order, source, target)
    sections = tuple(section for section in order if section != TITLE_BLOCK)
    changed = sections != state.sections
    log_transition("move", f"{source.key} -> {target.key}", changed=changed)

    return replace(state, sections=sections) if changed else state


def shift_section(state: ReadmeState, section: SectionRef, offset: int) -> ReadmeState:
    """Move a section up (negative offset) or down (positive offset), clamped."""
    sections = tuple(shift_item(state.sections, section, offset))
    changed = sections != state.sections
    log_transition(f"shift {offset:+d}", section.key, changed=changed)

    return replace(state, sections=sections) if changed else state


def available_sections(
    state: ReadmeState, registry: SectionRegistry = None
) -> List[SectionDescriptor]:
    """Predefined sections that are not currently active, in display order."""
    registry = registry or get_section_registry()
    return [
        descriptor
        for descriptor in registry.descriptors()
        if not state.is_active(PredefinedSection(descriptor.section_id))
    ]


def section_label(state: ReadmeState, section: SectionRef, registry: SectionRegistry = None) -> str:
    """Display label for an active section."""
    if isinstance(section, CustomSection):
        return state.custom_title(section) or ""

    registry = registry or get_section_registry()
    return registry.get_descriptor(section.section_id).name


def initial_state(fields: Optional[Dict[str, str]] = None) -> ReadmeState:
    """Fresh state with only the title block active."""
    values = {TITLE_FIELD: "", DESCRIPTION_FIELD: ""}
    values.update(fields or {})
    return ReadmeState(values=values)
