"""
Section Identifiers

Active sections are either predefined (a fixed template from the section registry) or
custom (a free-form heading and body numbered from a monotonic counter). Both expose a
string ``key`` used for field values and on the command line; ``parse_section_key`` is
the single place that turns such a key back into an identifier.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Union

from readmegen.contexts.composition.defaults import CUSTOM_KEY_PREFIX, TITLE_BLOCK_ID
from readmegen.contexts.composition.exceptions import UnknownSectionError

CUSTOM_KEY_PATTERN = re.compile(rf"^{re.escape(CUSTOM_KEY_PREFIX)}(\d+)$")


@dataclass(frozen=True)
class PredefinedSection:
    """
    Section backed by a registry descriptor and template.

    Attributes:
        section_id: Registry identifier (e.g., 'features', 'license')
    """

    section_id: str

    @property
    def key(self) -> str:
        return self.section_id

    @property
    def is_custom(self) -> bool:
        return False


@dataclass(frozen=True)
class CustomSection:
    """
    Free-form section with a user-supplied title.

    Attributes:
        index: Counter value assigned at creation. Never reused within a state history.
    """

    index: int

    @property
    def key(self) -> str:
        return f"{CUSTOM_KEY_PREFIX}{self.index}"

    @property
    def is_custom(self) -> bool:
        return True


SectionRef = Union[PredefinedSection, CustomSection]

# Always first in the active order, rendered unconditionally
TITLE_BLOCK = PredefinedSection(TITLE_BLOCK_ID)


def parse_section_key(key: str, predefined_ids: Iterable[str]) -> SectionRef:
    """
    Resolve a section key to its identifier.

    Args:
        key: Key as shown to the user ('features', 'custom-2', ...)
        predefined_ids: Identifiers known to the section registry

    Returns:
        PredefinedSection or CustomSection

    Raises:
        UnknownSectionError: If the key matches neither form

    Examples:
        >>> parse_section_key("custom-2", ["features"])
        CustomSection(index=2)
        >>> parse_section_key("features", ["features"])
        PredefinedSection(section_id='features')
    """
    key = key.strip()
    predefined_ids = list(predefined_ids)

    if key in predefined_ids:
        return PredefinedSection(key)

    match = CUSTOM_KEY_PATTERN.match(key)
    if match:
        return CustomSection(int(match.group(1)))

    raise UnknownSectionError(key, available=predefined_ids)
