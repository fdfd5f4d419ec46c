"""
Composition Registries

Centralized registries for loading and caching section templates and section descriptors.

Each section type lives in its own directory under the types path:

    types/{section_id}/template.md.jinja   Markdown fragment template
    types/{section_id}/section.yaml        descriptor (predefined sections only)

Directories without a descriptor (the title block and the custom section template) are
template-only and never offered as predefined sections.
"""

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)
from omegaconf import OmegaConf

from readmegen.contexts.composition.defaults import DESCRIPTOR_FILENAME, TEMPLATE_FILENAME
from readmegen.contexts.composition.exceptions import SectionTemplateError, UnknownSectionError
from readmegen.contexts.composition.logger import log_registry_loaded

load_dotenv()
TYPES_PATH = Path(
    os.getenv("READMEGEN_SECTION_TYPES_PATH", str(Path(__file__).parent / "types"))
)


def bullet_list(text: str) -> str:
    """
    Turn one-item-per-line text into a Markdown bullet list.

    Lines are trimmed and blank lines dropped. Returns an empty string when nothing is
    left so templates can fall back with ``or``.
    """
    if not text:
        return ""

    items = [line.strip() for line in text.split("\n")]
    return "\n".join(f"- {item}" for item in items if item)


class InputShape(str, Enum):
    """How a section's field is edited."""

    TEXT = "text"
    TEXTAREA = "textarea"


@dataclass(frozen=True)
class SectionDescriptor:
    """
    Predefined section metadata.

    Attributes:
        section_id: Identifier and type directory name
        name: Display name ('Features')
        placeholder: Hint shown in an empty input
        input_shape: Single-line or multi-line input
        rows: Row count for multi-line inputs
        example: Text rendered when the field is empty
        position: Sort key for listing sections
    """

    section_id: str
    name: str
    placeholder: str
    input_shape: InputShape
    rows: int
    example: str
    position: int = 0

    @property
    def is_multiline(self) -> bool:
        return self.input_shape is InputShape.TEXTAREA


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for Markdown sections.

    Templates are stored in {types_base_path}/{type_name}/template.md.jinja and use the
    standard Jinja2 delimiters. Autoescaping is off; field text is emitted verbatim.
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            types_base_path: Base path for type directories. Defaults to
                           READMEGEN_SECTION_TYPES_PATH from environment
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path), encoding="utf-8"),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=False,
            lstrip_blocks=False,
            # Fragments are concatenated, so each keeps its closing newline
            keep_trailing_newline=True,
        )
        self.env.filters["bullet_list"] = bullet_list

    def get_template(self, type_name: str) -> Template:
        """
        Get a template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'features')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if type_name in self._cache:
            return self._cache[type_name]

        template_path = f"{type_name}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for type '{type_name}' at {self.types_base_path / template_path}"
            ) from e

        self._cache[type_name] = template
        return template

    def render(self, type_name: str, **context: Any) -> str:
        """
        Render a type's template.

        Raises:
            SectionTemplateError: If the template is missing, malformed, or references
                                  an undefined variable
        """
        try:
            return self.get_template(type_name).render(**context)
        except TemplateError as e:
            raise SectionTemplateError(
                f"Failed to render section '{type_name}'",
                section_id=type_name,
                template_path=self.get_template_path(type_name),
                original_error=e,
            ) from e

    def get_template_path(self, type_name: str) -> Path:
        """Get the file path for a type's template."""
        return self.types_base_path / type_name / TEMPLATE_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """Check if a template is in the cache."""
        return type_name in self._cache


class SectionRegistry:
    """
    Registry of predefined section descriptors.

    Descriptors are read once, at construction, from every type directory that holds a
    section.yaml. They are ordered by their ``position`` field, then by id.
    """

    def __init__(self, types_base_path: Path = None, templates: TemplateRegistry = None):
        """
        Initialize the section registry.

        Args:
            types_base_path: Base path for type directories. Defaults to
                           READMEGEN_SECTION_TYPES_PATH from environment
            templates: Template registry to share. Created over the same path if omitted.
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self.templates = templates or TemplateRegistry(self.types_base_path)
        self._descriptors: Dict[str, SectionDescriptor] = self._load_descriptors()

        log_registry_loaded(self.section_ids, self.types_base_path)

    def _load_descriptors(self) -> Dict[str, SectionDescriptor]:
        descriptors = []

        for config_path in sorted(self.types_base_path.glob(f"*/{DESCRIPTOR_FILENAME}")):
            section_id = config_path.parent.name
            config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
            descriptors.append(_build_descriptor(section_id, config))

        descriptors.sort(key=lambda d: (d.position, d.section_id))
        return {d.section_id: d for d in descriptors}

    @property
    def section_ids(self) -> List[str]:
        """Predefined section ids in display order."""
        return list(self._descriptors)

    def descriptors(self) -> List[SectionDescriptor]:
        """Predefined section descriptors in display order."""
        return list(self._descriptors.values())

    def is_predefined(self, section_id: str) -> bool:
        return section_id in self._descriptors

    def get_descriptor(self, section_id: str) -> SectionDescriptor:
        """
        Get a descriptor by id.

        Raises:
            UnknownSectionError: If no predefined section has this id
        """
        try:
            return self._descriptors[section_id]
        except KeyError:
            raise UnknownSectionError(section_id, available=self.section_ids) from None

    def get_config_path(self, section_id: str) -> Path:
        """Get the file path for a section's descriptor."""
        return self.types_base_path / section_id / DESCRIPTOR_FILENAME


def _build_descriptor(section_id: str, config: Dict[str, Any]) -> SectionDescriptor:
    """Build a descriptor from a loaded section.yaml, filling optional fields."""
    input_shape = InputShape(config.get("input", InputShape.TEXT.value))
    return SectionDescriptor(
        section_id=section_id,
        name=config.get("name", section_id.replace("_", " ").title()),
        placeholder=config.get("placeholder", ""),
        input_shape=input_shape,
        rows=int(config.get("rows", 1)),
        example=config.get("example", ""),
        position=int(config.get("position", 0)),
    )


@lru_cache(maxsize=None)
def get_section_registry(types_base_path: Path = None) -> SectionRegistry:
    """
    Get the shared registry for a types path.

    Registries are cached per path so templates are compiled once per process.
    """
    return SectionRegistry(types_base_path)
