"""
Default values for README composition.

Provides shared defaults used by:
- registries.py (locating section types and the fixed title block)
- renderer.py (fallback text for the title block and custom sections)
- sections.py (identifier formats)
"""

# The title/description block is always rendered first and is never reorderable
TITLE_BLOCK_ID = "title_description"

# Template-only type directory for free-form sections
CUSTOM_TYPE_ID = "custom"

# Custom section keys are "custom-0", "custom-1", ...
CUSTOM_KEY_PREFIX = "custom-"

# Field keys owned by the title block
TITLE_FIELD = "title"
DESCRIPTION_FIELD = "description"

DEFAULT_TITLE = "Project Title"
DEFAULT_DESCRIPTION = "A brief, one-sentence description of your project."
DEFAULT_CUSTOM_TITLE = "Custom Section"

TEMPLATE_FILENAME = "template.md.jinja"
DESCRIPTOR_FILENAME = "section.yaml"
