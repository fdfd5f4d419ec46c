"""Unit tests for the section and template registries."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from readmegen.contexts.composition.exceptions import SectionTemplateError, UnknownSectionError
from readmegen.contexts.composition.registries import (
    InputShape,
    SectionRegistry,
    TemplateRegistry,
    bullet_list,
    get_section_registry,
)


@pytest.fixture
def registry():
    return get_section_registry()


@pytest.mark.unit
def test_predefined_sections_in_display_order(registry):
    assert registry.section_ids == [
        "features",
        "installation",
        "usage",
        "contributing",
        "license",
        "contact",
    ]


@pytest.mark.unit
def test_template_only_types_are_not_predefined(registry):
    """Test the title block and custom template are not offered as sections."""
    assert not registry.is_predefined("title_description")
    assert not registry.is_predefined("custom")


@pytest.mark.unit
def test_descriptor_fields(registry):
    features = registry.get_descriptor("features")

    assert features.name == "Features"
    assert features.input_shape is InputShape.TEXTAREA
    assert features.is_multiline
    assert features.rows == 4
    assert features.placeholder == "e.g.,- Feature 1\n- Feature 2"
    assert features.example.startswith("- Feature 1: A cool feature of your project.")


@pytest.mark.unit
def test_single_line_descriptors(registry):
    for section_id in ("license", "contact"):
        descriptor = registry.get_descriptor(section_id)
        assert descriptor.input_shape is InputShape.TEXT
        assert not descriptor.is_multiline


@pytest.mark.unit
def test_placeholder_and_example_are_separate(registry):
    license_ = registry.get_descriptor("license")

    assert license_.placeholder == "e.g., Distributed under the MIT License."
    assert license_.example == (
        "Distributed under the MIT License. See `LICENSE` for more information."
    )


@pytest.mark.unit
def test_multiline_example_preserved(registry):
    contact = registry.get_descriptor("contact")
    assert contact.example.split("\n")[1] == ""
    assert not contact.example.endswith("\n")


@pytest.mark.unit
def test_get_descriptor_unknown(registry):
    with pytest.raises(UnknownSectionError):
        registry.get_descriptor("badges")


@pytest.mark.unit
def test_shared_registry_is_cached():
    assert get_section_registry() is get_section_registry()


@pytest.mark.unit
def test_template_caching(registry):
    templates = TemplateRegistry(registry.types_base_path)

    template1 = templates.get_template("features")
    assert templates.is_cached("features")
    assert templates.get_template("features") is template1

    templates.clear_cache()
    assert not templates.is_cached("features")


@pytest.mark.unit
def test_get_template_not_found(registry):
    templates = TemplateRegistry(registry.types_base_path)

    with pytest.raises(TemplateNotFound):
        templates.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path(registry):
    path = registry.templates.get_template_path("usage")

    assert isinstance(path, Path)
    assert path.name == "template.md.jinja"
    assert path.parent.name == "usage"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("   \n\n  ", ""),
        ("One", "- One"),
        ("  One \n\nTwo\r\n", "- One\n- Two"),
    ],
)
def test_bullet_list(text, expected):
    assert bullet_list(text) == expected


@pytest.mark.unit
def test_registry_from_custom_path(tmp_path):
    """Test descriptors are discovered from any types directory and sorted by position."""
    for section_id, position in (("zeta", 1), ("alpha", 2)):
        section_dir = tmp_path / section_id
        section_dir.mkdir()
        (section_dir / "section.yaml").write_text(
            f"name: {section_id.title()}\nposition: {position}\nexample: ex\n"
        )
        (section_dir / "template.md.jinja").write_text("{{ content or example }}\n")

    registry = SectionRegistry(tmp_path)

    assert registry.section_ids == ["zeta", "alpha"]
    assert registry.get_descriptor("alpha").input_shape is InputShape.TEXT
    assert registry.templates.render("alpha", content="", example="ex") == "ex\n"


@pytest.mark.unit
def test_render_error_wraps_jinja_error(tmp_path):
    section_dir = tmp_path / "broken"
    section_dir.mkdir()
    (section_dir / "template.md.jinja").write_text("{{ not_passed }}\n")

    templates = TemplateRegistry(tmp_path)

    with pytest.raises(SectionTemplateError) as excinfo:
        templates.render("broken", content="")

    assert excinfo.value.section_id == "broken"
    assert excinfo.value.original_error is not None


@pytest.mark.unit
def test_render_missing_template_raises_section_error(tmp_path):
    with pytest.raises(SectionTemplateError):
        TemplateRegistry(tmp_path).render("missing")
