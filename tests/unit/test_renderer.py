"""Unit tests for Markdown rendering."""

import pytest

from readmegen.contexts.composition import (
    TITLE_BLOCK,
    CustomSection,
    PredefinedSection,
    add_custom_section,
    add_section,
    get_section_registry,
    initial_state,
    render_markdown,
    render_state,
    update_field,
)

LICENSE_BLOCK = (
    "---\n\n## ✅ License\n\n"
    "Distributed under the MIT License. See `LICENSE` for more information."
)

SECTION_FRAMES = {
    "features": ("## 🚀 Features\n", ""),
    "installation": ("## 🛠️ Installation\n\n```bash\n", "\n```"),
    "usage": ("## 💡 Usage\n\n```bash\n", "\n```"),
    "contributing": ("## 🤝 Contributing\n\n", ""),
    "license": ("## ✅ License\n\n", ""),
    "contact": ("## Contact\n\n", ""),
}


@pytest.fixture
def registry():
    return get_section_registry()


@pytest.mark.unit
def test_title_block_only():
    state = initial_state({"title": "Demo", "description": "A demo app"})
    assert render_state(state) == "# Demo\n\nA demo app"


@pytest.mark.unit
def test_title_block_defaults():
    assert render_state(initial_state()) == (
        "# Project Title\n\nA brief, one-sentence description of your project."
    )


@pytest.mark.unit
def test_license_with_empty_value_uses_mit_example():
    state = initial_state({"title": "Demo", "description": "A demo app"})
    state = add_section(state, "license")

    assert render_state(state) == "# Demo\n\nA demo app\n\n" + LICENSE_BLOCK


@pytest.mark.unit
def test_license_with_value():
    state = initial_state({"title": "Demo", "description": "A demo app"})
    state = add_section(state, "license")
    state = update_field(state, "license", "Apache-2.0")

    assert render_state(state).endswith("---\n\n## ✅ License\n\nApache-2.0")


@pytest.mark.unit
def test_features_become_bullets():
    state = add_section(initial_state({"title": "T", "description": "D"}), "features")
    state = update_field(state, "features", "  Fast \n\nSmall\n")

    assert render_state(state) == "# T\n\nD\n\n---\n\n## 🚀 Features\n- Fast\n- Small"


@pytest.mark.unit
def test_blank_features_fall_back_to_example(registry):
    state = add_section(initial_state(), "features")
    state = update_field(state, "features", "  \n \n")

    assert registry.get_descriptor("features").example in render_state(state)


@pytest.mark.unit
def test_installation_is_fenced():
    state = add_section(initial_state({"title": "T", "description": "D"}), "installation")
    state = update_field(state, "installation", "pip install demo")

    assert render_state(state) == (
        "# T\n\nD\n\n---\n\n## 🛠️ Installation\n\n```bash\npip install demo\n```"
    )


@pytest.mark.unit
def test_custom_section():
    state = initial_state({"title": "T", "description": "D"})
    state = add_custom_section(state, "Acknowledgements")
    state = update_field(state, "custom-0", "Thanks to everyone.")

    assert render_state(state) == "# T\n\nD\n\n---\n\n## Acknowledgements\nThanks to everyone."


@pytest.mark.unit
def test_custom_section_without_title_uses_default():
    markdown = render_markdown({"title": "T", "description": "D"}, [CustomSection(4)], {})
    assert markdown == "# T\n\nD\n\n---\n\n## Custom Section"


@pytest.mark.unit
def test_leading_title_block_entry_is_skipped():
    values = {"title": "T", "description": "D"}

    with_title = render_markdown(values, [TITLE_BLOCK, PredefinedSection("usage")], {})
    without_title = render_markdown(values, [PredefinedSection("usage")], {})

    assert with_title == without_title
    assert with_title.count("# T") == 1


@pytest.mark.unit
def test_all_empty_values_render_every_example(registry):
    """Test empty fields render exactly the title defaults plus each section's example."""
    state = initial_state()
    for section_id in registry.section_ids:
        state = add_section(state, section_id)

    expected = "# Project Title\n\nA brief, one-sentence description of your project."
    for descriptor in registry.descriptors():
        prefix, suffix = SECTION_FRAMES[descriptor.section_id]
        expected += "\n\n---\n\n" + prefix + descriptor.example + suffix

    assert render_state(state) == expected


@pytest.mark.unit
def test_render_order_follows_section_order():
    values = {"title": "T", "description": "D"}
    usage, license_ = PredefinedSection("usage"), PredefinedSection("license")

    first = render_markdown(values, [usage, license_], {})
    second = render_markdown(values, [license_, usage], {})

    assert first.index("Usage") < first.index("License")
    assert second.index("License") < second.index("Usage")


@pytest.mark.unit
def test_rendering_is_deterministic():
    state = initial_state({"title": "T", "description": "D"})
    state = add_section(state, "features")
    state = add_custom_section(state, "FAQ")

    assert render_state(state) == render_state(state)


@pytest.mark.unit
def test_values_are_not_escaped():
    state = initial_state({"title": "<Demo> & {{ braces }}", "description": "D"})
    assert render_state(state).startswith("# <Demo> & {{ braces }}")
