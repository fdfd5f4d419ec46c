"""Unit tests for section identifiers and key parsing."""

import pytest

from readmegen.contexts.composition.exceptions import UnknownSectionError
from readmegen.contexts.composition.sections import (
    TITLE_BLOCK,
    CustomSection,
    PredefinedSection,
    parse_section_key,
)

PREDEFINED = ["features", "installation", "license"]


@pytest.mark.unit
def test_keys():
    assert PredefinedSection("features").key == "features"
    assert CustomSection(3).key == "custom-3"
    assert TITLE_BLOCK.key == "title_description"


@pytest.mark.unit
def test_is_custom():
    assert CustomSection(0).is_custom
    assert not PredefinedSection("usage").is_custom


@pytest.mark.unit
def test_parse_predefined():
    assert parse_section_key("license", PREDEFINED) == PredefinedSection("license")


@pytest.mark.unit
def test_parse_custom():
    assert parse_section_key("custom-12", PREDEFINED) == CustomSection(12)


@pytest.mark.unit
def test_parse_strips_whitespace():
    assert parse_section_key("  features ", PREDEFINED) == PredefinedSection("features")


@pytest.mark.unit
@pytest.mark.parametrize("key", ["usage", "custom-", "custom-x", "Custom-1", "title_description", ""])
def test_parse_unknown_key(key):
    with pytest.raises(UnknownSectionError):
        parse_section_key(key, PREDEFINED)


@pytest.mark.unit
def test_unknown_key_error_lists_available():
    with pytest.raises(UnknownSectionError) as excinfo:
        parse_section_key("badges", PREDEFINED)

    assert excinfo.value.key == "badges"
    assert "features, installation, license" in str(excinfo.value)


@pytest.mark.unit
def test_identifiers_are_hashable_and_distinct():
    refs = {PredefinedSection("features"), PredefinedSection("features"), CustomSection(0)}
    assert len(refs) == 2
