"""Unit tests for loading the resume into the structured data model."""

import dataclasses

import pytest
from loguru import logger

from polycv.contexts.templating.exceptions import DataFileNotFoundError, InvalidResumeDataError
from polycv.contexts.templating.resume_data_structure import (
    LocalizedText,
    PlainText,
    ResumeDocument,
    load_resume,
)


@pytest.mark.unit
def test_load_resume_from_yaml(resume_file):
    """Test that a YAML file loads into the full document shape."""
    resume = load_resume(resume_file)

    assert resume.meta.name == "Jane Doe"
    assert isinstance(resume.meta.title, LocalizedText)
    assert resume.meta.title.get("en") == "Software Engineer"
    assert len(resume.skills) == 1
    assert resume.skills[0].items == ("Python", "SQL")
    assert resume.experience[0].company == "Acme"
    assert resume.experience[0].start == "2021"
    assert resume.experience[0].end is None
    assert resume.education[0].end == "2018"
    assert resume.projects[0].tags == ("Python", "Jinja2")
    assert resume.certifications[0].issuer == "Example Cloud"


@pytest.mark.unit
def test_missing_file_raises(tmp_path):
    with pytest.raises(DataFileNotFoundError):
        load_resume(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_missing_file_is_a_file_not_found_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resume(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_non_mapping_root_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(InvalidResumeDataError):
        load_resume(path)


@pytest.mark.unit
def test_section_with_wrong_shape_raises():
    with pytest.raises(InvalidResumeDataError, match="experience"):
        ResumeDocument.from_dict({"experience": {"title": "not a list"}})


@pytest.mark.unit
def test_missing_optional_fields_default_to_empty():
    """Missing optional data is never an error."""
    resume = ResumeDocument.from_dict(
        {"meta": {"name": "Jane"}, "projects": [{"title": "x"}], "education": [{}]}
    )

    assert resume.meta.email == ""
    assert resume.meta.title == PlainText("")
    assert resume.skills == ()
    assert resume.projects[0].url is None
    assert resume.projects[0].tags is None
    assert resume.projects[0].end is None
    assert resume.education[0].note == PlainText("")


@pytest.mark.unit
def test_empty_document():
    resume = ResumeDocument.from_dict({})
    assert resume.meta.name == ""
    assert resume.experience == ()


@pytest.mark.unit
def test_order_is_preserved():
    resume = ResumeDocument.from_dict(
        {"certifications": [{"name": "B"}, {"name": "A"}, {"name": "B"}]}
    )
    assert [cert.name for cert in resume.certifications] == ["B", "A", "B"]


@pytest.mark.unit
def test_document_is_immutable(resume):
    with pytest.raises(dataclasses.FrozenInstanceError):
        resume.meta = None


@pytest.mark.unit
def test_dates_stay_strings(tmp_path):
    """Date-like values are kept as text, not parsed into date objects."""
    path = tmp_path / "dates.yaml"
    path.write_text(
        "certifications:\n  - name: X\n    issuer: Y\n    date: 2023-05\n", encoding="utf-8"
    )
    resume = load_resume(path)
    assert resume.certifications[0].date == "2023-05"


@pytest.mark.unit
def test_unknown_top_level_key_is_warned_about(tmp_path):
    path = tmp_path / "typo.yaml"
    path.write_text("meta:\n  name: Jane\nexperiences: []\n", encoding="utf-8")

    messages = []
    logger.add(messages.append, level="WARNING", format="{message}")
    resume = load_resume(path)

    assert resume.meta.name == "Jane"
    assert any("experiences" in message for message in messages)


@pytest.mark.unit
def test_dollar_braces_stay_literal(tmp_path):
    """Text that looks like a variable reference is kept as written."""
    path = tmp_path / "resume.yaml"
    path.write_text(
        "projects:\n"
        "  - title: Budget tool\n"
        "    description:\n"
        "      en: 'Cut costs by ${budget}'\n",
        encoding="utf-8",
    )

    resume = load_resume(path)
    assert resume.projects[0].description.get("en") == "Cut costs by ${budget}"


@pytest.mark.unit
def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("meta: [unclosed\n", encoding="utf-8")

    with pytest.raises(InvalidResumeDataError) as exc_info:
        load_resume(path)

    assert exc_info.value.path == path
