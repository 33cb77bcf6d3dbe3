"""Shared fixtures for POLYCV tests."""

from pathlib import Path

import pytest
import yaml
from loguru import logger

from polycv.contexts.rendering.printer import PrintResult
from polycv.contexts.templating.resume_data_structure import ResumeDocument

MINIMAL_RESUME = {
    "meta": {
        "name": "Jane Doe",
        "title": {"fr": "Ingénieure logicielle", "en": "Software Engineer"},
        "summary": {"fr": "Résumé en français.", "en": "Summary in English."},
        "email": "jane@example.com",
        "phone": "+33 1 23 45 67 89",
        "location": "Paris",
        "linkedin": "linkedin.com/in/janedoe",
        "github": "github.com/janedoe",
    },
    "skills": [
        {"category": {"fr": "Langages", "en": "Languages"}, "items": ["Python", "SQL"]},
    ],
    "experience": [
        {
            "title": {"fr": "Développeuse", "en": "Developer"},
            "company": "Acme",
            "location": "Lyon",
            "start": 2021,
            "end": None,
            "description": {
                "fr": "- Construit le pipeline\n  - Tests",
                "en": "- Built the pipeline\n  - Tests",
            },
        },
    ],
    "education": [
        {
            "degree": {"fr": "Master Informatique", "en": "MSc Computer Science"},
            "institution": "Université de Paris",
            "location": "Paris",
            "start": 2016,
            "end": 2018,
            "note": {"fr": "Mention bien"},
        },
    ],
    "projects": [
        {
            "title": "polycv",
            "url": "github.com/janedoe/polycv",
            "tags": ["Python", "Jinja2"],
            "start": 2023,
            "description": {"fr": "  Générateur de CV.  ", "en": "  CV generator.  "},
        },
    ],
    "certifications": [
        {"name": "Cloud Architect", "issuer": "Example Cloud", "date": "2022"},
    ],
}

STYLESHEET = "body { color: #222; }"

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop sinks added during a test so they don't outlive a test's streams."""
    yield
    logger.remove()


@pytest.fixture
def resume_dict():
    """Fresh copy of the minimal resume mapping."""
    return yaml.safe_load(yaml.safe_dump(MINIMAL_RESUME, allow_unicode=True))


@pytest.fixture
def resume(resume_dict):
    return ResumeDocument.from_dict(resume_dict)


@pytest.fixture
def resume_file(tmp_path, resume_dict) -> Path:
    path = tmp_path / "resume_data.yaml"
    path.write_text(yaml.safe_dump(resume_dict, allow_unicode=True), encoding="utf-8")
    return path


@pytest.fixture
def stylesheet_file(tmp_path) -> Path:
    path = tmp_path / "custom.css"
    path.write_text(STYLESHEET, encoding="utf-8")
    return path


@pytest.fixture
def png_file(tmp_path) -> Path:
    path = tmp_path / "photo.png"
    path.write_bytes(PNG_BYTES)
    return path


class FakePrinter:
    """Printer stand-in that records calls and writes a placeholder PDF."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def __call__(self, html_file: Path, pdf_file: Path) -> PrintResult:
        self.calls.append((Path(html_file), Path(pdf_file)))
        if self.fail:
            return PrintResult(success=False, errors=["Browser exited with code 1"])
        Path(pdf_file).write_bytes(b"%PDF-1.4\n%fake\n")
        return PrintResult(success=True, pdf_path=Path(pdf_file))


@pytest.fixture
def fake_printer():
    return FakePrinter()


@pytest.fixture
def failing_printer():
    return FakePrinter(fail=True)
