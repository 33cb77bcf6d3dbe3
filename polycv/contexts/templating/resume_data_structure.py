"""
Resume Document Structure

Defines the structured, read-only representation of a resume for POLYCV.
Loaded once from YAML and shared by every language render.

Localized text is modeled as a tagged variant:
- PlainText: language-invariant value
- LocalizedText: mapping from language code to value
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from polycv.contexts.templating.exceptions import DataFileNotFoundError, InvalidResumeDataError
from polycv.contexts.templating.logger import _log_warning, log_resume_loaded
from polycv.utils.text_processing import stringify_scalar


@dataclass(frozen=True)
class PlainText:
    """Language-invariant text."""

    value: str = ""


@dataclass(frozen=True)
class LocalizedText:
    """Text with one variant per language code."""

    values: Mapping[str, str] = field(default_factory=dict)

    def get(self, lang: str) -> Optional[str]:
        return self.values.get(lang)


LocalizedField = Union[PlainText, LocalizedText]

RESUME_SECTIONS = ("meta", "skills", "experience", "education", "projects", "certifications")


def to_localized_field(raw: Any) -> LocalizedField:
    """
    Build a LocalizedField from a raw YAML value.

    A mapping becomes LocalizedText, a list of strings is joined with single
    spaces, other scalars are stringified. None becomes an empty PlainText.
    """
    if raw is None:
        return PlainText("")
    if isinstance(raw, (PlainText, LocalizedText)):
        return raw
    if isinstance(raw, Mapping):
        values = {}
        for lang, value in raw.items():
            text = _text_value(value)
            if text is not None:
                values[str(lang)] = text
        return LocalizedText(values)
    text = _text_value(raw)
    return PlainText(text or "")


def _text_value(raw: Any) -> Optional[str]:
    if isinstance(raw, (list, tuple)):
        return " ".join(str(item) for item in raw if item is not None)
    return stringify_scalar(raw)


@dataclass(frozen=True)
class ResumeMeta:
    """
    Header and contact metadata.

    Attributes:
        name: Full name (not localized)
        title: Job title
        summary: Short professional summary
        email, phone, location: Plain contact values
        linkedin, github: Profile addresses without scheme (e.g. "github.com/jdoe")
    """

    name: str = ""
    title: LocalizedField = PlainText("")
    summary: LocalizedField = PlainText("")
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""


@dataclass(frozen=True)
class SkillGroup:
    category: LocalizedField = PlainText("")
    items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Experience:
    """One work experience entry. `end` of None means ongoing."""

    title: LocalizedField = PlainText("")
    company: str = ""
    location: str = ""
    start: Optional[str] = None
    end: Optional[str] = None
    description: LocalizedField = PlainText("")


@dataclass(frozen=True)
class Education:
    """One education entry. `note` is rendered only when it resolves to text."""

    degree: LocalizedField = PlainText("")
    institution: str = ""
    location: str = ""
    start: Optional[str] = None
    end: Optional[str] = None
    description: LocalizedField = PlainText("")
    note: LocalizedField = PlainText("")


@dataclass(frozen=True)
class Project:
    title: str = ""
    url: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    start: Optional[str] = None
    end: Optional[str] = None
    description: LocalizedField = PlainText("")


@dataclass(frozen=True)
class Certification:
    name: str = ""
    issuer: str = ""
    date: str = ""


@dataclass(frozen=True)
class ResumeDocument:
    """
    Structured representation of a complete resume.

    Every collection keeps the order it has in the source file.
    """

    meta: ResumeMeta = ResumeMeta()
    skills: Tuple[SkillGroup, ...] = ()
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    projects: Tuple[Project, ...] = ()
    certifications: Tuple[Certification, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> "ResumeDocument":
        """
        Build a ResumeDocument from a plain dict (as produced by OmegaConf.to_container).

        Args:
            data: Resume mapping with optional meta/skills/experience/... keys
            source: File the data came from, used in error messages

        Raises:
            InvalidResumeDataError: If the root or a section has the wrong shape
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise InvalidResumeDataError("Resume root must be a mapping", source)

        meta = _mapping(data.get("meta"), "meta", source)

        return cls(
            meta=ResumeMeta(
                name=_plain(meta.get("name")),
                title=to_localized_field(meta.get("title")),
                summary=to_localized_field(meta.get("summary")),
                email=_plain(meta.get("email")),
                phone=_plain(meta.get("phone")),
                location=_plain(meta.get("location")),
                linkedin=_plain(meta.get("linkedin")),
                github=_plain(meta.get("github")),
            ),
            skills=tuple(
                SkillGroup(
                    category=to_localized_field(item.get("category")),
                    items=_strings(item.get("items")),
                )
                for item in _entries(data.get("skills"), "skills", source)
            ),
            experience=tuple(
                Experience(
                    title=to_localized_field(item.get("title")),
                    company=_plain(item.get("company")),
                    location=_plain(item.get("location")),
                    start=stringify_scalar(item.get("start")),
                    end=stringify_scalar(item.get("end")),
                    description=to_localized_field(item.get("description")),
                )
                for item in _entries(data.get("experience"), "experience", source)
            ),
            education=tuple(
                Education(
                    degree=to_localized_field(item.get("degree")),
                    institution=_plain(item.get("institution")),
                    location=_plain(item.get("location")),
                    start=stringify_scalar(item.get("start")),
                    end=stringify_scalar(item.get("end")),
                    description=to_localized_field(item.get("description")),
                    note=to_localized_field(item.get("note")),
                )
                for item in _entries(data.get("education"), "education", source)
            ),
            projects=tuple(
                Project(
                    title=_plain(item.get("title")),
                    url=stringify_scalar(item.get("url")),
                    tags=_strings(item["tags"]) if item.get("tags") is not None else None,
                    start=stringify_scalar(item.get("start")),
                    end=stringify_scalar(item.get("end")),
                    description=to_localized_field(item.get("description")),
                )
                for item in _entries(data.get("projects"), "projects", source)
            ),
            certifications=tuple(
                Certification(
                    name=_plain(item.get("name")),
                    issuer=_plain(item.get("issuer")),
                    date=_plain(item.get("date")),
                )
                for item in _entries(data.get("certifications"), "certifications", source)
            ),
        )


def _plain(value: Any) -> str:
    return stringify_scalar(value) or ""


def _strings(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(_plain(item) for item in value)
    return (_plain(value),)


def _mapping(value: Any, name: str, source: Optional[Path]) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidResumeDataError(f"'{name}' must be a mapping", source)
    return value


def _entries(value: Any, name: str, source: Optional[Path]) -> List[Mapping[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidResumeDataError(f"'{name}' must be a list", source)
    entries = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise InvalidResumeDataError(f"'{name}[{index}]' must be a mapping", source)
        entries.append(item)
    return entries


def load_resume(yaml_path: Path) -> ResumeDocument:
    """
    Load a resume from a YAML file.

    Args:
        yaml_path: Path to the resume data file

    Returns:
        Immutable ResumeDocument

    Raises:
        DataFileNotFoundError: If the file does not exist
        InvalidResumeDataError: If the YAML cannot be parsed or does not have the resume shape
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.is_file():
        raise DataFileNotFoundError(yaml_path)

    try:
        loaded = OmegaConf.load(yaml_path)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidResumeDataError(f"Could not parse resume YAML: {e}", yaml_path) from e

    if not OmegaConf.is_dict(loaded):
        raise InvalidResumeDataError("Resume root must be a mapping", yaml_path)

    # Resume text is free text: "${...}" stays literal
    data = OmegaConf.to_container(loaded, resolve=False)
    unknown = sorted(str(key) for key in data if key not in RESUME_SECTIONS)
    if unknown:
        _log_warning(f"Ignoring unknown top-level keys in {yaml_path.name}: {unknown}")

    resume = ResumeDocument.from_dict(data, yaml_path)
    log_resume_loaded(yaml_path, resume)
    return resume
