"""
Localization helpers.

Resolves localized fields for a target language and holds the fixed UI label
table. There is no cross-language fallback: a mapping without the requested
language resolves to an empty string.
"""

from typing import Any, Dict, Mapping, Optional

from polycv.contexts.templating.exceptions import UnsupportedLanguageError
from polycv.contexts.templating.resume_data_structure import LocalizedText, PlainText

# UI labels for each supported language, in build order
LABELS: Dict[str, Dict[str, str]] = {
    "fr": {
        "skills": "Compétences",
        "experience": "Expériences professionnelles",
        "education": "Formation",
        "projects": "Projets",
        "certifications": "Certifications",
        "present": "présent",
    },
    "en": {
        "skills": "Skills",
        "experience": "Work Experience",
        "education": "Education",
        "projects": "Projects",
        "certifications": "Certifications",
        "present": "present",
    },
}

SUPPORTED_LANGUAGES = tuple(LABELS)

PERIOD_SEPARATOR = " – "


def get_labels(lang: str) -> Dict[str, str]:
    """
    Get the UI label set for a language.

    Raises:
        UnsupportedLanguageError: If the language has no label set
    """
    if lang not in LABELS:
        raise UnsupportedLanguageError(lang, SUPPORTED_LANGUAGES)
    return dict(LABELS[lang])


def resolve(field: Any, lang: str) -> str:
    """
    Resolve a localized field for a language.

    Accepts the typed variants (PlainText, LocalizedText) as well as raw YAML
    values (None, str, list of str, mapping of language code to str).

    Examples:
        >>> resolve(None, "en")
        ''
        >>> resolve({"fr": "Bonjour", "en": "Hello"}, "en")
        'Hello'
        >>> resolve({"fr": "Bonjour"}, "en")
        ''
        >>> resolve(["Data", "Engineer"], "fr")
        'Data Engineer'
    """
    if field is None:
        return ""
    if isinstance(field, PlainText):
        return field.value or ""
    if isinstance(field, LocalizedText):
        return field.get(lang) or ""
    if isinstance(field, Mapping):
        value = field.get(lang)
        return "" if value is None else resolve(value, lang)
    if isinstance(field, (list, tuple)):
        return " ".join(str(item) for item in field if item is not None)
    return str(field)


# Short alias
t = resolve


def format_period(start: Optional[Any], end: Optional[Any], present_label: str) -> str:
    """
    Format a date range with an en-dash.

    Examples:
        >>> format_period("2019", "2021", "present")
        '2019 – 2021'
        >>> format_period("2021", None, "présent")
        '2021 – présent'
    """
    start_str = "" if start is None else str(start)
    end_str = present_label if end is None else str(end)
    return f"{start_str}{PERIOD_SEPARATOR}{end_str}"
