"""
Templating Context

Responsibilities:
- Loads the YAML resume into an immutable structured data model
- Resolves localized fields and UI labels per language
- Converts bullet text and photos into HTML-ready values
- Renders section templates and assembles complete HTML documents

Owns: Resume data model, localization, HTML template system
Never: Writes files or invokes the PDF printer
"""

from polycv.contexts.templating.bullets import to_list_markup
from polycv.contexts.templating.html_generator import ResumeToHTMLConverter, build_html
from polycv.contexts.templating.localization import (
    LABELS,
    SUPPORTED_LANGUAGES,
    format_period,
    get_labels,
    resolve,
)
from polycv.contexts.templating.photo import encode_photo
from polycv.contexts.templating.resume_data_structure import (
    LocalizedText,
    PlainText,
    ResumeDocument,
    load_resume,
)

__all__ = [
    # Data model
    "ResumeDocument",
    "PlainText",
    "LocalizedText",
    "load_resume",
    # Helpers
    "resolve",
    "format_period",
    "to_list_markup",
    "encode_photo",
    "LABELS",
    "SUPPORTED_LANGUAGES",
    "get_labels",
    # HTML generation
    "ResumeToHTMLConverter",
    "build_html",
]
