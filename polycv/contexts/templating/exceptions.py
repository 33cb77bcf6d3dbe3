"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional, Sequence


class PolyCVError(Exception):
    """Base class for every fatal POLYCV error."""


class DataFileNotFoundError(PolyCVError, FileNotFoundError):
    """Raised when the resume data file does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Resume data file not found: {self.path}")


class StylesheetNotFoundError(PolyCVError, FileNotFoundError):
    """Raised when the stylesheet to inline does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Stylesheet not found: {self.path}")


class InvalidResumeDataError(PolyCVError, ValueError):
    """
    Exception raised when the YAML resume structure cannot be read as a resume.

    Missing optional fields are never an error; this covers structural
    problems such as a root that is not a mapping or a section that is not a list.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        parts = [message]
        if path is not None:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class UnsupportedLanguageError(PolyCVError, ValueError):
    """
    Exception raised when a language code has no label set.

    Attributes:
        lang: The rejected language code
        supported: Language codes that do have labels
    """

    def __init__(self, lang: str, supported: Sequence[str]):
        self.lang = lang
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported language '{lang}'. Supported languages: {', '.join(self.supported)}"
        )


class TemplateRenderError(PolyCVError):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
