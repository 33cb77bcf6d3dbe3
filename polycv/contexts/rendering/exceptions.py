"""Custom exceptions for rendering context."""

from polycv.contexts.templating.exceptions import PolyCVError


class PdfRenderError(PolyCVError):
    """
    Exception raised when the headless browser fails to print a PDF.

    Attributes:
        result: The failed PrintResult, with stdout/stderr and parsed errors
        pdf_file: The PDF path that was requested
    """

    def __init__(self, result, pdf_file=None):
        self.result = result
        self.pdf_file = pdf_file
        target = pdf_file or "<unknown>"
        details = "; ".join(result.errors) if result.errors else "no details"
        super().__init__(f"PDF printing failed for {target}: {details}")


class InvalidConfigError(PolyCVError, ValueError):
    """Exception raised when a build config file has unknown or malformed keys."""

    pass
