"""
CV Build Module

Runs a complete build: loads the resume once, then for each language writes
the HTML document and prints it to PDF.
"""

import time
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import List, Optional, Sequence

from polycv.contexts.rendering.config import BuildConfig
from polycv.contexts.rendering.exceptions import PdfRenderError
from polycv.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    _log_success,
    _log_warning,
    log_build_start,
    log_language_result,
    setup_rendering_logger,
)
from polycv.contexts.rendering.printer import Printer, print_pdf
from polycv.contexts.templating.exceptions import StylesheetNotFoundError
from polycv.contexts.templating.html_generator import build_html
from polycv.contexts.templating.localization import get_labels
from polycv.contexts.templating.photo import encode_photo
from polycv.contexts.templating.resume_data_structure import load_resume
from polycv.utils.timestamp import format_elapsed, now

HTML_NAME_TEMPLATE = "cv_{lang}.html"
PDF_NAME_TEMPLATE = "cv_{lang}.pdf"


@dataclass
class LanguageArtifact:
    """Files written for one language. pdf_path is None when PDF output is disabled."""

    lang: str
    html_path: Path
    pdf_path: Optional[Path] = None


@dataclass
class BuildResult:
    """
    Result of a complete build.

    Attributes:
        artifacts: One entry per language, in build order
        output_dir: Directory the artifacts were written to
        log_file: Build log file (None when logging to file is disabled)
        time_s: Total build time
    """

    artifacts: List[LanguageArtifact] = field(default_factory=list)
    output_dir: Optional[Path] = None
    log_file: Optional[Path] = None
    time_s: float = 0.0


def read_stylesheet(path: Path) -> str:
    """
    Read the stylesheet text to inline.

    Raises:
        StylesheetNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise StylesheetNotFoundError(path)
    return path.read_text(encoding="utf-8")


def ensure_output_dir(output_dir: Path) -> Path:
    """Create the output directory if needed. Safe to call repeatedly."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def build_cv(
    config: BuildConfig,
    printer: Optional[Printer] = None,
    languages: Optional[Sequence[str]] = None,
    verbose: bool = False,
) -> BuildResult:
    """
    Build the HTML and PDF CV for every configured language.

    Languages are validated before anything is read or written. Each
    language is processed in turn: build HTML, write it, print it to PDF.
    A failed print stops the build.

    Args:
        config: Build inputs and switches
        printer: PDF printer callable (default: headless browser via print_pdf)
        languages: Override config.languages
        verbose: Show DEBUG messages on the console (only with config.logs_path)

    Returns:
        BuildResult listing the files written

    Raises:
        UnsupportedLanguageError: If a requested language has no labels
        DataFileNotFoundError: If the resume data file is missing
        StylesheetNotFoundError: If the stylesheet is missing
        InvalidResumeDataError: If the resume YAML has the wrong shape
        PdfRenderError: If printing a PDF fails
    """
    if languages is not None:
        config = config.with_overrides(languages=languages)

    # Fail fast on configuration errors
    for lang in config.languages:
        get_labels(lang)

    if printer is None:
        printer = partial(print_pdf, browser=config.browser, timeout_s=config.print_timeout_s)

    log_file = None
    if config.logs_path is not None:
        log_file = setup_rendering_logger(
            Path(config.logs_path) / f"build_{now()}", browser=config.browser, verbose=verbose
        )

    start_time = time.time()
    log_build_start(config)

    resume = load_resume(config.data_file)
    stylesheet = read_stylesheet(config.stylesheet)
    photo_src = encode_photo(config.photo)
    if config.photo is not None and photo_src is None:
        _log_warning(f"Photo not found, building without it: {config.photo}")
    output_dir = ensure_output_dir(config.output_dir)

    result = BuildResult(output_dir=output_dir, log_file=log_file)

    for lang in config.languages:
        html = build_html(
            resume,
            lang,
            stylesheet,
            photo_src=photo_src,
            include_certifications=config.include_certifications,
        )
        html_file = output_dir / HTML_NAME_TEMPLATE.format(lang=lang)
        html_file.write_text(html, encoding="utf-8")

        pdf_file = None
        if config.generate_pdf:
            pdf_file = output_dir / PDF_NAME_TEMPLATE.format(lang=lang)
            _log_debug(f"Printing {html_file} -> {pdf_file}")
            print_result = printer(html_file, pdf_file)
            if not print_result.success:
                raise PdfRenderError(print_result, pdf_file)

        log_language_result(lang, html_file, pdf_file)
        result.artifacts.append(LanguageArtifact(lang=lang, html_path=html_file, pdf_path=pdf_file))

    result.time_s = time.time() - start_time
    _log_success(f"Done! Files are in {output_dir} ({format_elapsed(result.time_s)})")
    if log_file is not None:
        _log_info(f"Log: {log_file}")

    return result
