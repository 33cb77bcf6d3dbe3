"""
PDF Printing Module

Prints self-contained HTML files to PDF with a headless Chrome/Chromium.

The printer is a plain callable, (html_file, pdf_file) -> PrintResult, so the
build can be run with a fake printer in tests.
"""

import os
import shutil
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv

from polycv.contexts.rendering.logger import _log_debug, log_print_result

load_dotenv()
CHROME_EXECUTABLE = os.getenv("CHROME_EXECUTABLE")

# Looked up on PATH, in order, when no browser is configured
BROWSER_CANDIDATES = [
    "google-chrome",
    "google-chrome-stable",
    "chromium",
    "chromium-browser",
    "chrome",
]


@dataclass
class PrintResult:
    """
    Result of printing one HTML file to PDF.

    Attributes:
        success: Whether a PDF was produced
        pdf_path: Path to generated PDF (None if failed)
        stdout: Standard output from the browser
        stderr: Standard error from the browser
        errors: Human-readable failure reasons
    """

    success: bool
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)


Printer = Callable[[Path, Path], PrintResult]


def find_browser(browser: Optional[str] = None) -> Optional[str]:
    """
    Resolve the browser executable.

    Order: explicit argument, CHROME_EXECUTABLE, then BROWSER_CANDIDATES on PATH.
    An explicit value may be a path or a command name.
    """
    configured = browser or CHROME_EXECUTABLE
    if configured:
        return shutil.which(configured) or (configured if Path(configured).is_file() else None)

    for candidate in BROWSER_CANDIDATES:
        found = shutil.which(candidate)
        if found:
            return found
    return None


def build_print_command(browser: str, html_file: Path, pdf_file: Path) -> List[str]:
    """Command line for a headless print of html_file into pdf_file."""
    return [
        browser,
        "--headless",
        "--disable-gpu",
        # Chrome refuses to start sandboxed as root
        "--no-sandbox",
        "--no-pdf-header-footer",
        f"--print-to-pdf={pdf_file}",
        html_file.resolve().as_uri(),
    ]


def print_pdf(
    html_file: Path,
    pdf_file: Path,
    browser: Optional[str] = None,
    timeout_s: Optional[float] = None,
) -> PrintResult:
    """
    Print an HTML file to PDF using a headless browser.

    Blocking call; no retry. Any existing PDF at pdf_file is removed first so
    that success is detected unambiguously.

    Args:
        html_file: Self-contained HTML file to print
        pdf_file: Target PDF path (parent directory must exist)
        browser: Browser executable (default: CHROME_EXECUTABLE or PATH lookup)
        timeout_s: Kill the browser after this many seconds (default: no timeout)

    Returns:
        PrintResult with success status and diagnostic information
    """
    html_file = Path(html_file)
    pdf_file = Path(pdf_file).resolve()

    if not html_file.is_file():
        return PrintResult(success=False, errors=[f"HTML file not found: {html_file}"])

    executable = find_browser(browser)
    if executable is None:
        return PrintResult(
            success=False,
            errors=[
                "No headless browser found. Install Chrome/Chromium or set CHROME_EXECUTABLE."
            ],
        )

    if pdf_file.exists():
        pdf_file.unlink()

    cmd = build_print_command(executable, html_file, pdf_file)
    _log_debug(f"Running: {' '.join(cmd)}")

    start_time = time.time()
    try:
        completed = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired as e:
        result = PrintResult(
            success=False,
            stdout=e.stdout if isinstance(e.stdout, str) else "",
            stderr=e.stderr if isinstance(e.stderr, str) else "",
            errors=[f"Browser timed out after {timeout_s}s"],
        )
        log_print_result(result, time.time() - start_time)
        return result

    errors = []
    if completed.returncode != 0:
        errors.append(f"Browser exited with code {completed.returncode}")
    if not pdf_file.exists():
        errors.append("PDF file was not generated")

    result = PrintResult(
        success=not errors,
        pdf_path=pdf_file if pdf_file.exists() else None,
        stdout=completed.stdout,
        stderr=completed.stderr,
        errors=errors,
    )
    log_print_result(result, time.time() - start_time)
    return result
