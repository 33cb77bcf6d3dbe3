"""
Rendering Context

Responsibilities:
- Holds the explicit build configuration
- Writes one HTML document per language to the output directory
- Prints each document to PDF with a headless browser
- Reports build progress and failures through the logger

Owns: Build orchestration, output files, PDF printing
Never: Decides document content or markup
"""

from polycv.contexts.rendering.builder import BuildResult, LanguageArtifact, build_cv
from polycv.contexts.rendering.config import BuildConfig, load_build_config
from polycv.contexts.rendering.printer import PrintResult, print_pdf

__all__ = [
    "BuildConfig",
    "load_build_config",
    "build_cv",
    "BuildResult",
    "LanguageArtifact",
    "print_pdf",
    "PrintResult",
]
