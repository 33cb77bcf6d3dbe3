"""
POLYCV - Polyglot CV builder

Renders a structured YAML resume into self-contained, localized HTML documents
and prints each one to PDF with a headless browser.

Architecture:
- Templating Context: Resume data model, localization and HTML generation
- Rendering Context: Build orchestration, file output and PDF printing
"""

__version__ = "0.1.0"
