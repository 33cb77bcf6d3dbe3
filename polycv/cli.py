#!/usr/bin/env python3
"""
CV Build CLI

Builds the localized HTML and PDF CV from a YAML resume.

Commands:
    build      - Write cv_{lang}.html and cv_{lang}.pdf for each language
    languages  - List supported languages and their section labels

Examples:\n

    polycv build                                   # Defaults (resume_data.yaml, custom.css)

    polycv build --data cv.yaml --output-dir out   # Custom input and output

    polycv build --lang en --no-pdf                # English HTML only

    polycv build --config polycv.yaml --verbose    # Config file, debug output
"""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from polycv.contexts.rendering.builder import build_cv
from polycv.contexts.rendering.config import BuildConfig, load_build_config
from polycv.contexts.templating.exceptions import PolyCVError
from polycv.contexts.templating.localization import LABELS

DEFAULT_LOGS_PATH = Path("outs/logs")

app = typer.Typer(
    help="Build localized HTML and PDF CVs from a YAML resume",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    data_file: Annotated[
        Optional[Path],
        typer.Option("--data", "-d", help="Resume YAML file (default: resume_data.yaml)"),
    ] = None,
    stylesheet: Annotated[
        Optional[Path],
        typer.Option("--css", "-c", help="Stylesheet to inline (default: custom.css)"),
    ] = None,
    photo: Annotated[
        Optional[Path],
        typer.Option("--photo", help="Header photo (default: photo.jpg, skipped if missing)"),
    ] = None,
    no_photo: Annotated[
        bool,
        typer.Option("--no-photo", help="Do not embed a photo"),
    ] = False,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Output directory (default: output)"),
    ] = None,
    languages: Annotated[
        Optional[List[str]],
        typer.Option("--lang", "-l", help="Language to build; repeat for several (default: all)"),
    ] = None,
    no_pdf: Annotated[
        bool,
        typer.Option("--no-pdf", help="Write HTML only, skip PDF printing"),
    ] = False,
    include_certifications: Annotated[
        bool,
        typer.Option(
            "--include-certifications",
            help="Add the certifications section to the documents",
        ),
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML build config file"),
    ] = None,
    logs_path: Annotated[
        Path,
        typer.Option("--logs-path", help="Root directory for build logs"),
    ] = DEFAULT_LOGS_PATH,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """
    Build the CV for each language.

    Examples:\n

        $ polycv build                              # All languages, HTML + PDF

        $ polycv build --lang fr --no-pdf           # French HTML only

        $ polycv build --include-certifications     # Add the certifications section
    """
    try:
        config = load_build_config(config_file) if config_file else BuildConfig.from_env()
        if config.logs_path is None:
            config = replace(config, logs_path=logs_path)
        config = config.with_overrides(
            data_file=data_file,
            stylesheet=stylesheet,
            photo=photo,
            output_dir=output_dir,
            languages=languages or None,
        )
        if no_photo:
            config = replace(config, photo=None)
        if no_pdf:
            config = replace(config, generate_pdf=False)
        if include_certifications:
            config = replace(config, include_certifications=True)

        result = build_cv(config, verbose=verbose)
    except PolyCVError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
    for artifact in result.artifacts:
        typer.echo(f"  [{artifact.lang}] {artifact.html_path}")
        if artifact.pdf_path:
            typer.echo(f"  [{artifact.lang}] {artifact.pdf_path}")
    if result.log_file:
        typer.echo(f"  Log: {result.log_file}")
    typer.echo("")


@app.command("languages")
def languages_command():
    """List supported languages and their section labels."""
    for lang, labels in LABELS.items():
        typer.secho(lang, bold=True)
        for key, label in labels.items():
            typer.echo(f"  {key}: {label}")


if __name__ == "__main__":
    app()
