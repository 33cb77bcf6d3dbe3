"""
Build Configuration

Explicit configuration for a CV build, passed into build_cv(). Values come
from defaults, environment variables (.env supported), and an optional YAML
config file, in increasing order of precedence.

Examples:
    >>> config = BuildConfig.from_env()
    >>> config = load_build_config(Path("polycv.yaml"))
    >>> config = replace(config, generate_pdf=False)
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from polycv.contexts.rendering.exceptions import InvalidConfigError
from polycv.contexts.templating.localization import SUPPORTED_LANGUAGES

DEFAULT_DATA_FILE = "resume_data.yaml"
DEFAULT_STYLESHEET = "custom.css"
DEFAULT_PHOTO = "photo.jpg"
DEFAULT_OUTPUT_DIR = "output"

PATH_FIELDS = ("data_file", "stylesheet", "photo", "output_dir", "logs_path")


@dataclass(frozen=True)
class BuildConfig:
    """
    Inputs and switches for one build.

    Attributes:
        data_file: Resume YAML file (required at build time)
        stylesheet: CSS file inlined into every document (required at build time)
        photo: Optional header photo; None disables it, a missing file is tolerated
        output_dir: Directory for cv_{lang}.html / cv_{lang}.pdf (created if absent)
        languages: Languages to build, in order
        generate_pdf: Print each HTML file to PDF
        include_certifications: Add the certifications section to the documents
        browser: Headless browser executable (None: auto-detect)
        print_timeout_s: Timeout for each PDF print (None: wait indefinitely)
        logs_path: Root directory for build logs (None: no log file)
    """

    data_file: Path = Path(DEFAULT_DATA_FILE)
    stylesheet: Path = Path(DEFAULT_STYLESHEET)
    photo: Optional[Path] = Path(DEFAULT_PHOTO)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    languages: Tuple[str, ...] = SUPPORTED_LANGUAGES
    generate_pdf: bool = True
    include_certifications: bool = False
    browser: Optional[str] = None
    print_timeout_s: Optional[float] = None
    logs_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "BuildConfig":
        """
        Build a config from environment variables, falling back to defaults.

        POLYCV_PHOTO set to an empty string disables the photo.
        """
        load_dotenv()

        photo_env = os.getenv("POLYCV_PHOTO")
        if photo_env is None:
            photo = Path(DEFAULT_PHOTO)
        else:
            photo = Path(photo_env) if photo_env else None

        logs_env = os.getenv("POLYCV_LOGS_PATH")

        return cls(
            data_file=Path(os.getenv("POLYCV_DATA_FILE", DEFAULT_DATA_FILE)),
            stylesheet=Path(os.getenv("POLYCV_STYLESHEET", DEFAULT_STYLESHEET)),
            photo=photo,
            output_dir=Path(os.getenv("POLYCV_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            browser=os.getenv("CHROME_EXECUTABLE") or None,
            logs_path=Path(logs_env) if logs_env else None,
        )

    def with_overrides(self, **overrides: Any) -> "BuildConfig":
        """
        Return a copy with the non-None overrides applied.

        Path fields accept strings; languages accepts any sequence.
        """
        return replace(self, **_coerce({k: v for k, v in overrides.items() if v is not None}))


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    coerced = {}
    for key, value in values.items():
        if key in PATH_FIELDS and value is not None:
            value = Path(value)
        elif key == "languages":
            value = (value,) if isinstance(value, str) else tuple(value)
        coerced[key] = value
    return coerced


def load_build_config(config_path: Path, base: Optional[BuildConfig] = None) -> BuildConfig:
    """
    Load a YAML build config and apply it on top of a base config.

    Args:
        config_path: YAML file with BuildConfig field names as keys
        base: Config to override (defaults to BuildConfig.from_env())

    Returns:
        New BuildConfig

    Raises:
        InvalidConfigError: If the file is unreadable, not a mapping, or has unknown keys
    """
    if base is None:
        base = BuildConfig.from_env()

    config_path = Path(config_path)
    if not config_path.is_file():
        raise InvalidConfigError(f"Config file not found: {config_path}")

    try:
        loaded = OmegaConf.load(config_path)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidConfigError(f"Could not read config file {config_path}: {e}") from e

    if not OmegaConf.is_dict(loaded):
        raise InvalidConfigError(f"Config file must contain a mapping: {config_path}")

    values = OmegaConf.to_container(loaded, resolve=True)
    known = {f.name for f in fields(BuildConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise InvalidConfigError(
            f"Unknown config keys in {config_path}: {unknown}. Valid keys: {sorted(known)}"
        )

    # Explicit nulls are kept here (e.g. "photo: null" disables the photo)
    return replace(base, **_coerce(values))
