"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site title, build mode and base URL
- ContentConfig: Location of the bundled Content Store documents
- OutputConfig: Output directory and props emission
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

The build mode can be overridden with the INKWELL_ENV environment variable.
The mode drives the single draft-visibility switch (see `is_development`).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from pathlib import Path
from typing import Any

import yaml

ENV_MODE_VARIABLE = "INKWELL_ENV"
VALID_MODES = ("development", "production", "test")


@dataclass
class SiteConfig:
    """Configuration for the generated site.

    Attributes:
        title: Site title shown in page headers
        mode: Build mode ("development", "production" or "test")
        base_url: Prefix prepended to generated links
    """

    title: str = "inkwell"
    mode: str = "production"
    base_url: str = "/"


@dataclass
class ContentConfig:
    """Configuration for the Content Store.

    Attributes:
        directory: Directory holding the content documents
        collections_file: Collections document filename
        posts_file: Blog posts document filename
    """

    directory: str = "content"
    collections_file: str = "collections.json"
    posts_file: str = "posts.json"

    @property
    def path(self) -> Path:
        return Path(self.directory)


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        directory: Directory the static pages are written to
        write_props: Whether to write each route's JSON props next to its page
    """

    directory: str = "out"
    write_props: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the build log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    The INKWELL_ENV environment variable, when set, overrides `site.mode`.
    """
    raw: dict[str, Any] = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config file {path}: expected a mapping")

    cfg = _merge_config(AppConfig(), raw)

    env_mode = os.getenv(ENV_MODE_VARIABLE)
    if env_mode:
        cfg.site.mode = env_mode

    validate_mode(cfg.site.mode)
    return cfg


def validate_mode(mode: str) -> str:
    if mode not in VALID_MODES:
        raise ValueError(f"Unsupported mode: {mode!r} (expected one of {', '.join(VALID_MODES)})")
    return mode


def is_development(cfg: AppConfig) -> bool:
    """Return True when drafts should be visible for this build."""
    return cfg.site.mode == "development"


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        content=ContentConfig(**data["content"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
