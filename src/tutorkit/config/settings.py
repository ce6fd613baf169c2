"""Validated configuration models and the YAML loader."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
import yaml

from tutorkit.config.defaults import DOCS_DEFAULTS, GREETING_DEFAULTS, LOGGING_DEFAULTS
from tutorkit.config.env import environment_overrides
from tutorkit.errors import ConfigurationError
from tutorkit.schema.base import TypedBaseModel

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class DocsSettings(TypedBaseModel):
    root: Path = Path(str(DOCS_DEFAULTS["root"]))
    include: list[str] = Field(default_factory=lambda: list(DOCS_DEFAULTS["include"]))
    exclude: list[str] = Field(default_factory=lambda: list(DOCS_DEFAULTS["exclude"]))
    check_anchors: bool = bool(DOCS_DEFAULTS["check_anchors"])
    strict_navigation: bool = bool(DOCS_DEFAULTS["strict_navigation"])


class GreetingSettings(TypedBaseModel):
    default_name: str = Field(str(GREETING_DEFAULTS["default_name"]), min_length=1)
    default_language: str = Field(
        str(GREETING_DEFAULTS["default_language"]), min_length=1
    )
    details: dict[str, str] = Field(
        default_factory=lambda: dict(GREETING_DEFAULTS["details"])
    )
    templates: dict[str, str] | None = None

    @field_validator("templates")
    @classmethod
    def _templates_take_name(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        if value is None:
            return value
        if not value:
            raise ValueError("templates must not be empty")
        for code, template in value.items():
            if "{name}" not in template:
                raise ValueError(f"template for '{code}' must contain '{{name}}'")
        return value


class LoggingSettings(TypedBaseModel):
    log_level: str = str(LOGGING_DEFAULTS["log_level"])
    log_dir: Path | None = None
    log_file_name: str = str(LOGGING_DEFAULTS["log_file_name"])
    structured_logging: bool = bool(LOGGING_DEFAULTS["structured_logging"])

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


class TutorkitSettings(TypedBaseModel):
    """Top-level configuration assembled from file, environment and flags."""

    docs: DocsSettings = Field(default_factory=DocsSettings)
    greeting: GreetingSettings = Field(default_factory=GreetingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TutorkitSettings:
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def read_config_file(config_path: str | Path) -> dict[str, Any]:
    """Read a YAML config file; a missing file yields an empty mapping."""
    path = Path(config_path)
    if not path.exists():
        logger.info("Config file not found at %s, using defaults", path)
        return {}
    try:
        with open(path, encoding="utf-8") as file:
            config = yaml.safe_load(file)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to load config file {path}: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping, got {type(config).__name__}"
        )
    return config


def _merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def load_settings(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> TutorkitSettings:
    """Build settings: file values, then ``TUTORKIT_*`` variables, then ``overrides``."""
    data = read_config_file(config_path) if config_path else {}
    data = _merge(data, environment_overrides())
    if overrides:
        data = _merge(data, overrides)
    return TutorkitSettings.from_mapping(data)


__all__ = [
    "DocsSettings",
    "GreetingSettings",
    "LoggingSettings",
    "TutorkitSettings",
    "read_config_file",
    "load_settings",
]
