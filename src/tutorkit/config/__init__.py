"""Configuration loading for tutorkit."""

from __future__ import annotations

from tutorkit.config.env import environment_overrides, load_environment
from tutorkit.config.settings import (
    DocsSettings,
    GreetingSettings,
    LoggingSettings,
    TutorkitSettings,
    load_settings,
    read_config_file,
)

__all__ = [
    "DocsSettings",
    "GreetingSettings",
    "LoggingSettings",
    "TutorkitSettings",
    "environment_overrides",
    "load_environment",
    "load_settings",
    "read_config_file",
]
