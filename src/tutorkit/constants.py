"""Shared constants for tutorkit."""

from __future__ import annotations

API_VERSION = "v1"

ROOT_LOGGER_NAME = "tutorkit"

DEFAULT_CONFIG_PATH = "tutorkit.yml"

ENV_DOCS_ROOT = "TUTORKIT_DOCS_ROOT"
ENV_LOG_LEVEL = "TUTORKIT_LOG_LEVEL"

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2
