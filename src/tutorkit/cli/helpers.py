"""Support routines for the tutorkit CLI."""

from __future__ import annotations

import argparse
import json
from typing import Any

from tutorkit.config.defaults import DOCS_DEFAULTS
from tutorkit.config.settings import TutorkitSettings, load_settings
from tutorkit.docs import check_with_settings, render
from tutorkit.docs.models import CheckReport
from tutorkit.enums import OutputFormat
from tutorkit.greeting import GreetingService
from tutorkit.utilities.logger_manager import LoggerConfig, LoggerManager


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate explicit command-line flags into configuration overrides."""
    overrides: dict[str, Any] = {}
    docs: dict[str, Any] = {}
    if getattr(args, "include", None):
        docs["include"] = list(args.include)
    if getattr(args, "root", None):
        docs["root"] = args.root
        # configured include globs apply only to the configured root
        docs.setdefault("include", list(DOCS_DEFAULTS["include"]))  # type: ignore[call-overload]
    if getattr(args, "exclude", None):
        docs["exclude"] = list(args.exclude)
    if getattr(args, "no_anchors", False):
        docs["check_anchors"] = False
    if getattr(args, "strict_nav", False):
        docs["strict_navigation"] = True
    if docs:
        overrides["docs"] = docs
    if getattr(args, "log_level", None):
        overrides["logging"] = {"log_level": args.log_level}
    return overrides


def resolve_settings(args: argparse.Namespace) -> TutorkitSettings:
    """Load the config file named by ``--config`` and apply flag overrides."""
    return load_settings(args.config, overrides=cli_overrides(args))


def build_logger_manager(settings: TutorkitSettings) -> LoggerManager:
    logging_settings = settings.logging
    return LoggerManager(
        LoggerConfig(
            log_level=logging_settings.log_level,
            log_dir=logging_settings.log_dir,
            log_file_name=logging_settings.log_file_name,
            structured_logging=logging_settings.structured_logging,
        )
    )


def run_check(settings: TutorkitSettings, output_format: OutputFormat) -> tuple[CheckReport, str]:
    """Check the configured corpus and render the report."""
    report = check_with_settings(settings.docs)
    return report, render(report, output_format)


def build_service(settings: TutorkitSettings) -> GreetingService:
    greeting = settings.greeting
    return GreetingService(
        templates=greeting.templates,
        details=greeting.details,
        default_name=greeting.default_name,
        default_language=greeting.default_language,
    )


def render_greeting(service: GreetingService, name: str | None, language: str | None) -> str:
    greeting = service.greet(name, language)
    return json.dumps(greeting.model_dump(), indent=2, ensure_ascii=False)

