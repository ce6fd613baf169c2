"""Command-line driver for tutorkit."""

from __future__ import annotations

import argparse
import sys

from tutorkit.cli.helpers import (
    build_logger_manager,
    build_service,
    render_greeting,
    resolve_settings,
    run_check,
)
from tutorkit.config.env import load_environment
from tutorkit.constants import DEFAULT_CONFIG_PATH, EXIT_ISSUES, EXIT_OK, EXIT_USAGE
from tutorkit.enums import OutputFormat
from tutorkit.errors import CorpusNotFoundError, TutorkitError, UnknownLanguageError
from tutorkit.utilities.version import get_runtime_version


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="tutorkit",
        description="Companion tooling for the testing tutorial corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=get_runtime_version(),
        help="Show the runtime version and exit.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to the configuration file (YAML).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Check relative links and Next/Back navigation in Markdown docs.",
    )
    check_parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Documentation root (defaults to the configured root).",
    )
    check_parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format.",
    )
    check_parser.add_argument(
        "--include",
        action="append",
        metavar="GLOB",
        help="Glob of documents to check (repeatable).",
    )
    check_parser.add_argument(
        "--exclude",
        action="append",
        metavar="GLOB",
        help="Glob of documents to skip (repeatable).",
    )
    check_parser.add_argument(
        "--no-anchors",
        action="store_true",
        help="Do not verify #anchor fragments.",
    )
    check_parser.add_argument(
        "--strict-nav",
        action="store_true",
        help="Require Next links to be answered by Back links and vice versa.",
    )

    greet_parser = subparsers.add_parser(
        "greet",
        help="Print the tutorial's example greeting as JSON.",
    )
    greet_parser.add_argument("--name", default=None, help="Who to greet.")
    greet_parser.add_argument(
        "--lang",
        dest="language",
        default=None,
        help="Language code of the greeting template.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for tutorkit; returns the process exit code."""
    load_environment()
    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
    except TutorkitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger_manager = build_logger_manager(settings)
    logger = logger_manager.get_logger("cli")
    try:
        if args.command == "check":
            with logger_manager.context(command="check", root=str(settings.docs.root)):
                try:
                    report, rendered = run_check(
                        settings, OutputFormat(args.output_format)
                    )
                except CorpusNotFoundError as exc:
                    logger.error(str(exc))
                    print(f"error: {exc}", file=sys.stderr)
                    return EXIT_USAGE
            print(rendered)
            return EXIT_OK if report.ok else EXIT_ISSUES

        service = build_service(settings)
        try:
            print(render_greeting(service, args.name, args.language))
        except UnknownLanguageError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        return EXIT_OK
    finally:
        logger_manager.flush()
        logger_manager.close()


if __name__ == "__main__":
    raise SystemExit(main())
