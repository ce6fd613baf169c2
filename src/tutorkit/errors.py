"""Exception taxonomy shared by tutorkit modules."""

from __future__ import annotations

from pathlib import Path


class TutorkitError(Exception):
    """Base class for errors raised by tutorkit."""


class ConfigurationError(TutorkitError):
    """Raised when a configuration file or value cannot be used."""


class CorpusNotFoundError(TutorkitError):
    """Raised when the documentation root does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Documentation root not found: {root}")
        self.root = root


class UnknownLanguageError(TutorkitError, LookupError):
    """Raised when a greeting is requested in an unsupported language."""

    def __init__(self, language: str, supported: list[str]) -> None:
        super().__init__(
            f"Unknown language '{language}'; supported: {', '.join(supported)}"
        )
        self.language = language
        self.supported = supported


__all__ = [
    "TutorkitError",
    "ConfigurationError",
    "CorpusNotFoundError",
    "UnknownLanguageError",
]
