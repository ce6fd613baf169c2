"""Greeting service: a template lookup followed by string formatting."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from tutorkit.config.defaults import GREETING_DEFAULTS
from tutorkit.errors import UnknownLanguageError
from tutorkit.greeting.models import Greeting

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: dict[str, str] = {
    "en": "Hello, {name}!",
    "de": "Hallo, {name}!",
    "es": "¡Hola, {name}!",
    "fr": "Bonjour, {name} !",
}


class GreetingService:
    """Builds :class:`Greeting` records for a configured set of languages."""

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        details: Mapping[str, str] | None = None,
        default_name: str | None = None,
        default_language: str | None = None,
    ) -> None:
        self._templates = {
            code.lower(): template
            for code, template in (templates or DEFAULT_TEMPLATES).items()
        }
        self._details = dict(
            GREETING_DEFAULTS["details"] if details is None else details
        )
        self.default_name = default_name or str(GREETING_DEFAULTS["default_name"])
        self.default_language = (
            default_language or str(GREETING_DEFAULTS["default_language"])
        ).lower()

    def languages(self) -> list[str]:
        return sorted(self._templates)

    def greet(self, name: str | None = None, language: str | None = None) -> Greeting:
        """Render a greeting for ``name`` in ``language``.

        Blank names fall back to the default name. Raises
        :class:`UnknownLanguageError` for languages without a template.
        """
        code = (language or self.default_language).strip().lower()
        template = self._templates.get(code)
        if template is None:
            raise UnknownLanguageError(code, self.languages())
        who = (name or "").strip() or self.default_name
        message = template.format(name=who)
        logger.debug("rendered greeting", extra={"context": {"language": code}})
        return Greeting(message=message, details=dict(self._details) or None)
