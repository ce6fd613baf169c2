"""Explicit default settings for tutorkit configuration."""

from __future__ import annotations

DOCS_DEFAULTS: dict[str, object] = {
    "root": ".",
    "include": ["**/*.md"],
    "exclude": [
        ".git/**",
        ".venv/**",
        "node_modules/**",
        "artifacts/**",
        ".pytest_cache/**",
    ],
    "check_anchors": True,
    "strict_navigation": False,
}

GREETING_DEFAULTS: dict[str, object] = {
    "default_name": "World",
    "default_language": "en",
    "details": {"version": "1.0", "mode": "dev"},
}

LOGGING_DEFAULTS: dict[str, object] = {
    "log_level": "WARNING",
    "log_dir": None,
    "log_file_name": "tutorkit.log",
    "structured_logging": False,
}
