"""tutorkit: companion toolkit for the testing tutorial corpus."""

from __future__ import annotations

from tutorkit.constants import API_VERSION

__all__ = ["API_VERSION"]
