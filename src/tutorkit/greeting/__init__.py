"""Illustrative greeting example used throughout the tutorial."""

from __future__ import annotations

from .models import Greeting
from .service import DEFAULT_TEMPLATES, GreetingService

__all__ = ["Greeting", "GreetingService", "DEFAULT_TEMPLATES"]
