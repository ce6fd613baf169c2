"""Shared pydantic schema base."""

from __future__ import annotations

from .base import FrozenModel, TypedBaseModel

__all__ = ["TypedBaseModel", "FrozenModel"]
