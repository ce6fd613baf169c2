"""Shared Pydantic base classes with consistent configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TypedBaseModel(BaseModel):
    """Centralized base so every schema inherits the same contract.

    Unknown fields are rejected everywhere; value records additionally use
    :class:`FrozenModel`.
    """

    model_config = ConfigDict(extra="forbid")


class FrozenModel(TypedBaseModel):
    """Immutable, hashable value record."""

    model_config = ConfigDict(extra="forbid", frozen=True)
