"""The greeting record returned by the tutorial's ``/hello`` example."""

from __future__ import annotations

from pydantic import Field, field_validator

from tutorkit.schema.base import FrozenModel


class Greeting(FrozenModel):
    """A message with optional string metadata such as ``version`` or ``mode``."""

    message: str = Field(..., min_length=1, description="Rendered greeting text")
    details: dict[str, str] | None = Field(
        None, description="Optional string key/value metadata"
    )

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value

    def __hash__(self) -> int:
        details = tuple(sorted((self.details or {}).items()))
        return hash((self.message, details))
