"""API v1 request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HelloRequestV1(BaseModel):
    """Query parameters accepted by ``GET /hello``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str | None = Field(
        None,
        max_length=200,
        description="Who to greet; blank falls back to the default name.",
    )
    language: str | None = Field(
        None,
        alias="lang",
        min_length=2,
        max_length=16,
        pattern=r"^[A-Za-z][A-Za-z\-]*$",
        description="Language code of the greeting template.",
    )


class ErrorResponseV1(BaseModel):
    """Structured error response for API consumers."""

    code: str
    message: str
    http_status: int


class HelloResponseV1(BaseModel):
    """JSON body of a successful greeting, or the error that replaced it."""

    message: str | None = None
    details: dict[str, str] | None = None
    error: ErrorResponseV1 | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def body(self) -> dict[str, object]:
        """The payload sent over HTTP."""
        if self.error is not None:
            return self.error.model_dump()
        return {"message": self.message, "details": self.details or {}}
