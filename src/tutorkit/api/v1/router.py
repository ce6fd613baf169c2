"""Framework-agnostic API routing registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class APIRoute:
    """Declarative API route definition."""

    name: str
    method: str
    path: str
    handler: Callable[..., object]
    request_schema: type[object]
    response_schema: type[object]


def get_routes() -> tuple[APIRoute, ...]:
    """Return the API route registry."""
    from tutorkit.api.v1.handlers import hello_v1
    from tutorkit.api.v1.schemas import HelloRequestV1, HelloResponseV1

    return (
        APIRoute(
            name="hello",
            method="GET",
            path="/hello",
            handler=hello_v1,
            request_schema=HelloRequestV1,
            response_schema=HelloResponseV1,
        ),
    )
