"""
Minimal ASGI HTTP adapter.

This module exposes a tiny, framework-free ASGI application serving the
tutorial's greeting example:

- GET /health -> {"status": "ok", "version": "..."}
- GET /hello  -> {"message": "...", "details": {...}}

Query parameters of ``/hello`` are ``name`` and ``lang``. Paths may be
mounted under ``/v1``.

Error semantics:
- Query validation errors -> `ErrorResponseV1` with status 400.
- Unknown language -> `ErrorResponseV1` with status 404.
- Unknown path -> 404, wrong method -> 405 with an ``allow`` header.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
import json
import logging
from typing import Any
from urllib.parse import parse_qsl

from pydantic import ValidationError

from tutorkit.api.v1.errors import APIErrorCode
from tutorkit.api.v1.handlers import error_response, hello_v1
from tutorkit.api.v1.schemas import HelloRequestV1
from tutorkit.greeting import GreetingService
from tutorkit.utilities.version import get_runtime_version

ASGIApp = Callable[
    [
        dict[str, Any],
        Callable[[], Awaitable[dict[str, Any]]],
        Callable[[dict[str, Any]], Awaitable[None]],
    ],
    Awaitable[None],
]
Headers = list[tuple[bytes, bytes]]
Send = Callable[[dict[str, Any]], Awaitable[None]]

logger = logging.getLogger(__name__)


def _normalize_path(path: str) -> str:
    """Map ``/v1/hello`` and ``/hello`` to ``/hello``; ``/v1`` maps to ``/``."""
    if not path:
        return "/"
    while path.startswith("/v1/"):
        path = path[len("/v1") :]
    if path == "/v1":
        return "/"
    if len(path) > 1:
        path = path.rstrip("/")
    return path if path.startswith("/") else f"/{path}"


def _response_messages(
    status: int,
    payload: dict[str, Any],
    headers: Headers | None = None,
) -> Iterable[dict[str, Any]]:
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    response_headers: Headers = [(b"content-type", b"application/json; charset=utf-8")]
    if headers:
        response_headers.extend(headers)

    yield {"type": "http.response.start", "status": status, "headers": response_headers}
    yield {"type": "http.response.body", "body": body}


async def _send_json(
    send: Send,
    status: int,
    payload: dict[str, Any],
    headers: Headers | None = None,
) -> None:
    """Send a JSON response via ASGI `send`."""
    for message in _response_messages(status=status, payload=payload, headers=headers):
        await send(message)


async def _method_not_allowed(send: Send, allowed: str) -> None:
    await _send_json(
        send,
        status=405,
        payload={"error": "method not allowed"},
        headers=[(b"allow", allowed.encode("ascii"))],
    )


def _query_params(scope: dict[str, Any]) -> dict[str, str]:
    raw = scope.get("query_string", b"") or b""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    # last value wins for repeated keys
    return dict(parse_qsl(raw, keep_blank_values=True))


async def _handle_health(method: str, send: Send) -> None:
    if method != "GET":
        await _method_not_allowed(send, "GET")
        return
    await _send_json(
        send,
        status=200,
        payload={"status": "ok", "version": get_runtime_version()},
    )


async def _handle_hello(
    method: str,
    scope: dict[str, Any],
    send: Send,
    service: GreetingService,
) -> None:
    """
    Handle the greeting endpoint.

    - GET -> 200 with ``{"message", "details"}``
    - invalid query -> 400 VALIDATION_ERROR
    - unknown language -> 404 UNKNOWN_LANGUAGE
    """
    if method != "GET":
        await _method_not_allowed(send, "GET")
        return

    try:
        request = HelloRequestV1.model_validate(_query_params(scope))
    except ValidationError as exc:
        payload = error_response(APIErrorCode.VALIDATION_ERROR, str(exc)).model_dump()
        await _send_json(send, status=payload["http_status"], payload=payload)
        return

    response = hello_v1(request, service)
    if response.error is not None:
        await _send_json(send, status=response.error.http_status, payload=response.body())
        return
    await _send_json(send, status=200, payload=response.body())


def create_app(service: GreetingService | None = None) -> ASGIApp:
    """
    Create the ASGI application.

    The returned callable conforms to the ASGI interface:

        app(scope, receive, send) -> await None

    Only `scope["type"] == "http"` is handled; other scope types are ignored.
    """
    greeting_service = service or GreetingService()

    async def app(
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Send,
    ) -> None:
        if scope.get("type") != "http":
            return

        method = str(scope.get("method", "GET")).upper()
        path = _normalize_path(str(scope.get("path", "/")))
        logger.debug("%s %s", method, path)

        if path == "/health":
            await _handle_health(method=method, send=send)
            return

        if path == "/hello":
            await _handle_hello(
                method=method, scope=scope, send=send, service=greeting_service
            )
            return

        await _send_json(send, status=404, payload={"error": "not found"})

    return app


__all__ = ["create_app"]
