"""API v1 contract tests for the greeting endpoint."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import create_autospec

from pydantic import ValidationError
import pytest

from tutorkit.api.v1.errors import HTTP_STATUS_BY_CODE, APIErrorCode
from tutorkit.api.v1.handlers import hello_v1
from tutorkit.api.v1.router import get_routes
from tutorkit.api.v1.schemas import HelloRequestV1
from tutorkit.greeting import Greeting, GreetingService
from tutorkit.httpapi import create_app
from tutorkit.utilities.version import get_runtime_version


async def _call(
    app: Any, path: str, method: str = "GET", query: bytes = b""
) -> tuple[int, dict[str, bytes], dict[str, Any]]:
    scope = {"type": "http", "method": method, "path": path, "query_string": query}
    received = False

    async def receive() -> dict[str, Any]:
        nonlocal received
        if not received:
            received = True
            return {"type": "http.request", "body": b"", "more_body": False}
        return {"type": "http.disconnect"}

    responses: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        responses.append(message)

    await app(scope, receive, send)
    start = next(msg for msg in responses if msg["type"] == "http.response.start")
    body_msg = next(msg for msg in responses if msg["type"] == "http.response.body")
    headers = {key.decode(): value for key, value in start["headers"]}
    return start["status"], headers, json.loads(body_msg["body"].decode("utf-8"))


def test_schema_validation() -> None:
    request = HelloRequestV1.model_validate({"name": "Ada", "lang": "de"})
    assert request.language == "de"
    assert HelloRequestV1(name="Ada", language="fr").language == "fr"
    with pytest.raises(ValidationError):
        HelloRequestV1.model_validate({"lang": "d"})
    with pytest.raises(ValidationError):
        HelloRequestV1.model_validate({"unexpected": "x"})


def test_handler_returns_greeting_shape() -> None:
    response = hello_v1(HelloRequestV1(name="Ada"))
    assert response.success
    assert response.body() == {
        "message": "Hello, Ada!",
        "details": {"version": "1.0", "mode": "dev"},
    }


def test_handler_maps_unknown_language() -> None:
    response = hello_v1(HelloRequestV1(language="xx"))
    assert not response.success
    assert response.error is not None
    assert response.error.code == APIErrorCode.UNKNOWN_LANGUAGE.value
    assert response.error.http_status == 404


def test_handler_uses_injected_service() -> None:
    service = create_autospec(GreetingService, instance=True)
    service.greet.return_value = Greeting(message="Hi, Ada!")
    response = hello_v1(HelloRequestV1(name="Ada"), service)
    service.greet.assert_called_once_with("Ada", None)
    assert response.body() == {"message": "Hi, Ada!", "details": {}}


def test_handler_maps_unexpected_failure_to_internal_error() -> None:
    service = create_autospec(GreetingService, instance=True)
    service.greet.side_effect = RuntimeError("template store offline")
    response = hello_v1(HelloRequestV1(name="Ada"), service)
    assert response.error is not None
    assert response.error.code == APIErrorCode.INTERNAL_ERROR.value
    assert response.error.http_status == 500
    assert response.error.message == "template store offline"


@pytest.mark.asyncio
async def test_hello_endpoint_reports_internal_error() -> None:
    service = create_autospec(GreetingService, instance=True)
    service.greet.side_effect = RuntimeError("boom")
    status, _, payload = await _call(create_app(service), "/hello")
    assert status == 500
    assert payload["code"] == "INTERNAL_ERROR"


def test_error_mapping() -> None:
    assert HTTP_STATUS_BY_CODE[APIErrorCode.VALIDATION_ERROR] == 400
    assert HTTP_STATUS_BY_CODE[APIErrorCode.UNKNOWN_LANGUAGE] == 404
    assert HTTP_STATUS_BY_CODE[APIErrorCode.INTERNAL_ERROR] == 500
    assert set(HTTP_STATUS_BY_CODE) == set(APIErrorCode)


def test_route_registry() -> None:
    (route,) = get_routes()
    assert (route.name, route.method, route.path) == ("hello", "GET", "/hello")
    assert route.handler is hello_v1


@pytest.mark.asyncio
async def test_health_endpoint_reports_status_and_version() -> None:
    status, headers, payload = await _call(create_app(), "/v1/health")
    assert status == 200
    assert headers["content-type"].startswith(b"application/json")
    assert payload == {"status": "ok", "version": get_runtime_version()}


@pytest.mark.asyncio
async def test_hello_endpoint_returns_message_and_details() -> None:
    status, _, payload = await _call(create_app(), "/hello", query=b"name=Ada&lang=fr")
    assert status == 200
    assert payload == {
        "message": "Bonjour, Ada !",
        "details": {"version": "1.0", "mode": "dev"},
    }


@pytest.mark.asyncio
async def test_hello_endpoint_defaults_and_v1_mount() -> None:
    status, _, payload = await _call(create_app(), "/v1/hello/")
    assert status == 200
    assert payload["message"] == "Hello, World!"


@pytest.mark.asyncio
async def test_hello_endpoint_errors() -> None:
    app = create_app()
    status, _, payload = await _call(app, "/hello", query=b"lang=xx")
    assert status == 404
    assert payload["code"] == "UNKNOWN_LANGUAGE"

    status, _, payload = await _call(app, "/hello", query=b"lang=")
    assert status == 400
    assert payload["code"] == "VALIDATION_ERROR"

    status, headers, _ = await _call(app, "/hello", method="POST")
    assert status == 405
    assert headers["allow"] == b"GET"

    status, _, payload = await _call(app, "/nope")
    assert status == 404
    assert payload == {"error": "not found"}


@pytest.mark.asyncio
async def test_non_http_scopes_are_ignored() -> None:
    sent: list[dict[str, Any]] = []

    async def receive() -> dict[str, Any]:
        return {"type": "lifespan.startup"}

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    await create_app()({"type": "lifespan"}, receive, send)
    assert sent == []
