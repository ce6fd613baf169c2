"""API v1 handlers: pure functions over validated request models."""

from __future__ import annotations

import logging

from tutorkit.api.v1.errors import HTTP_STATUS_BY_CODE, APIErrorCode
from tutorkit.api.v1.schemas import ErrorResponseV1, HelloRequestV1, HelloResponseV1
from tutorkit.errors import UnknownLanguageError
from tutorkit.greeting import GreetingService

logger = logging.getLogger(__name__)


def error_response(code: APIErrorCode, message: str) -> ErrorResponseV1:
    return ErrorResponseV1(
        code=code.value,
        message=message,
        http_status=HTTP_STATUS_BY_CODE[code],
    )


def hello_v1(
    request: HelloRequestV1,
    service: GreetingService | None = None,
) -> HelloResponseV1:
    """Greet through ``service``; domain errors come back in ``error``."""
    service = service or GreetingService()
    try:
        greeting = service.greet(request.name, request.language)
    except UnknownLanguageError as exc:
        logger.info("Rejected greeting: %s", exc)
        return HelloResponseV1(error=error_response(APIErrorCode.UNKNOWN_LANGUAGE, str(exc)))
    except Exception as exc:
        logger.exception("Greeting failed")
        return HelloResponseV1(error=error_response(APIErrorCode.INTERNAL_ERROR, str(exc)))
    return HelloResponseV1(message=greeting.message, details=greeting.details)
