"""API v1 error taxonomy and HTTP mapping."""

from __future__ import annotations

from enum import Enum


class APIErrorCode(str, Enum):
    """Stable error codes exposed by the API layer."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_LANGUAGE = "UNKNOWN_LANGUAGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


HTTP_STATUS_BY_CODE: dict[APIErrorCode, int] = {
    APIErrorCode.VALIDATION_ERROR: 400,
    APIErrorCode.UNKNOWN_LANGUAGE: 404,
    APIErrorCode.INTERNAL_ERROR: 500,
}
