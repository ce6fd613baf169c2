"""API v1: the tutorial's ``/hello`` endpoint contract."""

from __future__ import annotations

from .errors import HTTP_STATUS_BY_CODE, APIErrorCode
from .handlers import hello_v1
from .schemas import ErrorResponseV1, HelloRequestV1, HelloResponseV1

__all__ = [
    "APIErrorCode",
    "HTTP_STATUS_BY_CODE",
    "hello_v1",
    "ErrorResponseV1",
    "HelloRequestV1",
    "HelloResponseV1",
]
