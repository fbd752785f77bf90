"""
Typed errors raised by the verification client.

Every error carries a `kind` so callers can branch on the failure class
without matching message strings:

    try:
        result = await client.verify_text(text)
    except MitraVerifyError as e:
        if e.kind is ErrorKind.VALIDATION:
            ...  # fix the input, no request was sent
        elif e.kind is ErrorKind.TRANSPORT:
            ...  # backend unreachable or too slow
"""

from enum import Enum
from typing import Optional

from mitraverify.schemas.verification import ApiError


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    TRANSPORT = "transport"
    BACKEND = "backend"
    UNEXPECTED = "unexpected"


class MitraVerifyError(Exception):
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Validation (raised before any network call)
# ---------------------------------------------------------------------------


class InputValidationError(MitraVerifyError):
    kind = ErrorKind.VALIDATION


class FileTooLarge(InputValidationError):
    def __init__(self, size: int, max_file_size: int):
        limit_mb = max_file_size / 1024 / 1024
        super().__init__(f"File size exceeds {limit_mb:g}MB limit")
        self.size = size
        self.max_file_size = max_file_size


class UnsupportedFileType(InputValidationError):
    def __init__(self, content_type: str):
        super().__init__("Unsupported file type. Please use JPEG, PNG, GIF, or WebP images.")
        self.content_type = content_type


class EmptyInput(InputValidationError):
    def __init__(self):
        super().__init__("Text content cannot be empty")


class MissingInput(InputValidationError):
    def __init__(self):
        super().__init__("Either text or file must be provided")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class TransportError(MitraVerifyError):
    kind = ErrorKind.TRANSPORT


class RequestTimeout(TransportError):
    def __init__(self, timeout_ms: int):
        super().__init__(f"Request timeout after {timeout_ms / 1000:g} seconds")
        self.timeout_ms = timeout_ms


class NetworkError(TransportError):
    """Connection-level failure; the aiohttp error is kept as __cause__."""


# ---------------------------------------------------------------------------
# Backend (server answered with a failure status)
# ---------------------------------------------------------------------------


class BackendError(MitraVerifyError):
    kind = ErrorKind.BACKEND

    def __init__(self, message: str, status_code: int, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    def to_api_error(self) -> ApiError:
        return ApiError(detail=self.detail or self.message, status_code=self.status_code)


class ApiRequestFailed(BackendError):
    pass


class HealthCheckFailed(BackendError):
    pass


class StatsRequestFailed(BackendError):
    pass


class UnparseableBackendError(BackendError):
    """Failure response whose body is not JSON, e.g. an HTML page from a proxy."""

    def __init__(self, status_code: int, body_excerpt: str = ""):
        super().__init__(f"Unreadable error response from backend: {status_code}", status_code)
        self.body_excerpt = body_excerpt


def error_kind(exc: BaseException) -> ErrorKind:
    if isinstance(exc, MitraVerifyError):
        return exc.kind
    return ErrorKind.UNEXPECTED
