"""Async client for the MitraVerify misinformation and image-manipulation API."""

from mitraverify.client import MitraVerifyClient
from mitraverify.config import ClientConfig, Settings, resolve_config
from mitraverify.errors import (
    ApiRequestFailed,
    BackendError,
    EmptyInput,
    ErrorKind,
    FileTooLarge,
    HealthCheckFailed,
    InputValidationError,
    MissingInput,
    MitraVerifyError,
    NetworkError,
    RequestTimeout,
    StatsRequestFailed,
    TransportError,
    UnparseableBackendError,
    UnsupportedFileType,
    error_kind,
)
from mitraverify.formatters import VerdictStyle, format_confidence, get_confidence_level, get_verdict_color
from mitraverify.schemas import HealthStatus, ImageUpload, SystemStats, VerificationResult

__version__ = "0.1.0"

__all__ = [
    "MitraVerifyClient",
    "ClientConfig",
    "Settings",
    "resolve_config",
    "ErrorKind",
    "MitraVerifyError",
    "InputValidationError",
    "FileTooLarge",
    "UnsupportedFileType",
    "EmptyInput",
    "MissingInput",
    "TransportError",
    "RequestTimeout",
    "NetworkError",
    "BackendError",
    "ApiRequestFailed",
    "HealthCheckFailed",
    "StatsRequestFailed",
    "UnparseableBackendError",
    "error_kind",
    "VerdictStyle",
    "format_confidence",
    "get_confidence_level",
    "get_verdict_color",
    "HealthStatus",
    "ImageUpload",
    "SystemStats",
    "VerificationResult",
]
