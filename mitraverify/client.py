"""
Async client for the MitraVerify content-verification API.

Each operation follows the same shape: validate input, build a multipart
form, execute one request, then turn the response into a typed result or a
typed error (see mitraverify.errors).

    config = resolve_config()
    async with MitraVerifyClient(config) as client:
        result = await client.verify_text("Claim to check")
        print(result.overall_verdict, format_confidence(result.confidence))

Failures are logged and re-raised unchanged; nothing is retried.
"""

import logging
from typing import Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel

from mitraverify.config import ClientConfig, resolve_config
from mitraverify.core.file_validator import validate_file
from mitraverify.errors import (
    ApiRequestFailed,
    BackendError,
    EmptyInput,
    HealthCheckFailed,
    MissingInput,
    StatsRequestFailed,
    UnparseableBackendError,
)
from mitraverify.integrations import http_client as http_module
from mitraverify.schemas import HealthStatus, ImageUpload, SystemStats, VerificationResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

HEALTH_PATH = "/health"
VERIFY_TEXT_PATH = "/api/v1/verify/text"
VERIFY_IMAGE_PATH = "/api/v1/verify/image"
VERIFY_CONTENT_PATH = "/api/v1/verify"
STATS_PATH = "/api/v1/stats"

ERROR_EXCERPT_CHARS = 200


class MitraVerifyClient:
    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or resolve_config()
        # Open only inside `async with`; never shared with other clients.
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "MitraVerifyClient":
        if self._session is None or self._session.closed:
            self._session = http_module.open_session()
            logger.debug(f"[HTTP] Session opened for {self.config.base_url}")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
            logger.debug(f"[HTTP] Session closed for {self.config.base_url}")

    # ------------------------------------------------------------------ #
    # Public operations                                                   #
    # ------------------------------------------------------------------ #

    async def health_check(self) -> HealthStatus:
        try:
            response = await self._request("GET", HEALTH_PATH)
            return await self._parse(response, HealthStatus, HealthCheckFailed, "Health check failed")
        except Exception as e:
            logger.error(f"[HEALTH] Health check failed: {e}")
            raise

    async def verify_text(self, text: str) -> VerificationResult:
        """Check a piece of text for misinformation."""
        try:
            if not text or not text.strip():
                raise EmptyInput()

            form = aiohttp.FormData(default_to_multipart=True)
            form.add_field("text", text.strip())

            response = await self._request("POST", VERIFY_TEXT_PATH, data=form)
            return await self._parse(response, VerificationResult)
        except Exception as e:
            logger.error(f"[VERIFY] Text verification failed: {e}")
            raise

    async def verify_image(self, upload: ImageUpload) -> VerificationResult:
        """Check an image for manipulation and near-duplicate matches."""
        try:
            validate_file(upload, self.config.max_file_size)

            form = aiohttp.FormData(default_to_multipart=True)
            _add_file(form, upload)

            response = await self._request("POST", VERIFY_IMAGE_PATH, data=form)
            return await self._parse(response, VerificationResult)
        except Exception as e:
            logger.error(f"[VERIFY] Image verification failed: {e}")
            raise

    async def verify_content(
        self, text: Optional[str] = None, upload: Optional[ImageUpload] = None
    ) -> VerificationResult:
        """
        Multimodal check. At least one of `text` / `upload` is required;
        whitespace-only text counts as absent.
        """
        try:
            text = text.strip() if text else None
            if not text and upload is None:
                raise MissingInput()

            if upload is not None:
                validate_file(upload, self.config.max_file_size)

            form = aiohttp.FormData(default_to_multipart=True)
            if text:
                form.add_field("text", text)
            if upload is not None:
                _add_file(form, upload)

            response = await self._request("POST", VERIFY_CONTENT_PATH, data=form)
            return await self._parse(response, VerificationResult)
        except Exception as e:
            logger.error(f"[VERIFY] Content verification failed: {e}")
            raise

    async def get_stats(self) -> SystemStats:
        """Supported languages/formats and the backend's model versions."""
        try:
            response = await self._request("GET", STATS_PATH)
            return await self._parse(response, SystemStats, StatsRequestFailed, "Stats request failed")
        except Exception as e:
            logger.error(f"[STATS] Failed to get stats: {e}")
            raise

    # ------------------------------------------------------------------ #
    # Internals                                                           #
    # ------------------------------------------------------------------ #

    async def _request(self, method: str, path: str, data=None) -> aiohttp.ClientResponse:
        return await http_module.execute(
            f"{self.config.base_url}{path}",
            method,
            timeout_ms=self.config.timeout_ms,
            data=data,
            session=self._session,
        )

    async def _parse(
        self,
        response: aiohttp.ClientResponse,
        model: Type[ModelT],
        error_cls: Type[BackendError] = ApiRequestFailed,
        fallback_message: str = "API Error",
    ) -> ModelT:
        if not 200 <= response.status < 300:
            await _raise_backend_error(response, error_cls, fallback_message)
        # Shape mismatches in a success body are not translated.
        body = await response.json(content_type=None)
        return model.model_validate(body)


def _add_file(form: aiohttp.FormData, upload: ImageUpload) -> None:
    form.add_field(
        "file",
        upload.content,
        filename=upload.filename,
        content_type=upload.content_type,
    )


async def _raise_backend_error(
    response: aiohttp.ClientResponse, error_cls: Type[BackendError], fallback_message: str
) -> None:
    status = response.status
    try:
        body = await response.json(content_type=None)
    except ValueError:
        text = await response.text(errors="replace")
        raise UnparseableBackendError(status, text[:ERROR_EXCERPT_CHARS]) from None

    detail = body.get("detail") if isinstance(body, dict) else None
    if detail and not isinstance(detail, str):
        # FastAPI validation errors arrive as a list of dicts
        detail = str(detail)
    if detail:
        raise error_cls(detail, status, detail)
    raise error_cls(f"{fallback_message}: {status}", status)
