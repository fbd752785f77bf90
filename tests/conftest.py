"""
Shared pytest fixtures for all test modules.

No test talks to a real backend: `request_session` is patched to yield a
MagicMock session whose .request() returns a canned response.
"""

import io
import json
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from PIL import Image

from mitraverify.client import MitraVerifyClient
from mitraverify.config import ClientConfig
from mitraverify.schemas import ImageUpload


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip MITRAVERIFY_* variables so the developer's shell can't leak in."""
    for name in ("API_URL", "API_TIMEOUT", "MAX_FILE_SIZE", "HOSTNAME"):
        monkeypatch.delenv(f"MITRAVERIFY_{name}", raising=False)


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url="http://backend.test", timeout_ms=30_000, max_file_size=10_485_760)


@pytest.fixture
def client(config) -> MitraVerifyClient:
    return MitraVerifyClient(config)


# ---------------------------------------------------------------------------
# Shared test-data helpers
# ---------------------------------------------------------------------------


def make_tiny_jpeg() -> bytes:
    """Create a minimal 10×10 JPEG in memory, fast and valid."""
    buf = io.BytesIO()
    Image.new("RGB", (10, 10), color=(128, 128, 128)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def tiny_jpeg_upload() -> ImageUpload:
    return ImageUpload(filename="photo.jpg", content=make_tiny_jpeg(), content_type="image/jpeg")


def make_mock_response(status=200, json_body=None, text_body=None):
    """
    Build a mock aiohttp response usable as `async with sess.request(...)`.

    With `text_body` set, .json() raises like aiohttp does on a non-JSON body.
    """
    mock_resp = MagicMock()
    mock_resp.__aenter__ = AsyncMock(return_value=mock_resp)
    mock_resp.__aexit__ = AsyncMock(return_value=None)
    mock_resp.status = status

    if text_body is not None:
        raw = text_body
        mock_resp.json = AsyncMock(side_effect=json.JSONDecodeError("Expecting value", text_body, 0))
    else:
        raw = json.dumps(json_body) if json_body is not None else ""
        mock_resp.json = AsyncMock(return_value=json_body)

    mock_resp.read = AsyncMock(return_value=raw.encode())
    mock_resp.text = AsyncMock(return_value=raw)
    return mock_resp


def make_mock_session(response=None, side_effect=None):
    mock_session = MagicMock()
    if side_effect is not None:
        mock_session.request = MagicMock(side_effect=side_effect)
    else:
        mock_session.request = MagicMock(return_value=response)
    return mock_session


def patch_session(mock_session):
    """
    Patch http_client.request_session to yield mock_session directly,
    bypassing aiohttp.ClientSession construction entirely.
    """
    @asynccontextmanager
    async def _fake_request_session(session=None):
        yield mock_session

    return patch(
        "mitraverify.integrations.http_client.request_session",
        side_effect=_fake_request_session,
    )


def form_fields(form) -> dict:
    """{field name: value} for an aiohttp.FormData built by the client."""
    return {type_options["name"]: value for type_options, _headers, value in form._fields}


def form_filenames(form) -> dict:
    return {
        type_options["name"]: type_options.get("filename")
        for type_options, _headers, _value in form._fields
    }


MOCK_TEXT_RESULT = {
    "overall_verdict": "misinformation",
    "confidence": 0.87,
    "text_analysis": {
        "prediction": "misinformation",
        "confidence": 0.87,
        "probabilities": {"reliable": 0.13, "misinformation": 0.87},
        "explanation": "Claim contradicts multiple fact-checks.",
        "language": "en",
    },
    "evidence": [
        {
            "source": "PIB Fact Check",
            "credibility": 0.95,
            "excerpt": "The viral claim is false.",
            "url": "https://factcheck.example/123",
        }
    ],
    "explanation": "Text matches a debunked claim.",
    "processing_time": 1.42,
}

MOCK_IMAGE_RESULT = {
    "overall_verdict": "uncertain",
    "confidence": 0.64,
    "image_analysis": {
        "is_manipulated": True,
        "confidence": 0.64,
        "manipulation_type": "splicing",
        "similarity_matches": [
            {"filename": "flood_2019.jpg", "similarity": 0.93},
            {"filename": "flood_2019_crop.jpg", "similarity": 0.81},
        ],
        "explanation": "Near-duplicate of an older photo.",
    },
    "evidence": [],
    "explanation": "Image appears to be recycled.",
    "processing_time": 2.05,
}

MOCK_MULTIMODAL_RESULT = {
    **MOCK_TEXT_RESULT,
    "image_analysis": MOCK_IMAGE_RESULT["image_analysis"],
    "processing_time": 3.1,
}
