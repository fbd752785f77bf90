"""
Client-side upload checks, run before any request is sent.

Only the declared MIME type is inspected; the backend does its own content
sniffing.
"""

import logging

from mitraverify.errors import FileTooLarge, UnsupportedFileType
from mitraverify.schemas.upload import ImageUpload

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/gif", "image/webp"})


def _base_mime_type(content_type: str) -> str:
    # "image/png; charset=binary" -> "image/png"
    return content_type.split(";", 1)[0].strip().lower()


def validate_file(upload: ImageUpload, max_file_size: int) -> None:
    """Check size, then declared MIME type. Raises a validation error on failure."""
    if upload.size > max_file_size:
        logger.debug(f"[VALIDATE] {upload.filename} rejected: {upload.size} > {max_file_size} bytes")
        raise FileTooLarge(upload.size, max_file_size)

    if _base_mime_type(upload.content_type) not in ALLOWED_MIME_TYPES:
        logger.debug(f"[VALIDATE] {upload.filename} rejected: type {upload.content_type!r}")
        raise UnsupportedFileType(upload.content_type)
