import mimetypes
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ImageUpload(BaseModel):
    """An image file ready for multipart upload, with its declared MIME type."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str, content_type: Optional[str] = None) -> "ImageUpload":
        """Read a file from disk; the MIME type is guessed from the name when not given."""
        filename = os.path.basename(path)
        if content_type is None:
            content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        with open(path, "rb") as f:
            content = f.read()
        return cls(filename=filename, content=content, content_type=content_type)
