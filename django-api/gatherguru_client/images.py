"""Image validation and data-URL encoding before upload."""

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

MAX_IMAGE_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class ImageUpload:
    data_url: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_data_url(content: bytes, content_type: str) -> str:
    return f"data:{content_type};base64,{base64.b64encode(content).decode('ascii')}"


def process_image_upload(content: bytes, content_type: str) -> ImageUpload:
    if not content_type.startswith("image/"):
        return ImageUpload(error="Please upload an image file")
    if len(content) > MAX_IMAGE_BYTES:
        return ImageUpload(error="Image size should be less than 5MB")
    return ImageUpload(data_url=to_data_url(content, content_type))


def process_image_file(path: str | Path) -> ImageUpload:
    path = Path(path)
    content_type, _ = mimetypes.guess_type(path.name)
    if not (content_type or "").startswith("image/"):
        return ImageUpload(error="Please upload an image file")
    try:
        if path.stat().st_size > MAX_IMAGE_BYTES:
            return ImageUpload(error="Image size should be less than 5MB")
        content = path.read_bytes()
    except OSError:
        return ImageUpload(error="Error processing image. Please try again.")
    return process_image_upload(content, content_type)
