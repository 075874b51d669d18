"""Image storage for base64 uploads.

Clients send images as data URLs (``data:image/png;base64,...``) inside
JSON bodies. Stores decode, validate and persist them and hand back a
public URL. Plain http(s) URLs are accepted as already-hosted images.
"""

import base64
import binascii
import logging
import re
import uuid
from abc import ABC, abstractmethod
from enum import Enum

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import Storage, default_storage

from common.errors import DomainError

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.+)$", re.DOTALL)

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}


class ImageErrorCode(Enum):
    NO_IMAGE = "NO_IMAGE"
    INVALID_IMAGE = "INVALID_IMAGE"
    IMAGE_TOO_LARGE = "IMAGE_TOO_LARGE"


class InvalidImageError(DomainError):
    """Raised when an uploaded image cannot be accepted."""

    def __init__(self, code: ImageErrorCode, message: str) -> None:
        super().__init__(code=code, message=message)


class ImageStore(ABC):
    """Interface for persisting uploaded images."""

    @abstractmethod
    def save(self, image: str, folder: str) -> str:
        """Persist ``image`` (data URL or http(s) URL) and return its URL."""
        ...

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove an image previously returned by ``save``. Unknown URLs are ignored."""
        ...


class StorageImageStore(ImageStore):
    """ImageStore backed by a Django storage (``default_storage`` unless given)."""

    def __init__(self, storage: Storage | None = None, max_bytes: int | None = None) -> None:
        self._storage = storage or default_storage
        self._max_bytes = max_bytes or settings.MAX_IMAGE_BYTES

    def save(self, image: str, folder: str) -> str:
        if not image:
            raise InvalidImageError(ImageErrorCode.NO_IMAGE, "No image provided")
        if image.startswith(("http://", "https://")):
            return image

        match = DATA_URL_RE.match(image)
        if not match or not match.group("mime").startswith("image/"):
            raise InvalidImageError(ImageErrorCode.INVALID_IMAGE, "Please upload an image file")

        try:
            content = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError):
            raise InvalidImageError(ImageErrorCode.INVALID_IMAGE, "Please upload an image file")

        if len(content) > self._max_bytes:
            raise InvalidImageError(
                ImageErrorCode.IMAGE_TOO_LARGE, "Image size should be less than 5MB"
            )

        extension = EXTENSIONS.get(match.group("mime"), "img")
        name = self._storage.save(f"{folder}/{uuid.uuid4().hex}.{extension}", ContentFile(content))
        logger.info("Stored image %s (%d bytes)", name, len(content))
        return self._storage.url(name)

    def delete(self, url: str) -> None:
        name = self._name_for(url)
        if name is None:
            return
        if self._storage.exists(name):
            self._storage.delete(name)
            logger.info("Deleted image %s", name)

    def _name_for(self, url: str) -> str | None:
        prefix = self._storage.url("")
        if not url or not url.startswith(prefix):
            return None
        return url[len(prefix):] or None


def get_image_store() -> ImageStore:
    return StorageImageStore()
