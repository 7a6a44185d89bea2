"""Pre-signed image uploads for the post editor."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import PurePosixPath
from typing import Optional

from clubdesk.core.exceptions import ValidationError
from clubdesk.core.timezone import now_utc
from clubdesk.providers.object_storage import ObjectStorage

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


@dataclass
class UploadTicket:
    """What the browser needs to post a file directly to storage."""

    url: str
    fields: dict[str, str]
    key: str
    expires_at: datetime


class ImageUploadService:
    def __init__(
        self,
        storage: ObjectStorage,
        bucket: str,
        max_size: int,
        ttl_seconds: int,
        prefix: str = "posts",
    ):
        self._storage = storage
        self._bucket = bucket
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._prefix = prefix.strip("/")

    def request_upload(
        self,
        filename: str,
        content_type: str,
        size: Optional[int] = None,
    ) -> UploadTicket:
        """Validate an image upload request and sign it."""
        content_type = (content_type or "").lower()
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(f"Unsupported image type: {content_type or 'unknown'}")
        if size is not None and size > self._max_size:
            raise ValidationError(f"Image is larger than {self._max_size} bytes")

        key = self._build_key(filename, content_type)
        fields, url = self._storage.sign_upload(
            self._bucket, key, content_type, self._max_size, self._ttl
        )
        return UploadTicket(
            url=url,
            fields=fields,
            key=key,
            expires_at=now_utc() + timedelta(seconds=self._ttl),
        )

    def _build_key(self, filename: str, content_type: str) -> str:
        suffix = ALLOWED_IMAGE_TYPES[content_type]
        if content_type == "image/jpeg" and PurePosixPath(filename or "").suffix.lower() == ".jpeg":
            suffix = ".jpeg"
        return f"{self._prefix}/{uuid.uuid4().hex}{suffix}"
