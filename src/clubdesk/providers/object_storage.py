"""Object storage provider protocol."""

from typing import Protocol


class ObjectStorage(Protocol):
    """
    Protocol for object storage backends that issue pre-signed uploads.

    The browser posts the file straight to the returned URL with the
    returned form fields; the application never proxies file bytes.
    """

    def sign_upload(
        self,
        bucket: str,
        key: str,
        content_type: str,
        max_size: int,
        ttl: int,
    ) -> tuple[dict[str, str], str]:
        """
        Issue a pre-signed POST for one object.

        Returns (form fields, upload URL). The signature expires after ttl
        seconds and the upload is rejected above max_size bytes.
        """
        ...
