"""Object storage providers module."""

from clubdesk.providers.object_storage import ObjectStorage
from clubdesk.providers.stub_storage import StubObjectStorage

__all__ = [
    "ObjectStorage",
    "StubObjectStorage",
]
