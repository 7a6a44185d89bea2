"""Pydantic schemas for image upload endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ImageUploadRequest(BaseModel):
    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(..., description="MIME type, e.g. image/png")
    size: Optional[int] = Field(default=None, ge=0, description="File size in bytes")


class ImageUploadResponse(BaseModel):
    """Pre-signed POST target; the browser sends fields plus the file to url."""

    url: str
    fields: dict[str, str]
    key: str
    expires_at: datetime
