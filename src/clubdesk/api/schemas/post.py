"""Pydantic schemas for post editor endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from clubdesk.domain.models import BadgeStyle, PostState


class PostUpdateRequest(BaseModel):
    """Editor form; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, max_length=255)
    url_name: Optional[str] = Field(default=None, max_length=255)
    raw_body: Optional[str] = None
    featured_post: Optional[bool] = None

    def changed_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class PostResponse(BaseModel):
    """Response schema for a single post."""

    post_id: str
    title: str
    url_name: str
    author_id: str
    raw_body: Optional[str] = None
    state: PostState
    badge: BadgeStyle
    featured_post: bool
    published_on: Optional[datetime] = None
    deleted_on: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AutosaveResponse(BaseModel):
    """Response schema for autosave scheduling and status."""

    post_id: str
    pending: bool
    delay_ms: int
