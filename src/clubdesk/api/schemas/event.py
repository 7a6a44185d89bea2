"""Pydantic schemas for event endpoints."""

from datetime import datetime

from pydantic import BaseModel

from clubdesk.domain.models import BadgeStyle, EventState


class EventResponse(BaseModel):
    """Response schema for one row of the admin events list."""

    event_id: str
    title: str
    state: EventState
    badge: BadgeStyle
    start_date: datetime


class EventListResponse(BaseModel):
    items: list[EventResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
