"""Pydantic schemas for API request/response."""

from clubdesk.api.schemas.dashboard import (
    MoneyResponse,
    RevenueChangeResponse,
    RevenueSummaryResponse,
    MixBucketResponse,
    RevenueMixResponse,
    RevenueResponse,
    ApplicationStatsResponse,
    UserSummaryResponse,
    ActiveGuestsResponse,
    TierSalesResponse,
    EventTicketSalesResponse,
    PendingApplicationResponse,
    CommentResponse,
    DashboardResponse,
)
from clubdesk.api.schemas.event import EventResponse, EventListResponse
from clubdesk.api.schemas.post import PostUpdateRequest, PostResponse, AutosaveResponse
from clubdesk.api.schemas.upload import ImageUploadRequest, ImageUploadResponse

__all__ = [
    "MoneyResponse",
    "RevenueChangeResponse",
    "RevenueSummaryResponse",
    "MixBucketResponse",
    "RevenueMixResponse",
    "RevenueResponse",
    "ApplicationStatsResponse",
    "UserSummaryResponse",
    "ActiveGuestsResponse",
    "TierSalesResponse",
    "EventTicketSalesResponse",
    "PendingApplicationResponse",
    "CommentResponse",
    "DashboardResponse",
    "EventResponse",
    "EventListResponse",
    "PostUpdateRequest",
    "PostResponse",
    "AutosaveResponse",
    "ImageUploadRequest",
    "ImageUploadResponse",
]
