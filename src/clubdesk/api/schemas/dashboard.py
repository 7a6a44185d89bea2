"""Pydantic schemas for dashboard endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from clubdesk.domain.models import BadgeStyle, Direction, EventState


class MoneyResponse(BaseModel):
    amount: Decimal
    currency: str


class RevenueChangeResponse(BaseModel):
    """Period-over-period change; percent is null on a first period."""

    percent: Optional[int] = None
    direction: Direction
    first_period: bool


class RevenueSummaryResponse(BaseModel):
    """Response schema for current revenue against prior periods."""

    current: MoneyResponse
    previous_month: MoneyResponse
    previous_year: MoneyResponse
    month_change: RevenueChangeResponse
    year_change: RevenueChangeResponse
    as_of: Optional[datetime] = None


class MixBucketResponse(BaseModel):
    name: str
    amount: MoneyResponse
    percentage: int


class RevenueMixResponse(BaseModel):
    total: MoneyResponse
    buckets: list[MixBucketResponse]


class RevenueResponse(BaseModel):
    """Response schema for GET /dashboard/revenue."""

    summary: RevenueSummaryResponse
    mix: RevenueMixResponse


class ApplicationStatsResponse(BaseModel):
    this_month: int
    this_year: int
    previous_month: int
    same_month_last_year: int
    month_change: int
    year_change: int
    month_direction: Direction
    year_direction: Direction


class UserSummaryResponse(BaseModel):
    user_id: str
    email: str
    full_name: str


class ActiveGuestsResponse(BaseModel):
    count: int
    sample: list[UserSummaryResponse]


class TierSalesResponse(BaseModel):
    name: str
    sold_count: int
    quantity: Optional[int] = None
    unlimited: bool


class EventTicketSalesResponse(BaseModel):
    event_id: str
    title: str
    state: EventState
    badge: BadgeStyle
    start_date: datetime
    tiers: list[TierSalesResponse]


class PendingApplicationResponse(BaseModel):
    user: UserSummaryResponse
    membership_type: Optional[str] = None
    submitted_on: Optional[datetime] = None


class CommentResponse(BaseModel):
    comment_id: str
    post_id: str
    post_title: Optional[str] = None
    author: Optional[UserSummaryResponse] = None
    text: str
    created_at: datetime


class DashboardResponse(BaseModel):
    """Response schema for the full admin overview."""

    revenue: RevenueSummaryResponse
    revenue_mix: RevenueMixResponse
    applications: ApplicationStatsResponse
    active_guests: ActiveGuestsResponse
    ticket_sales: list[EventTicketSalesResponse]
    pending_applications: list[PendingApplicationResponse]
    latest_comments: list[CommentResponse]
    as_of: Optional[datetime] = None
