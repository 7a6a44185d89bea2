"""Admin dashboard endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from clubdesk.api.deps import get_dashboard_service, require_admin
from clubdesk.api.schemas import (
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
from clubdesk.core.timezone import now_utc
from clubdesk.domain.models import Comment, Money, User, badge_for_event_state
from clubdesk.domain.views import (
    ActiveGuests,
    ApplicationStats,
    EventTicketSales,
    PendingApplication,
    RevenueChange,
    RevenueMix,
    RevenueSummary,
)
from clubdesk.services import DashboardService

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_admin)],
)


def _money(money: Money) -> MoneyResponse:
    quantized = money.quantized()
    return MoneyResponse(amount=quantized.amount, currency=quantized.currency)


def _change(change: RevenueChange) -> RevenueChangeResponse:
    return RevenueChangeResponse(
        percent=change.percent,
        direction=change.direction,
        first_period=change.first_period,
    )


def _user(user: Optional[User]) -> Optional[UserSummaryResponse]:
    if user is None:
        return None
    return UserSummaryResponse(user_id=user.user_id, email=user.email, full_name=user.full_name)


def revenue_summary_response(summary: RevenueSummary) -> RevenueSummaryResponse:
    return RevenueSummaryResponse(
        current=_money(summary.current),
        previous_month=_money(summary.previous_month),
        previous_year=_money(summary.previous_year),
        month_change=_change(summary.month_change),
        year_change=_change(summary.year_change),
        as_of=summary.as_of,
    )


def revenue_mix_response(mix: RevenueMix) -> RevenueMixResponse:
    return RevenueMixResponse(
        total=_money(mix.total),
        buckets=[
            MixBucketResponse(name=b.name, amount=_money(b.amount), percentage=b.percentage)
            for b in mix.buckets
        ],
    )


def application_stats_response(stats: ApplicationStats) -> ApplicationStatsResponse:
    return ApplicationStatsResponse(
        this_month=stats.this_month,
        this_year=stats.this_year,
        previous_month=stats.previous_month,
        same_month_last_year=stats.same_month_last_year,
        month_change=stats.month_change,
        year_change=stats.year_change,
        month_direction=stats.month_direction,
        year_direction=stats.year_direction,
    )


def active_guests_response(guests: ActiveGuests) -> ActiveGuestsResponse:
    return ActiveGuestsResponse(
        count=guests.count,
        sample=[_user(u) for u in guests.sample if u is not None],
    )


def ticket_sales_response(sales: EventTicketSales) -> EventTicketSalesResponse:
    event = sales.event
    return EventTicketSalesResponse(
        event_id=event.event_id,
        title=event.title,
        state=event.state,
        badge=badge_for_event_state(event.state),
        start_date=event.start_date,
        tiers=[
            TierSalesResponse(
                name=t.name,
                sold_count=t.sold_count,
                quantity=t.quantity,
                unlimited=t.is_unlimited,
            )
            for t in sales.tiers
        ],
    )


def _pending(application: PendingApplication) -> PendingApplicationResponse:
    form = application.user.registration_form
    return PendingApplicationResponse(
        user=_user(application.user),
        membership_type=form.membership_type.value if form else None,
        submitted_on=application.submitted_on,
    )


def _comment(comment: Comment) -> CommentResponse:
    return CommentResponse(
        comment_id=comment.comment_id,
        post_id=comment.post_id,
        post_title=comment.post.title if comment.post else None,
        author=_user(comment.author),
        text=comment.text,
        created_at=comment.created_at,
    )


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    dashboard: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Full admin overview."""
    view = dashboard.overview(now_utc())
    return DashboardResponse(
        revenue=revenue_summary_response(view.revenue),
        revenue_mix=revenue_mix_response(view.revenue_mix),
        applications=application_stats_response(view.applications),
        active_guests=active_guests_response(view.active_guests),
        ticket_sales=[ticket_sales_response(s) for s in view.ticket_sales],
        pending_applications=[_pending(p) for p in view.pending_applications],
        latest_comments=[_comment(c) for c in view.latest_comments],
        as_of=view.as_of,
    )


@router.get("/revenue", response_model=RevenueResponse)
def get_revenue(
    dashboard: DashboardService = Depends(get_dashboard_service),
) -> RevenueResponse:
    """Month-to-date revenue against prior periods, with category mix."""
    now = now_utc()
    return RevenueResponse(
        summary=revenue_summary_response(dashboard.revenue_summary(now)),
        mix=revenue_mix_response(dashboard.revenue_mix(now)),
    )


@router.get("/applications", response_model=ApplicationStatsResponse)
def get_applications(
    dashboard: DashboardService = Depends(get_dashboard_service),
) -> ApplicationStatsResponse:
    return application_stats_response(dashboard.application_stats(now_utc()))


@router.get("/active-guests", response_model=ActiveGuestsResponse)
def get_active_guests(
    dashboard: DashboardService = Depends(get_dashboard_service),
) -> ActiveGuestsResponse:
    return active_guests_response(dashboard.active_guests(now_utc()))
