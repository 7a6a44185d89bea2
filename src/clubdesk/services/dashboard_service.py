"""Admin dashboard overview."""

import logging
from datetime import datetime
from typing import Callable, Optional, TypeVar

from clubdesk.core.timezone import now_utc, to_display_tz
from clubdesk.domain.models import Comment, Money
from clubdesk.domain.views import (
    ActiveGuests,
    ApplicationStats,
    DashboardView,
    EventTicketSales,
    MixBucket,
    PendingApplication,
    RevenueChange,
    RevenueMix,
    RevenueSummary,
)
from clubdesk.repositories.protocols import PostRepository, UserRepository
from clubdesk.services.active_guest_service import ActiveGuestService
from clubdesk.services.application_stats_service import ApplicationStatsService
from clubdesk.services.event_service import EventService
from clubdesk.services.revenue_service import MIX_BUCKETS, RevenueService

logger = logging.getLogger(__name__)

T = TypeVar("T")

LATEST_COMMENTS_LIMIT = 5


def empty_revenue_summary(currency: str = "USD", as_of: Optional[datetime] = None) -> RevenueSummary:
    zero = Money.zero(currency)
    return RevenueSummary(
        current=zero,
        previous_month=zero,
        previous_year=zero,
        month_change=RevenueChange(),
        year_change=RevenueChange(),
        as_of=as_of,
    )


def empty_revenue_mix(currency: str = "USD") -> RevenueMix:
    zero = Money.zero(currency)
    return RevenueMix(
        total=zero,
        buckets=[MixBucket(name=name, amount=zero) for name, _ in MIX_BUCKETS],
    )


class DashboardService:
    """
    Builds the admin overview.

    Each section is computed independently; a section whose query fails is
    logged and replaced by a neutral placeholder so the rest still renders.
    """

    def __init__(
        self,
        revenue: RevenueService,
        applications: ApplicationStatsService,
        guests: ActiveGuestService,
        events: EventService,
        user_repo: UserRepository,
        post_repo: PostRepository,
        currency: str = "USD",
        display_timezone: Optional[str] = None,
    ):
        self._revenue = revenue
        self._applications = applications
        self._guests = guests
        self._events = events
        self._users = user_repo
        self._posts = post_repo
        self._currency = currency
        self._display_tz = display_timezone

    def overview(self, now: Optional[datetime] = None) -> DashboardView:
        now = now or now_utc()
        return DashboardView(
            revenue=self.revenue_summary(now),
            revenue_mix=self.revenue_mix(now),
            applications=self.application_stats(now),
            active_guests=self.active_guests(now),
            ticket_sales=self.ticket_sales(now),
            pending_applications=self.pending_applications(),
            latest_comments=self.latest_comments(),
            as_of=now,
        )

    def revenue_summary(self, now: datetime) -> RevenueSummary:
        return self._section(
            "revenue",
            lambda: self._revenue.period_summary(now),
            lambda: empty_revenue_summary(self._currency, now),
        )

    def revenue_mix(self, now: datetime) -> RevenueMix:
        return self._section(
            "revenue mix",
            lambda: self._revenue.revenue_mix(now),
            lambda: empty_revenue_mix(self._currency),
        )

    def application_stats(self, now: datetime) -> ApplicationStats:
        return self._section(
            "applications",
            lambda: self._applications.application_stats(now),
            ApplicationStats,
        )

    def active_guests(self, now: datetime) -> ActiveGuests:
        return self._section(
            "active guests",
            lambda: self._guests.active_guests(now),
            ActiveGuests,
        )

    def ticket_sales(self, now: datetime) -> list[EventTicketSales]:
        return self._section(
            "ticket sales",
            lambda: self._events.upcoming_ticket_sales(now),
            list,
        )

    def pending_applications(self) -> list[PendingApplication]:
        def load() -> list[PendingApplication]:
            result = []
            for user in self._users.list_pending_approval():
                form = user.registration_form
                submitted = None
                if form is not None and form.completed is not None:
                    submitted = to_display_tz(form.completed, self._display_tz)
                result.append(PendingApplication(user=user, submitted_on=submitted))
            return result

        return self._section("pending applications", load, list)

    def latest_comments(self) -> list[Comment]:
        return self._section(
            "latest comments",
            lambda: self._posts.latest_comments(LATEST_COMMENTS_LIMIT),
            list,
        )

    @staticmethod
    def _section(name: str, compute: Callable[[], T], placeholder: Callable[[], T]) -> T:
        try:
            return compute()
        except Exception:
            logger.exception("Dashboard section '%s' failed; showing placeholder", name)
            return placeholder()
