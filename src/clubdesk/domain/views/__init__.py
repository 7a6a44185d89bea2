"""View models for service outputs."""

from clubdesk.domain.views.dashboard import (
    RevenueChange,
    RevenueSummary,
    MixBucket,
    RevenueMix,
    ApplicationStats,
    ActiveGuests,
    TierSales,
    EventTicketSales,
    EventListItem,
    EventPage,
    PendingApplication,
    DashboardView,
)

__all__ = [
    "RevenueChange",
    "RevenueSummary",
    "MixBucket",
    "RevenueMix",
    "ApplicationStats",
    "ActiveGuests",
    "TierSales",
    "EventTicketSales",
    "EventListItem",
    "EventPage",
    "PendingApplication",
    "DashboardView",
]
