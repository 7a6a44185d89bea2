"""View models for dashboard and admin list outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clubdesk.domain.models import (
    BadgeStyle,
    Comment,
    Direction,
    Event,
    Money,
    TicketTier,
    User,
)


@dataclass
class RevenueChange:
    """
    Period-over-period revenue delta.

    first_period is set when the previous period had no revenue; there is
    then no numeric percent and the direction is STABLE.
    """

    percent: Optional[int] = None
    direction: Direction = Direction.STABLE
    first_period: bool = True


@dataclass
class RevenueSummary:
    current: Money
    previous_month: Money
    previous_year: Money
    month_change: RevenueChange
    year_change: RevenueChange
    as_of: Optional[datetime] = None


@dataclass
class MixBucket:
    """One slice of the revenue mix."""

    name: str
    amount: Money
    percentage: int = 0


@dataclass
class RevenueMix:
    """
    Current-period revenue split by category.

    Percentages are rounded independently and may sum to 99 or 101.
    """

    total: Money
    buckets: list[MixBucket] = field(default_factory=list)

    def bucket(self, name: str) -> Optional[MixBucket]:
        for bucket in self.buckets:
            if bucket.name == name:
                return bucket
        return None


@dataclass
class ApplicationStats:
    """New registrations in rolling windows with period-over-period change."""

    this_month: int = 0
    this_year: int = 0
    previous_month: int = 0
    same_month_last_year: int = 0
    month_change: int = 0
    year_change: int = 0
    month_direction: Direction = Direction.STABLE
    year_direction: Direction = Direction.STABLE


@dataclass
class ActiveGuests:
    """Distinct users currently staying, with a short display sample."""

    count: int = 0
    sample: list[User] = field(default_factory=list)


@dataclass
class TierSales:
    name: str
    sold_count: int
    quantity: Optional[int] = None

    @property
    def is_unlimited(self) -> bool:
        return self.quantity is None

    @classmethod
    def from_tier(cls, tier: TicketTier) -> "TierSales":
        return cls(name=tier.name, sold_count=tier.sold_count, quantity=tier.quantity)


@dataclass
class EventTicketSales:
    event: Event
    tiers: list[TierSales] = field(default_factory=list)


@dataclass
class EventListItem:
    event: Event
    badge: BadgeStyle


@dataclass
class EventPage:
    items: list[EventListItem] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 20
    total_pages: int = 1


@dataclass
class PendingApplication:
    """Pending membership application, submitted date in display timezone."""

    user: User
    submitted_on: Optional[datetime] = None


@dataclass
class DashboardView:
    revenue: RevenueSummary
    revenue_mix: RevenueMix
    applications: ApplicationStats
    active_guests: ActiveGuests
    ticket_sales: list[EventTicketSales] = field(default_factory=list)
    pending_applications: list[PendingApplication] = field(default_factory=list)
    latest_comments: list[Comment] = field(default_factory=list)
    as_of: Optional[datetime] = None
