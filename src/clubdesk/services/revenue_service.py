"""Revenue aggregation over the ledger."""

from datetime import datetime
from typing import Iterable, Optional

from clubdesk.core.percent import change_percent, share_percent
from clubdesk.core.timezone import month_start, now_utc, shift_months
from clubdesk.domain.models import Direction, Money
from clubdesk.domain.views import (
    MixBucket,
    RevenueChange,
    RevenueMix,
    RevenueSummary,
)
from clubdesk.repositories.protocols import LedgerRepository

MEMBERSHIP_ACCOUNTS = ("membership_revenue",)
EVENT_ACCOUNTS = ("event_revenue",)
BOOKING_ACCOUNTS = ("tahoe_booking_revenue", "clear_lake_booking_revenue")

# Revenue mix buckets in display order
MIX_BUCKETS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("bookings", BOOKING_ACCOUNTS),
    ("events", EVENT_ACCOUNTS),
    ("membership", MEMBERSHIP_ACCOUNTS),
)

REVENUE_ACCOUNTS = BOOKING_ACCOUNTS + EVENT_ACCOUNTS + MEMBERSHIP_ACCOUNTS


def percent_change(current: Money, previous: Money) -> RevenueChange:
    """
    Month-over-month style revenue delta.

    With no previous revenue there is nothing to compare against: the result
    is flagged first_period with no percent and a STABLE direction.
    """
    if previous.amount <= 0:
        return RevenueChange(percent=None, direction=Direction.STABLE, first_period=True)
    change = change_percent(current.amount, previous.amount)
    return RevenueChange(
        percent=change,
        direction=Direction.from_change(change),
        first_period=False,
    )


class RevenueService:
    """
    Time-windowed revenue rollups for the admin dashboard.

    Windows are half-open [start, end) in UTC. The current period runs from
    the start of this month to now.
    """

    def __init__(self, ledger_repo: LedgerRepository, currency: str = "USD"):
        self._ledger = ledger_repo
        self._currency = currency

    def total_for_window(
        self,
        account_names: Iterable[str],
        start: datetime,
        end: datetime,
    ) -> Money:
        """Sum of absolute credits to the named accounts in [start, end)."""
        total = Money.zero(self._currency)
        for name in account_names:
            total = total + self._ledger.sum_credits(name, start, end, self._currency)
        return total

    def period_summary(
        self,
        now: Optional[datetime] = None,
        account_names: Iterable[str] = REVENUE_ACCOUNTS,
    ) -> RevenueSummary:
        """Current month-to-date revenue against last month and last year."""
        now = now or now_utc()
        account_names = tuple(account_names)
        start = month_start(now)
        last_month = shift_months(start, -1)
        last_year = shift_months(start, -12)

        current = self.total_for_window(account_names, start, now)
        previous_month = self.total_for_window(account_names, last_month, start)
        previous_year = self.total_for_window(
            account_names, last_year, shift_months(last_year, 1)
        )

        return RevenueSummary(
            current=current,
            previous_month=previous_month,
            previous_year=previous_year,
            month_change=percent_change(current, previous_month),
            year_change=percent_change(current, previous_year),
            as_of=now,
        )

    def revenue_mix(self, now: Optional[datetime] = None) -> RevenueMix:
        """
        Split month-to-date revenue into bookings / events / membership.

        Each percentage is rounded on its own; the three need not add up to
        exactly 100.
        """
        now = now or now_utc()
        start = month_start(now)

        amounts = [
            (name, self.total_for_window(accounts, start, now))
            for name, accounts in MIX_BUCKETS
        ]
        total = Money.zero(self._currency)
        for _, amount in amounts:
            total = total + amount

        return RevenueMix(
            total=total,
            buckets=[
                MixBucket(
                    name=name,
                    amount=amount,
                    percentage=share_percent(amount.amount, total.amount),
                )
                for name, amount in amounts
            ],
        )
