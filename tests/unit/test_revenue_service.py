"""
Unit tests for RevenueService.

Tests cover:
- Half-open window sums over credit entries
- Month-over-month and year-over-year change
- First-period sentinel when the previous period is empty
- Revenue mix percentages, including rounding drift
"""

import pytest
from decimal import Decimal

from clubdesk.services import RevenueService
from clubdesk.services.revenue_service import percent_change
from clubdesk.domain.models import DebitCredit, Direction, Money

from tests.conftest import utc_datetime, assert_decimal_equal


NOW = utc_datetime(2024, 6, 15, 14, 30)


# =============================================================================
# PERCENT CHANGE TESTS
# =============================================================================


class TestPercentChange:
    """Tests for the revenue change helper."""

    def test_increase_rounds_half_away_from_zero(self):
        """
        GIVEN current 1.25x the previous period
        WHEN the change is computed
        THEN percent is 25 and direction UP
        """
        change = percent_change(Money(Decimal("125")), Money(Decimal("100")))

        assert change.percent == 25
        assert change.direction == Direction.UP
        assert change.first_period is False

    def test_half_percent_rounds_up(self):
        change = percent_change(Money(Decimal("100.5")), Money(Decimal("100")))

        assert change.percent == 1

    def test_negative_half_rounds_away_from_zero(self):
        change = percent_change(Money(Decimal("99.5")), Money(Decimal("100")))

        assert change.percent == -1
        assert change.direction == Direction.DOWN

    def test_equal_periods_are_stable(self):
        change = percent_change(Money(Decimal("80")), Money(Decimal("80")))

        assert change.percent == 0
        assert change.direction == Direction.STABLE
        assert change.first_period is False

    def test_zero_previous_is_first_period(self):
        """
        GIVEN no revenue in the previous period
        WHEN the change is computed
        THEN no percent is reported and the result is flagged first_period
        """
        change = percent_change(Money(Decimal("500")), Money.zero())

        assert change.percent is None
        assert change.first_period is True
        assert change.direction == Direction.STABLE


# =============================================================================
# WINDOW TESTS
# =============================================================================


class TestTotalForWindow:
    """Tests for window sums."""

    def test_sums_credits_in_half_open_window(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        """
        GIVEN credits at the window start, inside, and at the window end
        WHEN the window total is computed
        THEN the start is included and the end is excluded
        """
        start = utc_datetime(2024, 6, 1, 0, 0)
        end = utc_datetime(2024, 7, 1, 0, 0)
        credit_factory("event_revenue", "10.00", start)
        credit_factory("event_revenue", "15.50", utc_datetime(2024, 6, 20))
        credit_factory("event_revenue", "99.00", end)

        total = revenue_service.total_for_window(["event_revenue"], start, end)

        assert_decimal_equal(total.amount, Decimal("25.50"))

    def test_debits_are_ignored(
        self,
        revenue_service: RevenueService,
        ledger_service,
        credit_factory,
    ):
        credit_factory("membership_revenue", "45.00", utc_datetime(2024, 6, 2))
        ledger_service.post_entry(
            "membership_revenue",
            DebitCredit.DEBIT,
            Decimal("45.00"),
            created_at=utc_datetime(2024, 6, 3),
        )

        total = revenue_service.total_for_window(
            ["membership_revenue"], utc_datetime(2024, 6, 1, 0), NOW
        )

        assert total.amount == Decimal("45.00")

    def test_unknown_account_contributes_zero(self, revenue_service: RevenueService):
        total = revenue_service.total_for_window(
            ["no_such_account"], utc_datetime(2024, 6, 1, 0), NOW
        )

        assert total.is_zero


# =============================================================================
# PERIOD SUMMARY TESTS
# =============================================================================


class TestPeriodSummary:
    """Tests for month-to-date vs previous periods."""

    def test_month_and_year_comparison(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        """
        GIVEN 150 this month, 100 last month and 200 in June last year
        WHEN the period summary is computed
        THEN month change is +50% and year change is -25%
        """
        credit_factory("tahoe_booking_revenue", "100.00", utc_datetime(2024, 6, 3))
        credit_factory("event_revenue", "50.00", utc_datetime(2024, 6, 10))
        credit_factory("membership_revenue", "100.00", utc_datetime(2024, 5, 20))
        credit_factory("clear_lake_booking_revenue", "200.00", utc_datetime(2023, 6, 28))

        summary = revenue_service.period_summary(NOW)

        assert summary.current.amount == Decimal("150.00")
        assert summary.previous_month.amount == Decimal("100.00")
        assert summary.previous_year.amount == Decimal("200.00")
        assert summary.month_change.percent == 50
        assert summary.month_change.direction == Direction.UP
        assert summary.year_change.percent == -25
        assert summary.year_change.direction == Direction.DOWN
        assert summary.as_of == NOW

    def test_revenue_after_now_is_not_counted(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        credit_factory("event_revenue", "30.00", utc_datetime(2024, 6, 15, 14, 29))
        credit_factory("event_revenue", "70.00", utc_datetime(2024, 6, 15, 14, 31))

        summary = revenue_service.period_summary(NOW)

        assert summary.current.amount == Decimal("30.00")

    def test_first_period_when_nothing_before(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        """
        GIVEN revenue only in the current month
        WHEN the period summary is computed
        THEN both changes are flagged first_period with no percent
        """
        credit_factory("event_revenue", "75.00", utc_datetime(2024, 6, 1, 8))

        summary = revenue_service.period_summary(NOW)

        assert summary.month_change.first_period is True
        assert summary.month_change.percent is None
        assert summary.year_change.first_period is True

    def test_non_revenue_accounts_excluded(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        credit_factory("donation_revenue", "500.00", utc_datetime(2024, 6, 5))
        credit_factory("event_revenue", "20.00", utc_datetime(2024, 6, 5))

        summary = revenue_service.period_summary(NOW)

        assert summary.current.amount == Decimal("20.00")


# =============================================================================
# REVENUE MIX TESTS
# =============================================================================


class TestRevenueMix:
    """Tests for the bookings / events / membership split."""

    def test_two_bucket_split(self, revenue_service: RevenueService, credit_factory):
        """
        GIVEN $100 of booking revenue and $50 of event revenue
        WHEN the mix is computed
        THEN percentages are 67 / 33 / 0
        """
        credit_factory("tahoe_booking_revenue", "100.00", utc_datetime(2024, 6, 2))
        credit_factory("event_revenue", "50.00", utc_datetime(2024, 6, 3))

        mix = revenue_service.revenue_mix(NOW)

        assert mix.total.amount == Decimal("150.00")
        assert [b.name for b in mix.buckets] == ["bookings", "events", "membership"]
        assert mix.bucket("bookings").percentage == 67
        assert mix.bucket("events").percentage == 33
        assert mix.bucket("membership").percentage == 0

    def test_bookings_bucket_combines_both_cabins(
        self,
        revenue_service: RevenueService,
        credit_factory,
    ):
        credit_factory("tahoe_booking_revenue", "60.00", utc_datetime(2024, 6, 2))
        credit_factory("clear_lake_booking_revenue", "40.00", utc_datetime(2024, 6, 4))

        mix = revenue_service.revenue_mix(NOW)

        assert mix.bucket("bookings").amount.amount == Decimal("100.00")
        assert mix.bucket("bookings").percentage == 100

    def test_empty_month_is_all_zero(self, revenue_service: RevenueService):
        mix = revenue_service.revenue_mix(NOW)

        assert mix.total.is_zero
        assert [b.percentage for b in mix.buckets] == [0, 0, 0]

    @pytest.mark.parametrize(
        "amounts, expected, expected_sum",
        [
            (("1.00", "1.00", "1.00"), [33, 33, 33], 99),
            (("1.00", "1.00", "6.00"), [13, 13, 75], 101),
        ],
    )
    def test_rounding_drift_is_preserved(
        self,
        revenue_service: RevenueService,
        credit_factory,
        amounts,
        expected,
        expected_sum,
    ):
        """
        GIVEN bucket amounts whose independent rounding does not add to 100
        WHEN the mix is computed
        THEN each percentage is rounded on its own and the drift is kept
        """
        bookings, events, membership = amounts
        credit_factory("tahoe_booking_revenue", bookings, utc_datetime(2024, 6, 2))
        credit_factory("event_revenue", events, utc_datetime(2024, 6, 2))
        credit_factory("membership_revenue", membership, utc_datetime(2024, 6, 2))

        mix = revenue_service.revenue_mix(NOW)

        percentages = [b.percentage for b in mix.buckets]
        assert percentages == expected
        assert sum(percentages) == expected_sum
