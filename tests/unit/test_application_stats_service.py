"""
Unit tests for ApplicationStatsService.

Tests cover:
- Month / year / previous-month / same-month-last-year counts
- Percent change with the zero-previous rule
"""

from clubdesk.services import ApplicationStatsService
from clubdesk.services.application_stats_service import count_change
from clubdesk.domain.models import Direction

from tests.conftest import utc_datetime


NOW = utc_datetime(2024, 6, 15, 14, 30)


class TestCountChange:
    def test_growth(self):
        assert count_change(15, 10) == 50

    def test_decline(self):
        assert count_change(2, 3) == -33

    def test_zero_previous_reports_zero(self):
        """
        GIVEN no registrations in the previous period
        WHEN the change is computed
        THEN 0 is reported, not a sentinel
        """
        assert count_change(7, 0) == 0


class TestApplicationStats:
    """Tests for registration counts in rolling windows."""

    def test_counts_each_window(
        self,
        application_stats_service: ApplicationStatsService,
        user_factory,
    ):
        """
        GIVEN users created across this month, earlier this year, last month
              and June last year
        WHEN stats are computed
        THEN each window counts only its own users
        """
        for day in (1, 5, 15):
            user_factory(created_at=utc_datetime(2024, 6, day, 9))
        user_factory(created_at=utc_datetime(2024, 6, 15, 15))  # after now
        user_factory(created_at=utc_datetime(2024, 5, 10))
        user_factory(created_at=utc_datetime(2024, 5, 31, 23, 59))
        user_factory(created_at=utc_datetime(2024, 2, 1))
        user_factory(created_at=utc_datetime(2023, 6, 20))
        user_factory(created_at=utc_datetime(2023, 6, 30, 23))
        user_factory(created_at=utc_datetime(2023, 7, 1, 0, 0))

        stats = application_stats_service.application_stats(NOW)

        assert stats.this_month == 3
        assert stats.this_year == 6
        assert stats.previous_month == 2
        assert stats.same_month_last_year == 2
        assert stats.month_change == 50
        assert stats.year_change == 50
        assert stats.month_direction == Direction.UP
        assert stats.year_direction == Direction.UP

    def test_empty_previous_periods(
        self,
        application_stats_service: ApplicationStatsService,
        user_factory,
    ):
        user_factory(created_at=utc_datetime(2024, 6, 2))

        stats = application_stats_service.application_stats(NOW)

        assert stats.this_month == 1
        assert stats.month_change == 0
        assert stats.year_change == 0
        assert stats.month_direction == Direction.STABLE

    def test_no_users(self, application_stats_service: ApplicationStatsService):
        stats = application_stats_service.application_stats(NOW)

        assert stats.this_month == 0
        assert stats.this_year == 0
        assert stats.month_change == 0
