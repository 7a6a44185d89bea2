"""New-member application statistics."""

from datetime import datetime
from typing import Optional

from clubdesk.core.percent import change_percent
from clubdesk.core.timezone import month_start, now_utc, shift_months, year_start
from clubdesk.domain.models import Direction
from clubdesk.domain.views import ApplicationStats
from clubdesk.repositories.protocols import UserRepository


def count_change(current: int, previous: int) -> int:
    """Percent change between counts; 0 when there is no previous count."""
    if previous <= 0:
        return 0
    return change_percent(current, previous)


class ApplicationStatsService:
    """Counts user registrations in rolling month/year windows."""

    def __init__(self, user_repo: UserRepository):
        self._users = user_repo

    def application_stats(self, now: Optional[datetime] = None) -> ApplicationStats:
        now = now or now_utc()
        start = month_start(now)
        last_month = shift_months(start, -1)
        last_year = shift_months(start, -12)

        this_month = self._users.count_created_between(start, now)
        this_year = self._users.count_created_between(year_start(now), now)
        previous_month = self._users.count_created_between(last_month, start)
        same_month_last_year = self._users.count_created_between(
            last_year, shift_months(last_year, 1)
        )

        month_change = count_change(this_month, previous_month)
        year_change = count_change(this_month, same_month_last_year)

        return ApplicationStats(
            this_month=this_month,
            this_year=this_year,
            previous_month=previous_month,
            same_month_last_year=same_month_last_year,
            month_change=month_change,
            year_change=year_change,
            month_direction=Direction.from_change(month_change),
            year_direction=Direction.from_change(year_change),
        )
