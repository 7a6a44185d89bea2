"""Admin event listing and ticket sales."""

import math
from datetime import datetime
from typing import Optional

from clubdesk.core.exceptions import ValidationError
from clubdesk.core.timezone import now_utc
from clubdesk.domain.models import EventState, badge_for_event_state
from clubdesk.domain.views import (
    EventListItem,
    EventPage,
    EventTicketSales,
    TierSales,
)
from clubdesk.repositories.protocols import EventRepository

MAX_PAGE_SIZE = 100


class EventService:
    def __init__(self, event_repo: EventRepository):
        self._events = event_repo

    def list_events(
        self,
        state: Optional[EventState] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> EventPage:
        """
        Page through events for the admin list.

        Deleted events are hidden unless state=DELETED is asked for.
        """
        if page < 1:
            raise ValidationError("page must be >= 1")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        search = search.strip() if search else None

        total = self._events.count(state=state, search=search)
        events = self._events.query(
            state=state,
            search=search,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return EventPage(
            items=[EventListItem(event=e, badge=badge_for_event_state(e.state)) for e in events],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=max(1, math.ceil(total / page_size)),
        )

    def upcoming_ticket_sales(self, now: Optional[datetime] = None) -> list[EventTicketSales]:
        """Upcoming events with per-tier sold counts."""
        events = self._events.list_upcoming_with_ticket_tiers(now or now_utc())
        return [
            EventTicketSales(
                event=event,
                tiers=[TierSales.from_tier(t) for t in event.ticket_tiers],
            )
            for event in events
        ]
