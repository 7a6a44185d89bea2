"""Event repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from clubdesk.domain.models import Event, EventState, TicketTier


class EventRepository(Protocol):
    """Interface for event and ticket tier data access."""

    def create(self, event: Event) -> Event:
        """Persist a new event with its ticket tiers."""
        ...

    def get_by_id(self, event_id: str) -> Optional[Event]:
        """Retrieve event by ID (tiers included)."""
        ...

    def record_ticket_sales(self, tier_id: str, count: int) -> TicketTier:
        """Record sold tickets against a tier."""
        ...

    def query(
        self,
        state: Optional[EventState] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Event]:
        """List events (excluding deleted unless asked for) by start date, newest first."""
        ...

    def count(
        self,
        state: Optional[EventState] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count events matching the same filters as query()."""
        ...

    def list_upcoming_with_ticket_tiers(self, now: datetime) -> list[Event]:
        """Upcoming, non-deleted events with tiers and sold counts, soonest first."""
        ...
