"""Event and ticket tier domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clubdesk.domain.models.enums import EventState


@dataclass
class TicketTier:
    """Ticket tier of an event. A quantity of None means unlimited."""

    tier_id: str
    event_id: str
    name: str
    quantity: Optional[int] = None
    sold_count: int = 0

    @property
    def is_unlimited(self) -> bool:
        return self.quantity is None


@dataclass
class Event:
    event_id: str
    title: str
    state: EventState = EventState.DRAFT
    start_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    ticket_tiers: list[TicketTier] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.state, str):
            self.state = EventState(self.state)
