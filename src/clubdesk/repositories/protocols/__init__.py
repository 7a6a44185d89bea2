"""Repository protocol definitions (interfaces)."""

from clubdesk.repositories.protocols.ledger_repo import LedgerRepository
from clubdesk.repositories.protocols.user_repo import UserRepository
from clubdesk.repositories.protocols.booking_repo import BookingRepository
from clubdesk.repositories.protocols.event_repo import EventRepository
from clubdesk.repositories.protocols.post_repo import PostRepository

__all__ = [
    "LedgerRepository",
    "UserRepository",
    "BookingRepository",
    "EventRepository",
    "PostRepository",
]
