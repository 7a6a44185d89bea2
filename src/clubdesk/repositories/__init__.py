"""Repository layer - data access abstractions and implementations."""

from clubdesk.repositories.protocols import (
    LedgerRepository,
    UserRepository,
    BookingRepository,
    EventRepository,
    PostRepository,
)

__all__ = [
    "LedgerRepository",
    "UserRepository",
    "BookingRepository",
    "EventRepository",
    "PostRepository",
]
