"""Domain layer - pure business models with no external dependencies."""

from clubdesk.domain.models import (
    Money,
    LedgerAccount,
    LedgerEntry,
    User,
    RegistrationForm,
    Booking,
    Event,
    TicketTier,
    Post,
    Comment,
    Direction,
    BadgeStyle,
)

__all__ = [
    "Money",
    "LedgerAccount",
    "LedgerEntry",
    "User",
    "RegistrationForm",
    "Booking",
    "Event",
    "TicketTier",
    "Post",
    "Comment",
    "Direction",
    "BadgeStyle",
]
