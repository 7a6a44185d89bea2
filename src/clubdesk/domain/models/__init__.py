"""Domain models package."""

from clubdesk.domain.models.enums import (
    AccountType,
    DebitCredit,
    UserRole,
    UserState,
    MembershipType,
    BookingStatus,
    EventState,
    PostState,
    Direction,
    BadgeStyle,
    badge_for_post_state,
    badge_for_event_state,
)
from clubdesk.domain.models.money import Money
from clubdesk.domain.models.ledger import LedgerAccount, LedgerEntry
from clubdesk.domain.models.user import User, RegistrationForm
from clubdesk.domain.models.booking import Booking, CHECKOUT_TIME
from clubdesk.domain.models.event import Event, TicketTier
from clubdesk.domain.models.post import Post, Comment

__all__ = [
    "AccountType",
    "DebitCredit",
    "UserRole",
    "UserState",
    "MembershipType",
    "BookingStatus",
    "EventState",
    "PostState",
    "Direction",
    "BadgeStyle",
    "badge_for_post_state",
    "badge_for_event_state",
    "Money",
    "LedgerAccount",
    "LedgerEntry",
    "User",
    "RegistrationForm",
    "Booking",
    "CHECKOUT_TIME",
    "Event",
    "TicketTier",
    "Post",
    "Comment",
]
