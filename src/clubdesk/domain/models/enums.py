"""Enumerations for domain models."""

from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Ledger account classes."""

    ASSET = "asset"
    LIABILITY = "liability"
    REVENUE = "revenue"
    EXPENSE = "expense"


class DebitCredit(str, Enum):
    """Direction of a ledger entry."""

    DEBIT = "debit"
    CREDIT = "credit"


class UserRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


class UserState(str, Enum):
    ACTIVE = "active"
    PENDING_APPROVAL = "pending_approval"
    REJECTED = "rejected"
    DELETED = "deleted"


class MembershipType(str, Enum):
    FAMILY = "family"
    SINGLE = "single"


class BookingStatus(str, Enum):
    """Booking lifecycle states. Only COMPLETE bookings hold a stay."""

    DRAFT = "draft"
    HOLD = "hold"
    COMPLETE = "complete"
    REFUNDED = "refunded"
    CANCELED = "canceled"


class EventState(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    DELETED = "deleted"


class PostState(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    DELETED = "deleted"


class Direction(str, Enum):
    """Period-over-period trend tag."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"

    @classmethod
    def from_change(cls, change: Optional[int]) -> "Direction":
        """Tag a percentage change; no change (or no comparison) is STABLE."""
        if change is None or change == 0:
            return cls.STABLE
        if change > 0:
            return cls.UP
        return cls.DOWN


class BadgeStyle(str, Enum):
    """Colour of a state badge in the admin views."""

    SKY = "sky"
    YELLOW = "yellow"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    DEFAULT = "default"


_POST_BADGES = {
    PostState.DRAFT: BadgeStyle.YELLOW,
    PostState.PUBLISHED: BadgeStyle.GREEN,
    PostState.DELETED: BadgeStyle.RED,
}

_EVENT_BADGES = {
    EventState.DRAFT: BadgeStyle.SKY,
    EventState.SCHEDULED: BadgeStyle.YELLOW,
    EventState.PUBLISHED: BadgeStyle.GREEN,
    EventState.CANCELLED: BadgeStyle.ORANGE,
    EventState.DELETED: BadgeStyle.RED,
}


def badge_for_post_state(state) -> BadgeStyle:
    """Badge for a post state; unknown or missing states get DEFAULT."""
    try:
        return _POST_BADGES[PostState(state)]
    except ValueError:
        return BadgeStyle.DEFAULT


def badge_for_event_state(state) -> BadgeStyle:
    """Badge for an event state; unknown or missing states get DEFAULT."""
    try:
        return _EVENT_BADGES[EventState(state)]
    except ValueError:
        return BadgeStyle.DEFAULT
