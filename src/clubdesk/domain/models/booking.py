"""Booking domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from clubdesk.domain.models.enums import BookingStatus
from clubdesk.domain.models.user import User

CHECKOUT_TIME = time(11, 0)


@dataclass
class Booking:
    """
    Cabin stay booked by a member.

    A COMPLETE booking holds the stay from checkin_date until the checkout
    cutoff (11:00 UTC) on checkout_date.
    """

    booking_id: str
    user_id: str
    status: BookingStatus
    checkin_date: date
    checkout_date: date
    user: Optional[User] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.status, str):
            self.status = BookingStatus(self.status)
