"""Who is staying at the cabins right now."""

from datetime import datetime, time
from typing import Optional

from clubdesk.core.timezone import UTC, now_utc, to_utc
from clubdesk.domain.models import Booking, CHECKOUT_TIME
from clubdesk.domain.views import ActiveGuests
from clubdesk.repositories.protocols import BookingRepository

SAMPLE_SIZE = 3


class ActiveGuestService:
    """
    Point-in-time snapshot of active guests.

    A complete booking is active until the checkout cutoff on its checkout
    date. Nothing is cached; every call re-queries.
    """

    def __init__(
        self,
        booking_repo: BookingRepository,
        checkout_time: time = CHECKOUT_TIME,
        sample_size: int = SAMPLE_SIZE,
    ):
        self._bookings = booking_repo
        self._checkout_time = checkout_time
        self._sample_size = sample_size

    def is_active(self, booking: Booking, now: datetime) -> bool:
        now = to_utc(now)
        today = now.date()
        if booking.checkout_date > today:
            return True
        if booking.checkout_date < today:
            return False
        cutoff = UTC.localize(datetime.combine(today, self._checkout_time))
        return now < cutoff

    def active_guests(self, now: Optional[datetime] = None) -> ActiveGuests:
        now = to_utc(now or now_utc())
        bookings = self._bookings.list_active_bookings(now.date())

        seen: set[str] = set()
        guests = []
        for booking in bookings:
            if not self.is_active(booking, now) or booking.user_id in seen:
                continue
            seen.add(booking.user_id)
            guests.append(booking.user)

        return ActiveGuests(count=len(guests), sample=guests[: self._sample_size])
