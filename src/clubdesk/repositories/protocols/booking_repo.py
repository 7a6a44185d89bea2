"""Booking repository protocol."""

from datetime import date
from typing import Protocol

from clubdesk.domain.models import Booking


class BookingRepository(Protocol):
    """Interface for booking data access."""

    def create(self, booking: Booking) -> Booking:
        """Persist a new booking."""
        ...

    def list_active_bookings(self, on_or_after: date) -> list[Booking]:
        """
        COMPLETE bookings checking out on or after a date.

        Ordered by checkin date, with the booking user loaded.
        """
        ...
