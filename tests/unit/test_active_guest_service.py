"""
Unit tests for ActiveGuestService.

Tests cover:
- Checkout cutoff at 11:00 UTC on the checkout date
- Booking status filtering
- Deduplication by user and the three-user sample
"""

from datetime import date

from clubdesk.services import ActiveGuestService
from clubdesk.domain.models import BookingStatus

from tests.conftest import utc_datetime


TODAY = date(2024, 6, 15)


class TestCheckoutCutoff:
    """Tests for same-day checkouts around 11:00."""

    def test_same_day_checkout_before_cutoff_is_active(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        """
        GIVEN a complete booking checking out today
        WHEN active guests are sampled at 10:59
        THEN the guest is counted
        """
        booking_factory(member_user, date(2024, 6, 13), TODAY)

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 10, 59))

        assert guests.count == 1
        assert guests.sample[0].user_id == member_user.user_id

    def test_same_day_checkout_after_cutoff_is_gone(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        booking_factory(member_user, date(2024, 6, 13), TODAY)

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 11, 1))

        assert guests.count == 0
        assert guests.sample == []

    def test_exactly_at_cutoff_is_gone(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        booking_factory(member_user, date(2024, 6, 13), TODAY)

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 11, 0))

        assert guests.count == 0

    def test_checkout_tomorrow_is_active_after_cutoff(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        booking_factory(member_user, date(2024, 6, 14), date(2024, 6, 16))

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 11, 1))

        assert guests.count == 1

    def test_past_checkout_is_not_active(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        booking_factory(member_user, date(2024, 6, 10), date(2024, 6, 14))

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 8, 0))

        assert guests.count == 0


class TestActiveGuestSelection:
    """Tests for status filtering, dedup and sampling."""

    def test_only_complete_bookings_count(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        user_factory,
    ):
        for status in (
            BookingStatus.DRAFT,
            BookingStatus.HOLD,
            BookingStatus.REFUNDED,
            BookingStatus.CANCELED,
        ):
            booking_factory(user_factory(), TODAY, date(2024, 6, 17), status=status)
        complete = user_factory()
        booking_factory(complete, TODAY, date(2024, 6, 17))

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 12))

        assert guests.count == 1
        assert guests.sample[0].user_id == complete.user_id

    def test_user_with_two_bookings_counted_once(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        member_user,
    ):
        """
        GIVEN one user holding two overlapping complete bookings
        WHEN active guests are sampled
        THEN the user is counted once
        """
        booking_factory(member_user, date(2024, 6, 14), date(2024, 6, 16))
        booking_factory(member_user, date(2024, 6, 15), date(2024, 6, 18))

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 12))

        assert guests.count == 1
        assert len(guests.sample) == 1

    def test_sample_holds_at_most_three(
        self,
        active_guest_service: ActiveGuestService,
        booking_factory,
        user_factory,
    ):
        users = [user_factory() for _ in range(5)]
        for offset, user in enumerate(users):
            booking_factory(user, date(2024, 6, 10 + offset), date(2024, 6, 20))

        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 12))

        assert guests.count == 5
        assert [u.user_id for u in guests.sample] == [u.user_id for u in users[:3]]

    def test_no_bookings(self, active_guest_service: ActiveGuestService):
        guests = active_guest_service.active_guests(utc_datetime(2024, 6, 15, 12))

        assert guests.count == 0
        assert guests.sample == []
