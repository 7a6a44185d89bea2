"""SQLAlchemy implementation of BookingRepository."""

from datetime import date

from sqlalchemy.orm import Session, joinedload

from clubdesk.domain.models import Booking, BookingStatus
from clubdesk.repositories.sqlalchemy.orm_models import (
    BookingORM,
    from_db_time,
    to_db_time,
    utcnow_naive,
)
from clubdesk.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository


class SqlAlchemyBookingRepository:
    """SQLAlchemy-backed booking repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, booking: Booking) -> Booking:
        """Persist a new booking."""
        orm_booking = BookingORM(
            booking_id=booking.booking_id,
            user_id=booking.user_id,
            status=booking.status,
            checkin_date=booking.checkin_date,
            checkout_date=booking.checkout_date,
            created_at=to_db_time(booking.created_at) or utcnow_naive(),
        )
        self._db.add(orm_booking)
        self._db.commit()
        self._db.refresh(orm_booking)
        return self._to_domain(orm_booking)

    def list_active_bookings(self, on_or_after: date) -> list[Booking]:
        """COMPLETE bookings checking out on or after a date, by checkin date."""
        orm_bookings = (
            self._db.query(BookingORM)
            .options(joinedload(BookingORM.user))
            .filter(
                BookingORM.status == BookingStatus.COMPLETE,
                BookingORM.checkout_date >= on_or_after,
            )
            .order_by(BookingORM.checkin_date, BookingORM.created_at)
            .all()
        )
        return [self._to_domain(b) for b in orm_bookings]

    @staticmethod
    def _to_domain(orm: BookingORM) -> Booking:
        """Convert ORM model to domain model."""
        return Booking(
            booking_id=orm.booking_id,
            user_id=orm.user_id,
            status=orm.status,
            checkin_date=orm.checkin_date,
            checkout_date=orm.checkout_date,
            user=SqlAlchemyUserRepository._to_domain(orm.user) if orm.user else None,
            created_at=from_db_time(orm.created_at),
        )
