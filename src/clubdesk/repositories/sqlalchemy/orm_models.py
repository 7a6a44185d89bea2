"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Boolean,
    Integer,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from clubdesk.core.timezone import UTC, to_utc
from clubdesk.repositories.sqlalchemy.database import Base
from clubdesk.domain.models.enums import (
    AccountType,
    BookingStatus,
    DebitCredit,
    EventState,
    MembershipType,
    PostState,
    UserRole,
    UserState,
)


def to_db_time(dt: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC."""
    if dt is None:
        return None
    return to_utc(dt).replace(tzinfo=None)


def from_db_time(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    return UTC.localize(dt) if dt.tzinfo is None else dt


def utcnow_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class LedgerAccountORM(Base):
    """SQLAlchemy model for LedgerAccount."""

    __tablename__ = "ledger_accounts"

    account_id = Column(String(36), primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    account_type = Column(SqlEnum(AccountType), nullable=False)
    description = Column(Text, nullable=True)

    entries = relationship("LedgerEntryORM", back_populates="account")


class LedgerEntryORM(Base):
    """SQLAlchemy model for LedgerEntry."""

    __tablename__ = "ledger_entries"

    entry_id = Column(String(36), primary_key=True)
    account_id = Column(String(36), ForeignKey("ledger_accounts.account_id"), nullable=False)
    debit_credit = Column(SqlEnum(DebitCredit), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    currency = Column(String(3), nullable=False, default="USD")
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive, index=True)

    account = relationship("LedgerAccountORM", back_populates="entries")


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    role = Column(SqlEnum(UserRole), nullable=False, default=UserRole.MEMBER)
    state = Column(SqlEnum(UserState), nullable=False, default=UserState.ACTIVE)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive, index=True)

    registration_form = relationship(
        "RegistrationFormORM",
        back_populates="user",
        uselist=False,
        lazy="joined",
    )


class RegistrationFormORM(Base):
    """SQLAlchemy model for RegistrationForm."""

    __tablename__ = "registration_forms"

    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    membership_type = Column(SqlEnum(MembershipType), nullable=False, default=MembershipType.SINGLE)
    completed = Column(DateTime, nullable=True)

    user = relationship("UserORM", back_populates="registration_form")


class BookingORM(Base):
    """SQLAlchemy model for Booking."""

    __tablename__ = "bookings"

    booking_id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    status = Column(SqlEnum(BookingStatus), nullable=False)
    checkin_date = Column(Date, nullable=False)
    checkout_date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)

    user = relationship("UserORM")


class EventORM(Base):
    """SQLAlchemy model for Event."""

    __tablename__ = "events"

    event_id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False)
    state = Column(SqlEnum(EventState), nullable=False, default=EventState.DRAFT)
    start_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)

    ticket_tiers = relationship(
        "TicketTierORM",
        back_populates="event",
        order_by="TicketTierORM.position",
    )


class TicketTierORM(Base):
    """SQLAlchemy model for TicketTier."""

    __tablename__ = "ticket_tiers"

    tier_id = Column(String(36), primary_key=True)
    event_id = Column(String(36), ForeignKey("events.event_id"), nullable=False)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=True)  # NULL = unlimited
    position = Column(Integer, nullable=False, default=0)

    event = relationship("EventORM", back_populates="ticket_tiers")
    tickets = relationship("TicketORM", back_populates="ticket_tier")


class TicketORM(Base):
    """A single sold ticket."""

    __tablename__ = "tickets"

    ticket_id = Column(String(36), primary_key=True)
    tier_id = Column(String(36), ForeignKey("ticket_tiers.tier_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)

    ticket_tier = relationship("TicketTierORM", back_populates="tickets")


class PostORM(Base):
    """SQLAlchemy model for Post."""

    __tablename__ = "posts"

    post_id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False)
    url_name = Column(String(255), unique=True, nullable=False)
    raw_body = Column(Text, nullable=True)
    state = Column(SqlEnum(PostState), nullable=False, default=PostState.DRAFT)
    featured_post = Column(Boolean, nullable=False, default=False)
    published_on = Column(DateTime, nullable=True)
    deleted_on = Column(DateTime, nullable=True)
    author_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utcnow_naive)

    comments = relationship("CommentORM", back_populates="post")


class CommentORM(Base):
    """SQLAlchemy model for Comment."""

    __tablename__ = "comments"

    comment_id = Column(String(36), primary_key=True)
    post_id = Column(String(36), ForeignKey("posts.post_id"), nullable=False)
    author_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)

    post = relationship("PostORM", back_populates="comments")
    author = relationship("UserORM")
