"""SQLAlchemy repository implementations."""

from clubdesk.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from clubdesk.repositories.sqlalchemy.ledger_repo import SqlAlchemyLedgerRepository
from clubdesk.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from clubdesk.repositories.sqlalchemy.booking_repo import SqlAlchemyBookingRepository
from clubdesk.repositories.sqlalchemy.event_repo import SqlAlchemyEventRepository
from clubdesk.repositories.sqlalchemy.post_repo import SqlAlchemyPostRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyBookingRepository",
    "SqlAlchemyEventRepository",
    "SqlAlchemyPostRepository",
]
