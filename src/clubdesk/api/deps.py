"""Dependency injection for FastAPI."""

from contextlib import contextmanager
from datetime import time
from typing import Iterator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session, sessionmaker

from clubdesk.repositories.sqlalchemy.database import get_db, get_session_factory
from clubdesk.repositories.sqlalchemy import (
    SqlAlchemyLedgerRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyBookingRepository,
    SqlAlchemyEventRepository,
    SqlAlchemyPostRepository,
)
from clubdesk.providers import StubObjectStorage
from clubdesk.services import (
    LedgerService,
    RevenueService,
    ApplicationStatsService,
    ActiveGuestService,
    EventService,
    AutosaveCoordinator,
    PostService,
    PostAutosaver,
    ImageUploadService,
    DashboardService,
)
from clubdesk.services.post_service import PostServiceScope
from clubdesk.core.events import EventBus
from clubdesk.core.exceptions import AuthenticationError, AuthorizationError
from clubdesk.config.settings import get_settings
from clubdesk.domain.models import User


def get_ledger_repo(db: Session = Depends(get_db)) -> SqlAlchemyLedgerRepository:
    """Provide LedgerRepository instance."""
    return SqlAlchemyLedgerRepository(db)


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_booking_repo(db: Session = Depends(get_db)) -> SqlAlchemyBookingRepository:
    """Provide BookingRepository instance."""
    return SqlAlchemyBookingRepository(db)


def get_event_repo(db: Session = Depends(get_db)) -> SqlAlchemyEventRepository:
    """Provide EventRepository instance."""
    return SqlAlchemyEventRepository(db)


def get_post_repo(db: Session = Depends(get_db)) -> SqlAlchemyPostRepository:
    """Provide PostRepository instance."""
    return SqlAlchemyPostRepository(db)


def get_db_session_factory() -> sessionmaker:
    """Session factory for work that outlives the request (autosave writes)."""
    return get_session_factory()


def get_event_bus(request: Request) -> EventBus:
    """Application-wide notification bus, created at startup."""
    return request.app.state.event_bus


def get_autosave_coordinator(request: Request) -> AutosaveCoordinator:
    """Application-wide autosave coordinator, created at startup."""
    return request.app.state.autosave


def get_ledger_service(
    ledger_repo: SqlAlchemyLedgerRepository = Depends(get_ledger_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(ledger_repo=ledger_repo, currency=get_settings().currency)


def get_revenue_service(
    ledger_repo: SqlAlchemyLedgerRepository = Depends(get_ledger_repo),
) -> RevenueService:
    """Provide RevenueService instance."""
    return RevenueService(ledger_repo=ledger_repo, currency=get_settings().currency)


def get_application_stats_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
) -> ApplicationStatsService:
    """Provide ApplicationStatsService instance."""
    return ApplicationStatsService(user_repo=user_repo)


def get_active_guest_service(
    booking_repo: SqlAlchemyBookingRepository = Depends(get_booking_repo),
) -> ActiveGuestService:
    """Provide ActiveGuestService instance."""
    cutoff = time(get_settings().checkout_cutoff_hour, 0)
    return ActiveGuestService(booking_repo=booking_repo, checkout_time=cutoff)


def get_event_service(
    event_repo: SqlAlchemyEventRepository = Depends(get_event_repo),
) -> EventService:
    """Provide EventService instance."""
    return EventService(event_repo=event_repo)


def get_post_service(
    post_repo: SqlAlchemyPostRepository = Depends(get_post_repo),
) -> PostService:
    """Provide PostService instance."""
    return PostService(post_repo=post_repo)


def make_post_service_scope(session_factory: sessionmaker) -> PostServiceScope:
    """Build a scope that opens a fresh session per autosave write."""

    @contextmanager
    def scope() -> Iterator[PostService]:
        db = session_factory()
        try:
            yield PostService(post_repo=SqlAlchemyPostRepository(db))
        finally:
            db.close()

    return scope


def get_post_autosaver(
    coordinator: AutosaveCoordinator = Depends(get_autosave_coordinator),
    session_factory: sessionmaker = Depends(get_db_session_factory),
) -> PostAutosaver:
    """Provide PostAutosaver instance."""
    return PostAutosaver(
        coordinator=coordinator,
        service_scope=make_post_service_scope(session_factory),
    )


def get_upload_service() -> ImageUploadService:
    """Provide ImageUploadService instance backed by the signing stub."""
    settings = get_settings()
    storage = StubObjectStorage(
        endpoint=settings.upload_endpoint,
        secret=settings.upload_signing_secret,
    )
    return ImageUploadService(
        storage=storage,
        bucket=settings.upload_bucket,
        max_size=settings.upload_max_bytes,
        ttl_seconds=settings.upload_ttl_seconds,
    )


def get_dashboard_service(
    revenue: RevenueService = Depends(get_revenue_service),
    applications: ApplicationStatsService = Depends(get_application_stats_service),
    guests: ActiveGuestService = Depends(get_active_guest_service),
    events: EventService = Depends(get_event_service),
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    post_repo: SqlAlchemyPostRepository = Depends(get_post_repo),
) -> DashboardService:
    """Provide DashboardService instance."""
    settings = get_settings()
    return DashboardService(
        revenue=revenue,
        applications=applications,
        guests=guests,
        events=events,
        user_repo=user_repo,
        post_repo=post_repo,
        currency=settings.currency,
        display_timezone=settings.display_timezone,
    )


def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
) -> User:
    """Resolve the acting user from the X-User-Id header."""
    if not x_user_id:
        raise AuthenticationError("Missing X-User-Id header")
    user = user_repo.get_by_id(x_user_id)
    if user is None:
        raise AuthenticationError(f"Unknown user: {x_user_id}")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Only admins may use the back office."""
    if not user.is_admin:
        raise AuthorizationError("access the back office")
    return user
