"""
Pytest configuration and fixtures for the club back-office tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- Factory helpers for users, bookings, events, posts and ledger entries
- A manual timer factory for deterministic autosave tests
- Time helpers for UTC
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from clubdesk.main import app
from clubdesk.repositories.sqlalchemy.database import Base, reset_database
# Import ORM models to register them with Base before creating tables
from clubdesk.repositories.sqlalchemy import orm_models  # noqa: F401
from clubdesk.repositories.sqlalchemy import (
    SqlAlchemyLedgerRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyBookingRepository,
    SqlAlchemyEventRepository,
    SqlAlchemyPostRepository,
)
from clubdesk.api.deps import get_autosave_coordinator, get_db_session_factory
from clubdesk.core.events import EventBus
from clubdesk.core.timezone import UTC
from clubdesk.services import (
    LedgerService,
    RevenueService,
    ApplicationStatsService,
    ActiveGuestService,
    EventService,
    AutosaveCoordinator,
    PostService,
)
from clubdesk.domain.models import (
    Booking,
    BookingStatus,
    DebitCredit,
    Event,
    EventState,
    Post,
    PostState,
    RegistrationForm,
    TicketTier,
    User,
    UserRole,
    UserState,
)
from clubdesk.config.settings import Settings, reset_settings, set_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session_factory(test_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_session(test_session_factory) -> Session:
    """Create test database session."""
    session = test_session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def ledger_repo(test_session) -> SqlAlchemyLedgerRepository:
    """Provide test LedgerRepository."""
    return SqlAlchemyLedgerRepository(test_session)


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def booking_repo(test_session) -> SqlAlchemyBookingRepository:
    """Provide test BookingRepository."""
    return SqlAlchemyBookingRepository(test_session)


@pytest.fixture
def event_repo(test_session) -> SqlAlchemyEventRepository:
    """Provide test EventRepository."""
    return SqlAlchemyEventRepository(test_session)


@pytest.fixture
def post_repo(test_session) -> SqlAlchemyPostRepository:
    """Provide test PostRepository."""
    return SqlAlchemyPostRepository(test_session)


# =============================================================================
# TIMER FIXTURES
# =============================================================================


class ManualTimer:
    """Timer that only fires when its ManualClock is advanced."""

    def __init__(self, clock: "ManualClock", interval: float, function: Callable[[], None]):
        self._clock = clock
        self.interval = interval
        self.function = function
        self.due: Optional[float] = None
        self.cancelled = False
        self.fired = False

    def start(self) -> None:
        self.due = self._clock.now + self.interval

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def live(self) -> bool:
        return self.due is not None and not self.cancelled and not self.fired


class ManualClock:
    """
    Timer factory with a virtual clock, in seconds.

    advance() fires every live timer whose due time has been reached, in
    due order, on the calling thread.
    """

    def __init__(self):
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def __call__(self, interval: float, function: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self, interval, function)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self.timers if t.live and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            timer.fired = True
            timer.function()
        self.now = target

    def live_timers(self) -> list[ManualTimer]:
        return [t for t in self.timers if t.live]


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def coordinator(event_bus, manual_clock) -> AutosaveCoordinator:
    """Autosave coordinator with a 2 second window driven by manual_clock."""
    return AutosaveCoordinator(
        delay_seconds=2.0,
        event_bus=event_bus,
        timer_factory=manual_clock,
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(ledger_repo) -> LedgerService:
    """Provide test LedgerService with the well-known accounts seeded."""
    service = LedgerService(ledger_repo=ledger_repo)
    service.ensure_basic_accounts()
    return service


@pytest.fixture
def revenue_service(ledger_repo, ledger_service) -> RevenueService:
    return RevenueService(ledger_repo=ledger_repo)


@pytest.fixture
def application_stats_service(user_repo) -> ApplicationStatsService:
    return ApplicationStatsService(user_repo=user_repo)


@pytest.fixture
def active_guest_service(booking_repo) -> ActiveGuestService:
    return ActiveGuestService(booking_repo=booking_repo)


@pytest.fixture
def event_service(event_repo) -> EventService:
    return EventService(event_repo=event_repo)


@pytest.fixture
def post_service(post_repo) -> PostService:
    return PostService(post_repo=post_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(user_repo) -> Callable[..., User]:
    """Factory for creating test users."""

    def _create_user(
        role: UserRole = UserRole.MEMBER,
        state: UserState = UserState.ACTIVE,
        created_at: Optional[datetime] = None,
        first_name: str = "Anna",
        last_name: Optional[str] = None,
        registration_form: Optional[RegistrationForm] = None,
    ) -> User:
        user_id = str(uuid.uuid4())
        return user_repo.create(
            User(
                user_id=user_id,
                email=f"{user_id[:8]}@example.com",
                first_name=first_name,
                last_name=last_name or user_id[:6],
                role=role,
                state=state,
                created_at=created_at,
                registration_form=registration_form,
            )
        )

    return _create_user


@pytest.fixture
def admin_user(user_factory) -> User:
    return user_factory(role=UserRole.ADMIN, first_name="Admin")


@pytest.fixture
def member_user(user_factory) -> User:
    return user_factory(first_name="Member")


@pytest.fixture
def credit_factory(ledger_service) -> Callable[..., None]:
    """Factory for posting revenue credits."""

    def _credit(account_name: str, amount: str, created_at: datetime) -> None:
        ledger_service.post_entry(
            account_name,
            DebitCredit.CREDIT,
            Decimal(amount),
            created_at=created_at,
        )

    return _credit


@pytest.fixture
def booking_factory(booking_repo) -> Callable[..., Booking]:
    """Factory for creating test bookings."""

    def _create_booking(
        user: User,
        checkin_date: date,
        checkout_date: date,
        status: BookingStatus = BookingStatus.COMPLETE,
        created_at: Optional[datetime] = None,
    ) -> Booking:
        return booking_repo.create(
            Booking(
                booking_id=str(uuid.uuid4()),
                user_id=user.user_id,
                status=status,
                checkin_date=checkin_date,
                checkout_date=checkout_date,
                created_at=created_at,
            )
        )

    return _create_booking


@pytest.fixture
def event_factory(event_repo) -> Callable[..., Event]:
    """Factory for creating test events with ticket tiers."""

    def _create_event(
        title: str,
        start_date: datetime,
        state: EventState = EventState.PUBLISHED,
        tiers: Optional[list[tuple[str, Optional[int]]]] = None,
    ) -> Event:
        event_id = str(uuid.uuid4())
        return event_repo.create(
            Event(
                event_id=event_id,
                title=title,
                state=state,
                start_date=start_date,
                ticket_tiers=[
                    TicketTier(
                        tier_id=str(uuid.uuid4()),
                        event_id=event_id,
                        name=name,
                        quantity=quantity,
                    )
                    for name, quantity in (tiers or [])
                ],
            )
        )

    return _create_event


@pytest.fixture
def post_factory(post_repo) -> Callable[..., Post]:
    """Factory for creating test posts."""

    def _create_post(
        author: User,
        title: str = "Midsummer party",
        url_name: Optional[str] = None,
        state: PostState = PostState.DRAFT,
        raw_body: Optional[str] = "<p>Hello</p>",
    ) -> Post:
        post_id = str(uuid.uuid4())
        return post_repo.create(
            Post(
                post_id=post_id,
                title=title,
                url_name=url_name or f"post-{post_id[:8]}",
                author_id=author.user_id,
                raw_body=raw_body,
                state=state,
            )
        )

    return _create_post


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Point the application at a throwaway SQLite file."""
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'clubdesk-test.db'}",
        upload_signing_secret="test-secret",
        upload_endpoint="https://uploads.test",
        upload_bucket="test-bucket",
    )
    set_settings(settings)
    reset_database()
    yield settings
    reset_database()
    reset_settings()


@pytest.fixture
def api_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def api_coordinator(api_clock) -> AutosaveCoordinator:
    return AutosaveCoordinator(delay_seconds=2.0, event_bus=EventBus(), timer_factory=api_clock)


@pytest.fixture
def client(api_settings, api_coordinator) -> TestClient:
    """Provide FastAPI test client backed by a temporary database."""
    app.dependency_overrides[get_autosave_coordinator] = lambda: api_coordinator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def api_session(client, api_settings) -> Session:
    """Session on the API database for arranging test data."""
    session = get_db_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_admin(api_session) -> User:
    return SqlAlchemyUserRepository(api_session).create(
        User(
            user_id=str(uuid.uuid4()),
            email="admin@example.com",
            first_name="Ada",
            last_name="Admin",
            role=UserRole.ADMIN,
        )
    )


@pytest.fixture
def admin_headers(api_admin) -> dict[str, str]:
    return {"X-User-Id": api_admin.user_id}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
