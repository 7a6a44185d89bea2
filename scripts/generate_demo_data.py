#!/usr/bin/env python3
"""
Generate demo data for the back office.
Creates members, applications, cabin bookings, events with ticket sales,
posts with comments, and about fourteen months of ledger revenue so the
dashboard has something to compare against.
"""

import random
import uuid
from datetime import date, timedelta
from decimal import Decimal

from clubdesk.config.logging_config import setup_logging
from clubdesk.core.timezone import now_utc, shift_months
from clubdesk.domain.models import (
    Booking,
    BookingStatus,
    Comment,
    DebitCredit,
    Event,
    EventState,
    MembershipType,
    Post,
    PostState,
    RegistrationForm,
    TicketTier,
    User,
    UserRole,
    UserState,
)
from clubdesk.repositories.sqlalchemy import (
    SqlAlchemyBookingRepository,
    SqlAlchemyEventRepository,
    SqlAlchemyLedgerRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyUserRepository,
    get_session,
    init_db,
)
from clubdesk.services import LedgerService

FIRST_NAMES = ["Karl", "Erik", "Lars", "Anders", "Maria", "Anna", "Kristina", "Eva", "Linnea", "Karin"]
LAST_NAMES = ["Andersson", "Johansson", "Karlsson", "Nilsson", "Eriksson", "Larsson", "Olsson", "Berg"]

REVENUE_STREAMS = [
    ("membership_revenue", Decimal("45"), Decimal("90")),
    ("event_revenue", Decimal("15"), Decimal("60")),
    ("tahoe_booking_revenue", Decimal("80"), Decimal("400")),
    ("clear_lake_booking_revenue", Decimal("60"), Decimal("250")),
]


def _user(role: UserRole = UserRole.MEMBER, state: UserState = UserState.ACTIVE, **kwargs) -> User:
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    user_id = str(uuid.uuid4())
    return User(
        user_id=user_id,
        email=f"{first.lower()}.{last.lower()}.{user_id[:6]}@example.com",
        first_name=first,
        last_name=last,
        role=role,
        state=state,
        **kwargs,
    )


def generate_demo_data(seed: int = 42) -> None:
    random.seed(seed)
    setup_logging()
    init_db()
    db = get_session()
    now = now_utc()

    try:
        users = SqlAlchemyUserRepository(db)
        ledger = LedgerService(SqlAlchemyLedgerRepository(db))
        bookings = SqlAlchemyBookingRepository(db)
        events = SqlAlchemyEventRepository(db)
        posts = SqlAlchemyPostRepository(db)

        ledger.ensure_basic_accounts()

        admin = users.create(_user(role=UserRole.ADMIN, created_at=shift_months(now, -24)))
        print(f"✓ Admin user: {admin.user_id} ({admin.email})")

        members = []
        for _ in range(40):
            created = now - timedelta(days=random.randint(0, 420))
            members.append(users.create(_user(created_at=created)))
        print(f"✓ {len(members)} members")

        for _ in range(5):
            completed = now - timedelta(days=random.randint(0, 20))
            users.create(
                _user(
                    state=UserState.PENDING_APPROVAL,
                    created_at=completed,
                    registration_form=RegistrationForm(
                        membership_type=random.choice(list(MembershipType)),
                        completed=completed,
                    ),
                )
            )
        print("✓ 5 pending applications")

        today = now.date()
        for member in random.sample(members, 8):
            checkin = today - timedelta(days=random.randint(0, 3))
            bookings.create(
                Booking(
                    booking_id=str(uuid.uuid4()),
                    user_id=member.user_id,
                    status=random.choice([BookingStatus.COMPLETE] * 3 + [BookingStatus.HOLD]),
                    checkin_date=checkin,
                    checkout_date=checkin + timedelta(days=random.randint(1, 5)),
                )
            )
        print("✓ Cabin bookings")

        for i in range(6):
            start = now + timedelta(days=random.randint(-60, 90))
            event = events.create(
                Event(
                    event_id=str(uuid.uuid4()),
                    title=f"Club Night #{i + 1}",
                    state=random.choice(list(EventState)),
                    start_date=start,
                    ticket_tiers=[
                        TicketTier(tier_id=str(uuid.uuid4()), event_id="", name="Member", quantity=50),
                        TicketTier(tier_id=str(uuid.uuid4()), event_id="", name="Guest", quantity=None),
                    ],
                )
            )
            for tier in event.ticket_tiers:
                events.record_ticket_sales(tier.tier_id, random.randint(0, 30))
        print("✓ Events with ticket sales")

        for i in range(3):
            post = posts.create(
                Post(
                    post_id=str(uuid.uuid4()),
                    title=f"Club news {i + 1}",
                    url_name=f"club-news-{i + 1}",
                    author_id=admin.user_id,
                    raw_body="<p>Welcome back!</p>",
                    state=PostState.PUBLISHED,
                    published_on=now - timedelta(days=10 - i),
                )
            )
            for member in random.sample(members, 3):
                posts.add_comment(
                    Comment(
                        comment_id=str(uuid.uuid4()),
                        post_id=post.post_id,
                        author_id=member.user_id,
                        text="Looking forward to it!",
                        created_at=now - timedelta(hours=random.randint(1, 200)),
                    )
                )
        print("✓ Posts and comments")

        day = shift_months(now, -14).date()
        count = 0
        while day <= today:
            for account_name, low, high in REVENUE_STREAMS:
                if random.random() < 0.3:
                    amount = Decimal(random.randint(int(low), int(high)))
                    ledger.post_entry(
                        account_name,
                        DebitCredit.CREDIT,
                        amount,
                        created_at=now - timedelta(days=(today - day).days, hours=1),
                        description="Demo revenue",
                    )
                    count += 1
            day += timedelta(days=1)
        print(f"✓ {count} ledger entries")
    finally:
        db.close()


if __name__ == "__main__":
    generate_demo_data()
