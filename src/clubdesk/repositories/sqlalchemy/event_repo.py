"""SQLAlchemy implementation of EventRepository."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, Query, selectinload

from clubdesk.domain.models import Event, EventState, TicketTier
from clubdesk.repositories.sqlalchemy.orm_models import (
    EventORM,
    TicketORM,
    TicketTierORM,
    from_db_time,
    to_db_time,
    utcnow_naive,
)


class SqlAlchemyEventRepository:
    """SQLAlchemy-backed event repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, event: Event) -> Event:
        """Persist a new event with its ticket tiers."""
        orm_event = EventORM(
            event_id=event.event_id,
            title=event.title,
            state=event.state,
            start_date=to_db_time(event.start_date),
            created_at=to_db_time(event.created_at) or utcnow_naive(),
        )
        for position, tier in enumerate(event.ticket_tiers):
            orm_event.ticket_tiers.append(
                TicketTierORM(
                    tier_id=tier.tier_id,
                    name=tier.name,
                    quantity=tier.quantity,
                    position=position,
                )
            )
        self._db.add(orm_event)
        self._db.commit()
        self._db.refresh(orm_event)
        return self._to_domain(orm_event, self._sold_counts([orm_event]))

    def get_by_id(self, event_id: str) -> Optional[Event]:
        """Retrieve event by ID (tiers included)."""
        orm_event = self._db.query(EventORM).filter(EventORM.event_id == event_id).first()
        if not orm_event:
            return None
        return self._to_domain(orm_event, self._sold_counts([orm_event]))

    def record_ticket_sales(self, tier_id: str, count: int) -> TicketTier:
        """Record sold tickets against a tier."""
        orm_tier = self._db.query(TicketTierORM).filter(TicketTierORM.tier_id == tier_id).first()
        if not orm_tier:
            raise ValueError(f"Ticket tier not found: {tier_id}")
        for _ in range(count):
            self._db.add(TicketORM(ticket_id=str(uuid.uuid4()), tier_id=tier_id))
        self._db.commit()
        sold = self._sold_counts([orm_tier.event]).get(tier_id, 0)
        return self._tier_to_domain(orm_tier, sold)

    def query(
        self,
        state: Optional[EventState] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Event]:
        """List events by start date, newest first."""
        query = (
            self._filtered(state, search)
            .options(selectinload(EventORM.ticket_tiers))
            .order_by(EventORM.start_date.desc(), EventORM.title)
            .offset(offset)
            .limit(limit)
        )
        orm_events = query.all()
        counts = self._sold_counts(orm_events)
        return [self._to_domain(e, counts) for e in orm_events]

    def count(
        self,
        state: Optional[EventState] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count events matching the same filters as query()."""
        return self._filtered(state, search).count()

    def list_upcoming_with_ticket_tiers(self, now: datetime) -> list[Event]:
        """Upcoming, non-deleted events with tiers and sold counts, soonest first."""
        orm_events = (
            self._db.query(EventORM)
            .options(selectinload(EventORM.ticket_tiers))
            .filter(
                EventORM.state != EventState.DELETED,
                EventORM.start_date >= to_db_time(now),
            )
            .order_by(EventORM.start_date)
            .all()
        )
        counts = self._sold_counts(orm_events)
        return [self._to_domain(e, counts) for e in orm_events]

    def _filtered(self, state: Optional[EventState], search: Optional[str]) -> Query:
        query = self._db.query(EventORM)
        if state is not None:
            query = query.filter(EventORM.state == state)
        else:
            query = query.filter(EventORM.state != EventState.DELETED)
        if search:
            pattern = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            query = query.filter(EventORM.title.ilike(f"%{pattern}%", escape="\\"))
        return query

    def _sold_counts(self, orm_events: list[EventORM]) -> dict[str, int]:
        """Map tier_id -> number of tickets sold."""
        tier_ids = [t.tier_id for e in orm_events for t in e.ticket_tiers]
        if not tier_ids:
            return {}
        rows = (
            self._db.query(TicketORM.tier_id, func.count(TicketORM.ticket_id))
            .filter(TicketORM.tier_id.in_(tier_ids))
            .group_by(TicketORM.tier_id)
            .all()
        )
        return {tier_id: count for tier_id, count in rows}

    @staticmethod
    def _tier_to_domain(orm: TicketTierORM, sold_count: int) -> TicketTier:
        return TicketTier(
            tier_id=orm.tier_id,
            event_id=orm.event_id,
            name=orm.name,
            quantity=orm.quantity,
            sold_count=sold_count,
        )

    def _to_domain(self, orm: EventORM, sold_counts: dict[str, int]) -> Event:
        """Convert ORM model to domain model."""
        return Event(
            event_id=orm.event_id,
            title=orm.title,
            state=orm.state,
            start_date=from_db_time(orm.start_date),
            created_at=from_db_time(orm.created_at),
            ticket_tiers=[
                self._tier_to_domain(t, sold_counts.get(t.tier_id, 0))
                for t in orm.ticket_tiers
            ],
        )
