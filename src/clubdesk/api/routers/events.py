"""Admin event list endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from clubdesk.api.deps import get_event_service, require_admin
from clubdesk.api.routers.dashboard import ticket_sales_response
from clubdesk.api.schemas import EventListResponse, EventResponse, EventTicketSalesResponse
from clubdesk.core.timezone import now_utc
from clubdesk.domain.models import EventState
from clubdesk.services import EventService

router = APIRouter(
    prefix="/events",
    tags=["events"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=EventListResponse)
def list_events(
    state: Optional[EventState] = Query(None, description="Filter by state"),
    search: Optional[str] = Query(None, description="Case-insensitive title search"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    events: EventService = Depends(get_event_service),
) -> EventListResponse:
    """List events, newest first. Deleted events only appear when asked for."""
    result = events.list_events(state=state, search=search, page=page, page_size=page_size)
    return EventListResponse(
        items=[
            EventResponse(
                event_id=item.event.event_id,
                title=item.event.title,
                state=item.event.state,
                badge=item.badge,
                start_date=item.event.start_date,
            )
            for item in result.items
        ],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/upcoming", response_model=list[EventTicketSalesResponse])
def upcoming_ticket_sales(
    events: EventService = Depends(get_event_service),
) -> list[EventTicketSalesResponse]:
    """Upcoming events with ticket sales per tier."""
    return [ticket_sales_response(s) for s in events.upcoming_ticket_sales(now_utc())]
