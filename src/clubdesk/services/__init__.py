"""Service layer - business logic orchestration."""

from clubdesk.services.ledger_service import LedgerService
from clubdesk.services.revenue_service import RevenueService
from clubdesk.services.application_stats_service import ApplicationStatsService
from clubdesk.services.active_guest_service import ActiveGuestService
from clubdesk.services.event_service import EventService
from clubdesk.services.autosave import AutosaveCoordinator
from clubdesk.services.post_service import PostService, PostAutosaver, EditorSession
from clubdesk.services.upload_service import ImageUploadService, UploadTicket
from clubdesk.services.dashboard_service import DashboardService

__all__ = [
    "LedgerService",
    "RevenueService",
    "ApplicationStatsService",
    "ActiveGuestService",
    "EventService",
    "AutosaveCoordinator",
    "PostService",
    "PostAutosaver",
    "EditorSession",
    "ImageUploadService",
    "UploadTicket",
    "DashboardService",
]
