"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from clubdesk.config.settings import get_settings
from clubdesk.config.logging_config import setup_logging
from clubdesk.repositories.sqlalchemy.database import init_db, get_session
from clubdesk.repositories.sqlalchemy import SqlAlchemyLedgerRepository
from clubdesk.api.routers import (
    dashboard_router,
    events_router,
    posts_router,
    uploads_router,
)
from clubdesk.core.events import EventBus
from clubdesk.core.exceptions import AppError
from clubdesk.services import AutosaveCoordinator, LedgerService

logger = logging.getLogger(__name__)


def seed_ledger_accounts() -> None:
    """Make sure the well-known ledger accounts exist."""
    db = get_session()
    try:
        LedgerService(
            ledger_repo=SqlAlchemyLedgerRepository(db),
            currency=get_settings().currency,
        ).ensure_basic_accounts()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    seed_ledger_accounts()
    app.state.event_bus = EventBus()
    app.state.autosave = AutosaveCoordinator(
        delay_seconds=get_settings().autosave_debounce_seconds,
        event_bus=app.state.event_bus,
    )
    yield
    # Shutdown: write out edits still waiting for their quiet period
    app.state.autosave.shutdown(flush=True)
    logger.info("Autosave coordinator stopped")


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Club administration back office",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(dashboard_router)
app.include_router(events_router)
app.include_router(posts_router)
app.include_router(uploads_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
