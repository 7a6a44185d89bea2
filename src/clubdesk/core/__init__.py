"""Core utilities and shared functionality."""

from clubdesk.core.timezone import (
    now_utc,
    to_utc,
    month_start,
    year_start,
    shift_months,
    to_display_tz,
    UTC,
)
from clubdesk.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    AuthorizationError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "month_start",
    "year_start",
    "shift_months",
    "to_display_tz",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
]
