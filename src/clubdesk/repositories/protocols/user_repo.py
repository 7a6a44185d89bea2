"""User repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from clubdesk.domain.models import User


class UserRepository(Protocol):
    """Interface for user data access."""

    def create(self, user: User) -> User:
        """Persist a new user (and its registration form, if any)."""
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        ...

    def count_created_between(self, start: datetime, end: datetime) -> int:
        """Count users created in [start, end)."""
        ...

    def list_pending_approval(self) -> list[User]:
        """Users awaiting application review, oldest first."""
        ...
