"""User and registration form domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clubdesk.domain.models.enums import MembershipType, UserRole, UserState


@dataclass
class RegistrationForm:
    """Membership application submitted by a prospective member."""

    membership_type: MembershipType = MembershipType.SINGLE
    completed: Optional[datetime] = None

    def __post_init__(self) -> None:
        if isinstance(self.membership_type, str):
            self.membership_type = MembershipType(self.membership_type)


@dataclass
class User:
    user_id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: UserRole = UserRole.MEMBER
    state: UserState = UserState.ACTIVE
    created_at: Optional[datetime] = field(default=None)
    registration_form: Optional[RegistrationForm] = None

    def __post_init__(self) -> None:
        if isinstance(self.role, str):
            self.role = UserRole(self.role)
        if isinstance(self.state, str):
            self.state = UserState(self.state)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
