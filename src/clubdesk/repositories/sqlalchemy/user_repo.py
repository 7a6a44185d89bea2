"""SQLAlchemy implementation of UserRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from clubdesk.domain.models import RegistrationForm, User, UserState
from clubdesk.repositories.sqlalchemy.orm_models import (
    RegistrationFormORM,
    UserORM,
    from_db_time,
    to_db_time,
    utcnow_naive,
)


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user (and its registration form, if any)."""
        orm_user = UserORM(
            user_id=user.user_id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            state=user.state,
            created_at=to_db_time(user.created_at) or utcnow_naive(),
        )
        if user.registration_form is not None:
            orm_user.registration_form = RegistrationFormORM(
                membership_type=user.registration_form.membership_type,
                completed=to_db_time(user.registration_form.completed),
            )
        self._db.add(orm_user)
        self._db.commit()
        self._db.refresh(orm_user)
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID."""
        orm_user = self._db.query(UserORM).filter(UserORM.user_id == user_id).first()
        return self._to_domain(orm_user) if orm_user else None

    def count_created_between(self, start: datetime, end: datetime) -> int:
        """Count users created in [start, end)."""
        return (
            self._db.query(func.count(UserORM.user_id))
            .filter(
                UserORM.created_at >= to_db_time(start),
                UserORM.created_at < to_db_time(end),
            )
            .scalar()
        ) or 0

    def list_pending_approval(self) -> list[User]:
        """Users awaiting application review, oldest first."""
        orm_users = (
            self._db.query(UserORM)
            .filter(UserORM.state == UserState.PENDING_APPROVAL)
            .order_by(UserORM.created_at)
            .all()
        )
        return [self._to_domain(u) for u in orm_users]

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        form = None
        if orm.registration_form is not None:
            form = RegistrationForm(
                membership_type=orm.registration_form.membership_type,
                completed=from_db_time(orm.registration_form.completed),
            )
        return User(
            user_id=orm.user_id,
            email=orm.email,
            first_name=orm.first_name,
            last_name=orm.last_name,
            role=orm.role,
            state=orm.state,
            created_at=from_db_time(orm.created_at),
            registration_form=form,
        )
