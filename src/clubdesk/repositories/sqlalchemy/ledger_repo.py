"""SQLAlchemy implementation of LedgerRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from clubdesk.domain.models import DebitCredit, LedgerAccount, LedgerEntry, Money
from clubdesk.repositories.sqlalchemy.orm_models import (
    LedgerAccountORM,
    LedgerEntryORM,
    from_db_time,
    to_db_time,
)


class SqlAlchemyLedgerRepository:
    """SQLAlchemy-backed ledger repository."""

    def __init__(self, db: Session):
        self._db = db

    def get_account_by_name(self, name: str) -> Optional[LedgerAccount]:
        """Retrieve account by its unique name."""
        orm_account = self._db.query(LedgerAccountORM).filter(
            LedgerAccountORM.name == name
        ).first()
        return self._account_to_domain(orm_account) if orm_account else None

    def create_account(self, account: LedgerAccount) -> LedgerAccount:
        """Persist a new account."""
        orm_account = LedgerAccountORM(
            account_id=account.account_id,
            name=account.name,
            account_type=account.account_type,
            description=account.description,
        )
        self._db.add(orm_account)
        self._db.commit()
        self._db.refresh(orm_account)
        return self._account_to_domain(orm_account)

    def add_entry(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a ledger entry."""
        orm_entry = LedgerEntryORM(
            entry_id=entry.entry_id,
            account_id=entry.account_id,
            debit_credit=entry.debit_credit,
            amount=entry.amount.amount,
            currency=entry.amount.currency,
            description=entry.description,
            created_at=to_db_time(entry.created_at),
        )
        self._db.add(orm_entry)
        self._db.commit()
        self._db.refresh(orm_entry)
        return self._entry_to_domain(orm_entry)

    def sum_credits(
        self,
        account_name: str,
        start: datetime,
        end: datetime,
        currency: str = "USD",
    ) -> Money:
        """Sum absolute credit amounts posted to an account in [start, end)."""
        total = (
            self._db.query(func.sum(func.abs(LedgerEntryORM.amount)))
            .select_from(LedgerEntryORM)
            .join(LedgerEntryORM.account)
            .filter(
                LedgerAccountORM.name == account_name,
                LedgerEntryORM.debit_credit == DebitCredit.CREDIT,
                LedgerEntryORM.currency == currency,
                LedgerEntryORM.created_at >= to_db_time(start),
                LedgerEntryORM.created_at < to_db_time(end),
            )
            .scalar()
        )
        if total is None:
            return Money.zero(currency)
        return Money(Decimal(str(total)).quantize(Decimal("0.01")), currency)

    @staticmethod
    def _account_to_domain(orm: LedgerAccountORM) -> LedgerAccount:
        """Convert ORM model to domain model."""
        return LedgerAccount(
            account_id=orm.account_id,
            name=orm.name,
            account_type=orm.account_type,
            description=orm.description,
        )

    @staticmethod
    def _entry_to_domain(orm: LedgerEntryORM) -> LedgerEntry:
        """Convert ORM model to domain model."""
        return LedgerEntry(
            entry_id=orm.entry_id,
            account_id=orm.account_id,
            debit_credit=orm.debit_credit,
            amount=Money(Decimal(str(orm.amount)), orm.currency),
            created_at=from_db_time(orm.created_at),
            description=orm.description,
        )
