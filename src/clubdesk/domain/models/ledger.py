"""Ledger account and entry domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clubdesk.domain.models.enums import AccountType, DebitCredit
from clubdesk.domain.models.money import Money


@dataclass
class LedgerAccount:
    """Named account in the double-entry ledger (e.g. "membership_revenue")."""

    account_id: str
    name: str
    account_type: AccountType
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.account_type, str):
            self.account_type = AccountType(self.account_type)


@dataclass
class LedgerEntry:
    """
    One posting against a ledger account.

    Entries are written by the payment subsystems and are read-only here.
    Revenue is the absolute value of CREDIT entries on revenue accounts.
    """

    entry_id: str
    account_id: str
    debit_credit: DebitCredit
    amount: Money
    created_at: datetime
    description: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.debit_credit, str):
            self.debit_credit = DebitCredit(self.debit_credit)
