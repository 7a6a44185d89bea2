"""Ledger repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from clubdesk.domain.models import LedgerAccount, LedgerEntry, Money


class LedgerRepository(Protocol):
    """Interface for ledger account and entry data access."""

    def get_account_by_name(self, name: str) -> Optional[LedgerAccount]:
        """Retrieve account by its unique name."""
        ...

    def create_account(self, account: LedgerAccount) -> LedgerAccount:
        """Persist a new account."""
        ...

    def add_entry(self, entry: LedgerEntry) -> LedgerEntry:
        """Persist a ledger entry."""
        ...

    def sum_credits(
        self,
        account_name: str,
        start: datetime,
        end: datetime,
        currency: str = "USD",
    ) -> Money:
        """
        Sum absolute credit amounts posted to an account in [start, end).

        Unknown accounts sum to zero.
        """
        ...
