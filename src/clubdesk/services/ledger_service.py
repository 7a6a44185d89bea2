"""Ledger service: chart of accounts and revenue postings."""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from clubdesk.core.exceptions import NotFoundError, ValidationError
from clubdesk.core.timezone import now_utc
from clubdesk.domain.models import (
    AccountType,
    DebitCredit,
    LedgerAccount,
    LedgerEntry,
    Money,
)
from clubdesk.repositories.protocols import LedgerRepository

logger = logging.getLogger(__name__)

BASIC_ACCOUNTS: tuple[tuple[str, AccountType, str], ...] = (
    ("cash", AccountType.ASSET, "Cash account for holding funds"),
    ("stripe_account", AccountType.ASSET, "Payment processor balance"),
    ("accounts_receivable", AccountType.ASSET, "Outstanding payments from customers"),
    ("accounts_payable", AccountType.LIABILITY, "Outstanding payments to vendors"),
    ("deferred_revenue", AccountType.LIABILITY, "Prepaid subscriptions and bookings"),
    ("refund_liability", AccountType.LIABILITY, "Pending refunds"),
    ("membership_revenue", AccountType.REVENUE, "Revenue from membership subscriptions"),
    ("event_revenue", AccountType.REVENUE, "Revenue from event registrations"),
    ("booking_revenue", AccountType.REVENUE, "Revenue from cabin bookings"),
    ("tahoe_booking_revenue", AccountType.REVENUE, "Revenue from Tahoe cabin bookings"),
    ("clear_lake_booking_revenue", AccountType.REVENUE, "Revenue from Clear Lake cabin bookings"),
    ("donation_revenue", AccountType.REVENUE, "Revenue from donations"),
    ("stripe_fees", AccountType.EXPENSE, "Payment processing fees"),
    ("operating_expenses", AccountType.EXPENSE, "General operating expenses"),
    ("refund_expense", AccountType.EXPENSE, "Refunds issued to customers"),
)


class LedgerService:
    """
    Service for the club ledger.

    Payments are posted by other subsystems; this service keeps the chart of
    accounts in place and offers a single posting entry point.
    """

    def __init__(self, ledger_repo: LedgerRepository, currency: str = "USD"):
        self._ledger = ledger_repo
        self._currency = currency

    def ensure_basic_accounts(self) -> list[LedgerAccount]:
        """Create any missing well-known accounts. Returns the ones created."""
        created = []
        for name, account_type, description in BASIC_ACCOUNTS:
            if self._ledger.get_account_by_name(name) is None:
                created.append(
                    self._ledger.create_account(
                        LedgerAccount(
                            account_id=str(uuid.uuid4()),
                            name=name,
                            account_type=account_type,
                            description=description,
                        )
                    )
                )
        if created:
            logger.info("Created %d ledger accounts", len(created))
        return created

    def get_account(self, name: str) -> LedgerAccount:
        account = self._ledger.get_account_by_name(name)
        if not account:
            raise NotFoundError("Ledger account", name)
        return account

    def post_entry(
        self,
        account_name: str,
        debit_credit: DebitCredit,
        amount: Decimal,
        created_at: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> LedgerEntry:
        """Post an entry to a named account."""
        if amount < 0:
            raise ValidationError("Entry amount cannot be negative")
        account = self.get_account(account_name)
        entry = LedgerEntry(
            entry_id=str(uuid.uuid4()),
            account_id=account.account_id,
            debit_credit=debit_credit,
            amount=Money(amount, self._currency),
            created_at=created_at or now_utc(),
            description=description,
        )
        return self._ledger.add_entry(entry)
