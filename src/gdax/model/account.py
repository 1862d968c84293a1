"""
Account models.

Trading accounts, their ledger (account history) and the holds placed on
their funds by open orders and pending withdrawals.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.gdax.enums import LedgerEntryType
from src.gdax.model.base import GdaxRecord


class Account(GdaxRecord):
    """A trading account holding one currency."""

    id: UUID
    currency: str
    balance: Decimal
    available: Decimal
    # The list endpoint says "hold", the single-account endpoint "holds"
    holds: Decimal = Field(
        default=Decimal("0"), validation_alias=AliasChoices("holds", "hold")
    )
    profile_id: str | None = None

    @property
    def is_empty(self) -> bool:
        """Check if the account holds no funds."""
        return self.balance == 0


class AccountHistoryDetails(BaseModel):
    """Reference to the order, trade or transfer behind a ledger entry."""

    order_id: UUID | None = None
    trade_id: str | None = None
    product_id: str | None = None
    transfer_id: str | None = None
    transfer_type: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class AccountHistory(GdaxRecord):
    """A single ledger entry that increased or decreased an account balance."""

    id: int
    created_at: datetime
    amount: Decimal
    balance: Decimal
    type: LedgerEntryType
    details: AccountHistoryDetails = Field(default_factory=AccountHistoryDetails)

    @property
    def is_fee(self) -> bool:
        """Check if this entry is a trading fee."""
        return self.type == LedgerEntryType.FEE


class AccountHold(GdaxRecord):
    """Funds reserved on an account by an open order or a withdrawal."""

    id: UUID
    account_id: UUID
    created_at: datetime
    updated_at: datetime
    amount: Decimal
    type: str  # "order" or "transfer"
    ref: str
