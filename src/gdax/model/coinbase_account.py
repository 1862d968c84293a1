"""Coinbase wallet accounts linked to the exchange profile."""

from decimal import Decimal
from uuid import UUID

from src.gdax.model.base import GdaxRecord


class CoinbaseAccount(GdaxRecord):
    """A Coinbase wallet available for deposits and withdrawals."""

    id: UUID
    name: str
    balance: Decimal
    currency: str
    type: str  # "wallet" or "fiat"
    primary: bool = False
    active: bool = True
