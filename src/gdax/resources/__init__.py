"""
============================

GDAX REST Resources.

============================

Each module configures the pagination engine for one family of list
endpoints and implements the single-shot calls of that family.

"""

from src.gdax.resources.accounts import (
    AccountCollection,
    AccountHistoryCollection,
    AccountHoldCollection,
)
from src.gdax.resources.coinbase_accounts import CoinbaseAccountCollection
from src.gdax.resources.fills import FillCollection
from src.gdax.resources.orders import CancelledOrderCollection, OrderCollection

__all__ = [
    "AccountCollection",
    "AccountHistoryCollection",
    "AccountHoldCollection",
    "CancelledOrderCollection",
    "CoinbaseAccountCollection",
    "FillCollection",
    "OrderCollection",
]
