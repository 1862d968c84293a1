"""Coinbase wallet resources."""

from src.gdax.model.coinbase_account import CoinbaseAccount
from src.gdax.pagination import CollectionTransport, PageableCollection


class CoinbaseAccountCollection(PageableCollection[CoinbaseAccount]):
    """All Coinbase wallets, returned by GET /coinbase-accounts in one response."""

    def __init__(self, transport: CollectionTransport) -> None:
        super().__init__(
            transport, CoinbaseAccount, "GET", "/coinbase-accounts", uses_cursors=False
        )
