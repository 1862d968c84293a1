"""
GDAX client service.

This module provides the public entry point of the library: one object
exposing every REST accessor and the streaming feed. List accessors return
lazy collections that fetch nothing until consumed.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from uuid import UUID

from src.gdax.connection.access import AccessInfo
from src.gdax.connection.feed import feed
from src.gdax.enums import OrderStatus, OrderType
from src.gdax.model.account import Account
from src.gdax.model.feed import FeedMessage, Subscription
from src.gdax.model.order import Order
from src.gdax.model.report import Report
from src.gdax.resources import accounts, orders, reports
from src.gdax.resources.accounts import (
    AccountCollection,
    AccountHistoryCollection,
    AccountHoldCollection,
)
from src.gdax.resources.coinbase_accounts import CoinbaseAccountCollection
from src.gdax.resources.fills import FillCollection
from src.gdax.resources.orders import CancelledOrderCollection, OrderCollection


class GdaxClient:
    """
    Client for the GDAX REST API and websocket feed.

    Example:
        with GdaxClient.from_env() as client:
            for account in client.get_accounts():
                print(account.currency, account.balance)

    """

    def __init__(self, access: AccessInfo) -> None:
        """
        Initialize the client.

        Args:
            access: Authenticated access used by every request

        """
        self.access = access

    @classmethod
    def from_env(cls, **kwargs: Any) -> "GdaxClient":
        """Create a client with credentials from the environment."""
        return cls(AccessInfo.from_env(**kwargs))

    @classmethod
    def from_file(cls, path: str | Path, **kwargs: Any) -> "GdaxClient":
        """Create a client with credentials from a JSON key file."""
        return cls(AccessInfo.from_file(path, **kwargs))

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.access.close()

    def __enter__(self) -> "GdaxClient":
        """Enter context manager."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Exit context manager, closing the client."""
        self.close()

    # Accounts
    def get_accounts(self) -> AccountCollection:
        """List all trading accounts."""
        return AccountCollection(self.access)

    def get_account(self, account_id: UUID) -> Account:
        """Get a single trading account."""
        return accounts.get_account(self.access, account_id)

    def get_account_history(self, account_id: UUID) -> AccountHistoryCollection:
        """List the ledger entries of an account."""
        return AccountHistoryCollection(self.access, account_id)

    def get_account_holds(self, account_id: UUID) -> AccountHoldCollection:
        """List the holds on an account."""
        return AccountHoldCollection(self.access, account_id)

    def get_coinbase_accounts(self) -> CoinbaseAccountCollection:
        """List the linked Coinbase wallets."""
        return CoinbaseAccountCollection(self.access)

    # Fills
    def get_fills(
        self, *order_ids: UUID, product_id: str | None = None
    ) -> FillCollection:
        """List fills, optionally for some orders and a product."""
        return FillCollection(self.access, order_ids, product_id)

    def get_fills_for_product(self, product_id: str, *order_ids: UUID) -> FillCollection:
        """List fills of a product, optionally for some orders."""
        return FillCollection(self.access, order_ids, product_id)

    # Orders
    def get_orders(
        self, *statuses: OrderStatus | str, product_id: str | None = None
    ) -> OrderCollection:
        """List orders with the given statuses (all orders by default)."""
        return OrderCollection(self.access, statuses, product_id)

    def get_orders_for_product(
        self, product_id: str, *statuses: OrderStatus | str
    ) -> OrderCollection:
        """List orders of a product with the given statuses."""
        return OrderCollection(self.access, statuses, product_id)

    def get_order(self, order_id: UUID) -> Order:
        """Get a single order."""
        return orders.get_order(self.access, order_id)

    def place_market_order(self, order: Order) -> Order:
        """Place a market order."""
        return orders.place_order(self.access, order, OrderType.MARKET)

    def place_limit_order(self, order: Order) -> Order:
        """Place a limit order."""
        return orders.place_order(self.access, order, OrderType.LIMIT)

    def cancel_order(self, order_id: UUID) -> CancelledOrderCollection:
        """Cancel an order; the request is sent when the result is consumed."""
        return CancelledOrderCollection(self.access, order_id=order_id)

    def cancel_all_orders(self) -> CancelledOrderCollection:
        """Cancel every open order; sent when the result is consumed."""
        return CancelledOrderCollection(self.access)

    def cancel_all_orders_for_product(
        self, product_id: str
    ) -> CancelledOrderCollection:
        """Cancel every open order of a product; sent when the result is consumed."""
        return CancelledOrderCollection(self.access, product_id=product_id)

    # Reports
    def create_report(self, report: Report) -> Report:
        """Request generation of a report."""
        return reports.create_report(self.access, report)

    def get_report_status(self, report_id: UUID) -> Report:
        """Get the generation status of a report."""
        return reports.get_report_status(self.access, report_id)

    # Feed
    def feed(
        self,
        subscription: Subscription,
        message_handler: Callable[[FeedMessage], None],
        url: str | None = None,
    ) -> None:
        """Subscribe to the websocket feed; blocks until the feed ends."""
        feed(subscription, message_handler, url=url)
