"""GDAX record and feed message models."""

from src.gdax.model.account import (
    Account,
    AccountHistory,
    AccountHistoryDetails,
    AccountHold,
)
from src.gdax.model.base import GdaxRecord
from src.gdax.model.coinbase_account import CoinbaseAccount
from src.gdax.model.feed import (
    Change,
    ErrorMessage,
    FeedMessage,
    Heartbeat,
    L2Update,
    Match,
    PriceLevel,
    Snapshot,
    Subscription,
    Ticker,
)
from src.gdax.model.fill import Fill
from src.gdax.model.order import Order
from src.gdax.model.report import Report, ReportParams

__all__ = [
    "Account",
    "AccountHistory",
    "AccountHistoryDetails",
    "AccountHold",
    "Change",
    "CoinbaseAccount",
    "ErrorMessage",
    "FeedMessage",
    "Fill",
    "GdaxRecord",
    "Heartbeat",
    "L2Update",
    "Match",
    "Order",
    "PriceLevel",
    "Report",
    "ReportParams",
    "Snapshot",
    "Subscription",
    "Ticker",
]
