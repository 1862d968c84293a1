"""
Enums for the GDAX API vocabulary.

This module defines the string values the exchange uses for order parameters,
ledger entries, reports and feed messages. All enums subclass ``str`` so they
serialize directly into query strings and JSON bodies.

"""

import enum

# =============================================================================
# ORDER ENUMS
# =============================================================================


class Side(str, enum.Enum):
    """Order or fill side."""

    BUY = "buy"
    SELL = "sell"


class OrderType(str, enum.Enum):
    """Order execution type."""

    LIMIT = "limit"
    MARKET = "market"


class StopType(str, enum.Enum):
    """Stop order direction."""

    LOSS = "loss"  # Triggers when price falls to stop_price
    ENTRY = "entry"  # Triggers when price rises to stop_price


class TimeInForce(str, enum.Enum):
    """Limit order time-in-force policy."""

    GOOD_TILL_TIME = "GTT"
    GOOD_TILL_CANCELLED = "GTC"
    IMMEDIATE_OR_CANCEL = "IOC"
    FILL_OR_KILL = "FOK"


class CancelAfter(str, enum.Enum):
    """Expiry window for GTT orders."""

    MIN = "min"
    HOUR = "hour"
    DAY = "day"


class SelfTradePrevention(str, enum.Enum):
    """Self-trade prevention flag."""

    DECREASE_AND_CANCEL = "dc"
    CANCEL_OLDEST = "co"
    CANCEL_NEWEST = "cn"
    CANCEL_BOTH = "cb"


class OrderStatus(str, enum.Enum):
    """Order status, also used as the ``status`` filter when listing orders."""

    OPEN = "open"
    PENDING = "pending"
    ACTIVE = "active"
    DONE = "done"
    REJECTED = "rejected"
    ALL = "all"  # Filter only


class Liquidity(str, enum.Enum):
    """Whether a fill added or removed liquidity."""

    MAKER = "M"
    TAKER = "T"


# =============================================================================
# ACCOUNT ENUMS
# =============================================================================


class LedgerEntryType(str, enum.Enum):
    """Account ledger entry types."""

    TRANSFER = "transfer"
    MATCH = "match"
    FEE = "fee"
    REBATE = "rebate"


# =============================================================================
# REPORT ENUMS
# =============================================================================


class ReportType(str, enum.Enum):
    """Kind of report to generate."""

    FILLS = "fills"
    ACCOUNT = "account"


class ReportFormat(str, enum.Enum):
    """Report output format."""

    PDF = "pdf"
    CSV = "csv"


class ReportStatus(str, enum.Enum):
    """Report generation status."""

    PENDING = "pending"
    CREATING = "creating"
    READY = "ready"


# =============================================================================
# FEED ENUMS
# =============================================================================


class FeedChannel(str, enum.Enum):
    """Feed channels a subscription may name."""

    HEARTBEAT = "heartbeat"
    TICKER = "ticker"
    LEVEL2 = "level2"
    USER = "user"
    MATCHES = "matches"
    FULL = "full"


class FeedMessageType(str, enum.Enum):
    """Values of the ``type`` field on feed messages."""

    SUBSCRIBE = "subscribe"
    SUBSCRIPTIONS = "subscriptions"
    HEARTBEAT = "heartbeat"
    TICKER = "ticker"
    SNAPSHOT = "snapshot"
    L2UPDATE = "l2update"
    MATCH = "match"
    ERROR = "error"
