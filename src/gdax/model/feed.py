"""
GDAX websocket feed Pydantic models.

This module implements Pydantic models for the messages of the GDAX push
feed. Every message carries a ``type`` field that selects its model.

Key design principles:
- Models inherit from a common FeedMessage base exposing ``message_type``
- Exchange values are parsed as-is, with prices and sizes as Decimal
- Order book levels sent as positional arrays are normalized into models
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.gdax.enums import FeedChannel, FeedMessageType, Side


# Subscription request
class Subscription(BaseModel):
    """
    Subscription request sent when the feed connection opens.

    No feed message is delivered before a subscription is sent.
    """

    type: FeedMessageType = FeedMessageType.SUBSCRIBE
    channels: list[FeedChannel]
    product_ids: list[str]

    model_config = ConfigDict(frozen=True)


# Base Message Model
class FeedMessage(BaseModel):
    """
    Base model for all feed messages.

    This class provides the common structure for every message type
    delivered by the GDAX websocket feed.
    """

    type: str
    product_id: str = Field(default="")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def message_type(self) -> FeedMessageType:
        """Get the message type as enum value."""
        return FeedMessageType(self.type)


class PriceLevel(BaseModel):
    """A single price level of a level2 snapshot."""

    price: Decimal
    size: Decimal

    model_config = ConfigDict(frozen=True)


class Change(BaseModel):
    """A single price level change of a level2 update."""

    side: Side
    price: Decimal
    size: Decimal

    model_config = ConfigDict(frozen=True)

    @property
    def is_removal(self) -> bool:
        """Check if the change removes the price level."""
        return self.size == 0


# Channel Models
class Heartbeat(FeedMessage):
    """Heartbeat sent once a second on the heartbeat channel."""

    sequence: int
    last_trade_id: int
    time: datetime


class Ticker(FeedMessage):
    """Real-time price update sent on every match on the ticker channel."""

    trade_id: int | None = None
    sequence: int
    time: datetime | None = None
    price: Decimal
    side: Side | None = None
    last_size: Decimal | None = None
    best_bid: Decimal | None = None
    best_ask: Decimal | None = None

    @property
    def spread(self) -> Decimal | None:
        """
        Get spread between best bid and ask.

        Calculated as best_ask - best_bid or None if either side is missing.
        """
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid


class Snapshot(FeedMessage):
    """
    Full order book state sent first on the level2 channel.

    Levels arrive as ``[price, size]`` string pairs. Bids are kept sorted
    descending and asks ascending.
    """

    bids: list[PriceLevel] = Field(default_factory=list)
    asks: list[PriceLevel] = Field(default_factory=list)

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def parse_levels(cls, levels: list[Any]) -> list[Any]:
        """Convert positional ``[price, size]`` pairs into level mappings."""
        return [
            {"price": level[0], "size": level[1]}
            if isinstance(level, list | tuple)
            else level
            for level in levels
        ]

    @field_validator("bids")
    @classmethod
    def sort_bids(cls, levels: list[PriceLevel]) -> list[PriceLevel]:
        """Sort bids descending by price."""
        return sorted(levels, key=lambda level: level.price, reverse=True)

    @field_validator("asks")
    @classmethod
    def sort_asks(cls, levels: list[PriceLevel]) -> list[PriceLevel]:
        """Sort asks ascending by price."""
        return sorted(levels, key=lambda level: level.price)

    @property
    def best_bid(self) -> Decimal | None:
        """Get the highest bid price or None if no bids."""
        return self.bids[0].price if self.bids else None

    @property
    def best_ask(self) -> Decimal | None:
        """Get the lowest ask price or None if no asks."""
        return self.asks[0].price if self.asks else None


class L2Update(FeedMessage):
    """
    Incremental order book change on the level2 channel.

    Changes arrive as ``[side, price, size]`` triples; a size of zero
    removes the level.
    """

    changes: list[Change] = Field(default_factory=list)

    @field_validator("changes", mode="before")
    @classmethod
    def parse_changes(cls, changes: list[Any]) -> list[Any]:
        """Convert positional ``[side, price, size]`` triples into mappings."""
        return [
            {"side": change[0], "price": change[1], "size": change[2]}
            if isinstance(change, list | tuple)
            else change
            for change in changes
        ]


class Match(FeedMessage):
    """A trade between two orders on the matches channel."""

    time: datetime
    sequence: int
    trade_id: int
    maker_order_id: UUID
    taker_order_id: UUID
    size: Decimal
    price: Decimal
    side: Side

    @property
    def value(self) -> Decimal:
        """Calculate trade value (price * size)."""
        return self.price * self.size


class ErrorMessage(FeedMessage):
    """Error sent by the feed, after which the server closes the connection."""

    message: str
    reason: str | None = None
