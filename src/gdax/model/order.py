"""
Order model.

The same model describes an order to place (request fields) and an order
returned by the exchange (request fields plus the execution state).
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.gdax.enums import (
    CancelAfter,
    OrderStatus,
    OrderType,
    SelfTradePrevention,
    Side,
    StopType,
    TimeInForce,
)
from src.gdax.model.base import GdaxRecord


class Order(GdaxRecord):
    """An order placed on, or returned by, the exchange."""

    side: Side
    product_id: str
    type: OrderType | None = None
    client_oid: UUID | None = None
    stp: SelfTradePrevention | None = None
    stop: StopType | None = None
    stop_price: Decimal | None = None
    time_in_force: TimeInForce | None = None
    cancel_after: CancelAfter | None = None
    funds: Decimal | None = None

    # Execution state, set by the exchange
    id: UUID | None = None
    price: Decimal | None = None
    size: Decimal | None = None
    post_only: bool | None = None
    created_at: datetime | None = None
    fill_fees: Decimal | None = None
    filled_size: Decimal | None = None
    executed_value: Decimal | None = None
    status: OrderStatus | None = None
    settled: bool | None = None

    @property
    def remaining_size(self) -> Decimal | None:
        """Size not yet filled, or None when the order has no size."""
        if self.size is None:
            return None
        return self.size - (self.filled_size or Decimal("0"))
