"""
Fill model.

A fill is a partial or complete match of one of the user's orders.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.gdax.enums import Liquidity, Side
from src.gdax.model.base import GdaxRecord


class Fill(GdaxRecord):
    """An executed match against one of the user's orders."""

    trade_id: int
    product_id: str
    price: Decimal
    size: Decimal
    order_id: UUID
    created_at: datetime
    liquidity: Liquidity
    fee: Decimal
    settled: bool
    side: Side

    @property
    def value(self) -> Decimal:
        """Calculate fill value (price * size)."""
        return self.price * self.size

    @property
    def is_maker(self) -> bool:
        """Check if the fill provided liquidity."""
        return self.liquidity == Liquidity.MAKER
