"""
Order resources.

Listing orders and cancelling them are both lazy: cancellation only
happens when the returned collection is first consumed, and yields the ids
of the cancelled orders.
"""

import logging
from collections.abc import Sequence
from urllib.parse import urlencode
from uuid import UUID, uuid4

from src.gdax.connection.access import AccessInfo
from src.gdax.enums import OrderStatus, OrderType
from src.gdax.model.order import Order
from src.gdax.pagination import CollectionTransport, PageableCollection

logger = logging.getLogger(__name__)


class OrderCollection(PageableCollection[Order]):
    """
    Orders filtered by status and product.

    Without explicit statuses every order is listed (``status=all``).
    """

    def __init__(
        self,
        transport: CollectionTransport,
        statuses: Sequence[OrderStatus | str] = (),
        product_id: str | None = None,
    ) -> None:
        self.statuses = [OrderStatus(s) for s in statuses] or [OrderStatus.ALL]
        self.product_id = product_id

        params = [("status", status.value) for status in self.statuses]
        if product_id:
            params.append(("product_id", product_id))

        super().__init__(transport, Order, "GET", "/orders", params=urlencode(params))


class CancelledOrderCollection(PageableCollection[UUID]):
    """Ids of the orders cancelled by a DELETE /orders request."""

    def __init__(
        self,
        transport: CollectionTransport,
        order_id: UUID | None = None,
        product_id: str | None = None,
    ) -> None:
        self.order_id = order_id
        self.product_id = product_id

        params: list[tuple[str, str]] = []
        if product_id:
            params.append(("product_id", product_id))
        if order_id is not None:
            params.append(("order_id", str(order_id)))

        super().__init__(
            transport,
            UUID,
            "DELETE",
            "/orders",
            params=urlencode(params),
            uses_cursors=False,
        )


def get_order(access: AccessInfo, order_id: UUID) -> Order:
    """GET /orders/<order-id>."""
    return access.request("GET", f"/orders/{order_id}", "", Order)


def place_order(access: AccessInfo, order: Order, order_type: OrderType) -> Order:
    """
    POST /orders.

    A client_oid is generated when the order has none. Fields the exchange
    does not echo back are filled in from the submitted order.

    Args:
        access: Authenticated access
        order: Order to place
        order_type: Market or limit

    Returns:
        The placed order as reported by the exchange

    """
    order = order.model_copy(
        update={"type": order_type, "client_oid": order.client_oid or uuid4()}
    )
    logger.info(
        f"Placing {order_type.value} {order.side.value} order on {order.product_id}"
    )
    placed = access.request("POST", "/orders", order.to_request_body(), Order)
    return placed.fill_unset_from(order)
