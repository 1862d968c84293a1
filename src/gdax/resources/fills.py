"""Fill resources."""

from collections.abc import Sequence
from urllib.parse import urlencode
from uuid import UUID

from src.gdax.model.fill import Fill
from src.gdax.pagination import CollectionTransport, PageableCollection


class FillCollection(PageableCollection[Fill]):
    """
    Recent fills, optionally restricted to some orders and a product.

    Order ids are sent as a single comma-separated ``order_id`` parameter.
    """

    def __init__(
        self,
        transport: CollectionTransport,
        order_ids: Sequence[UUID] = (),
        product_id: str | None = None,
    ) -> None:
        self.order_ids = list(order_ids)
        self.product_id = product_id

        params: list[tuple[str, str]] = []
        if self.order_ids:
            params.append(("order_id", ",".join(str(i) for i in self.order_ids)))
        if product_id:
            params.append(("product_id", product_id))

        super().__init__(
            transport, Fill, "GET", "/fills", params=urlencode(params, safe=",")
        )
