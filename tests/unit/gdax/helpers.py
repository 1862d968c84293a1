"""Test helpers for GDAX client tests."""

import base64
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from src.gdax.config import Credentials
from src.gdax.connection.access import AccessInfo
from src.gdax.errors import GdaxError
from src.gdax.pagination import Cursor

ENDPOINT = "https://api.test.gdax"
SECRET = base64.b64encode(b"test-secret").decode("ascii")

ACCOUNTS_JSON = """
[
    {
        "id": "71452118-efc7-4cc4-8780-a5e22d4baa53",
        "currency": "BTC",
        "balance": "0.0000000000000000",
        "available": "0.0000000000000000",
        "hold": "0.0000000000000000",
        "profile_id": "75da88c5-05bf-4f54-bc85-5c775bd68254"
    },
    {
        "id": "e316cb9a-0808-4fd7-8914-97829c1925de",
        "currency": "USD",
        "balance": "80.2301373066930000",
        "available": "79.2266348066930000",
        "hold": "1.0035025000000000",
        "profile_id": "75da88c5-05bf-4f54-bc85-5c775bd68254"
    }
]
"""

ACCOUNT_JSON = """
{
    "id": "6cf2b1ba-3705-40e6-a41e-69be033514f7",
    "balance": "1.100",
    "holds": "0.100",
    "available": "1.00",
    "currency": "USD"
}
"""

NOT_FOUND = '{"message": "Account id not found"}'


def ledger_entry(order_id: str, balance: str, entry_id: int = 100) -> dict[str, Any]:
    """Build a ledger entry for a fee."""
    return {
        "id": entry_id,
        "created_at": "2014-11-07T08:19:27.028459Z",
        "amount": "0.001",
        "balance": balance,
        "type": "fee",
        "details": {
            "order_id": order_id,
            "trade_id": "74",
            "product_id": "BTC-USD",
        },
    }


def hold(hold_id: str, amount: str) -> dict[str, Any]:
    """Build an order hold."""
    return {
        "id": hold_id,
        "account_id": "e0b3f39a-183d-453e-b754-0c13e5bab0b3",
        "created_at": "2014-11-06T10:34:47.123456Z",
        "updated_at": "2014-11-06T10:40:47.123456Z",
        "amount": amount,
        "type": "order",
        "ref": "0a205de4-dd35-4370-a285-fe8fc375a273",
    }


def fill(order_id: str, price: str = "10.00", size: str = "0.01") -> dict[str, Any]:
    """Build a taker buy fill on BTC-USD."""
    return {
        "trade_id": 74,
        "product_id": "BTC-USD",
        "price": price,
        "size": size,
        "order_id": order_id,
        "created_at": "2014-11-07T22:19:28.578544Z",
        "liquidity": "T",
        "fee": "0.00025",
        "settled": True,
        "side": "buy",
    }


def order(order_id: str, status: str = "open") -> dict[str, Any]:
    """Build a limit buy order as returned by the exchange."""
    return {
        "id": order_id,
        "price": "0.10000000",
        "size": "0.01000000",
        "product_id": "BTC-USD",
        "side": "buy",
        "stp": "dc",
        "type": "limit",
        "time_in_force": "GTC",
        "post_only": False,
        "created_at": "2016-12-08T20:02:28.53864Z",
        "fill_fees": "0.0000000000000000",
        "filled_size": "0.00000000",
        "executed_value": "0.0000000000000000",
        "status": status,
        "settled": False,
    }


@dataclass
class MockRoute:
    """A canned response for one request; each route answers once."""

    method: str
    path: str
    status: int
    body: str
    headers: dict[str, str]
    params: dict[str, str]

    def matches(self, request: httpx.Request) -> bool:
        """Check method, path and the required query parameters."""
        if request.method != self.method or request.url.path != self.path:
            return False
        return all(
            request.url.params.get(key) == value for key, value in self.params.items()
        )


@dataclass
class MockExchange:
    """
    Mock GDAX REST server for testing without network calls.

    Routes are matched in registration order and consumed on first use,
    so successive pages of one endpoint are registered one after another.
    """

    routes: list[MockRoute] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        body: str | list[Any] | dict[str, Any],
        status: int = 200,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> "MockExchange":
        """Register a response."""
        text = body if isinstance(body, str) else json.dumps(body)
        self.routes.append(
            MockRoute(method, path, status, text, headers or {}, params or {})
        )
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Answer a request from the first matching route."""
        self.requests.append(request)
        for route in self.routes:
            if route.matches(request):
                self.routes.remove(route)
                return httpx.Response(
                    route.status, text=route.body, headers=route.headers
                )
        return httpx.Response(
            501, json={"message": f"No mock for {request.method} {request.url}"}
        )

    def client(self) -> httpx.Client:
        """Create an HTTP client served by this mock."""
        return httpx.Client(transport=httpx.MockTransport(self.handle))

    def access(self) -> AccessInfo:
        """Create access info with test credentials served by this mock."""
        credentials = Credentials(
            public_key="test-key", private_key=SECRET, passphrase="test-pass"
        )
        return AccessInfo(credentials, endpoint=ENDPOINT, client=self.client())


class FakeTransport:
    """
    Scripted transport for pagination tests.

    Each call to collection_request consumes the next scripted result: a
    list of records with an optional next cursor, or an error to raise.
    """

    def __init__(self, *results: tuple[list[Any], Cursor] | GdaxError) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, str, str]] = []

    def collection_request(
        self, method: str, path: str, body: str = ""
    ) -> tuple[bytes, Cursor]:
        self.calls.append((method, path, body))
        if not self.results:
            raise AssertionError(f"Unexpected fetch: {method} {path}")
        result = self.results.pop(0)
        if isinstance(result, GdaxError):
            raise result
        records, cursor = result
        return json.dumps(records).encode(), cursor


def page(*values: Any, after: str = "") -> tuple[list[Any], Cursor]:
    """Build a scripted page with an optional CB-AFTER cursor."""
    return list(values), Cursor(after=after)


def drain(has_more: Callable[[], bool], take_next: Callable[[], Any]) -> list[Any]:
    """Consume a collection with the explicit has_more/take_next protocol."""
    records = []
    while has_more():
        records.append(take_next())
    return records
